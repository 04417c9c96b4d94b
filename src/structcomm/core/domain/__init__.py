"""
Domain models and value objects.

Contains the canonical Code value and the check result variants.
"""

from structcomm.core.domain.code import Code, ErrorKind, NotationKind
from structcomm.core.domain.result import (
    CheckErr,
    CheckMismatch,
    CheckOk,
    CheckResult,
    Outcome,
)

__all__ = [
    # Code model
    "Code",
    "ErrorKind",
    "NotationKind",
    # Results
    "CheckOk",
    "CheckMismatch",
    "CheckErr",
    "CheckResult",
    "Outcome",
]
