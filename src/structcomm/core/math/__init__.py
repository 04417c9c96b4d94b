"""
Core math modules для structcomm

Арифметика контрольной пары mod-97.
"""

from structcomm.core.math.checksum import (
    BASE_LENGTH,
    CHECK_LENGTH,
    CHECK_MODULUS,
    compute_check,
    verify,
)

__all__ = [
    "BASE_LENGTH",
    "CHECK_LENGTH",
    "CHECK_MODULUS",
    "compute_check",
    "verify",
]
