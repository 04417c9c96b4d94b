"""
structcomm — структурированные платёжные сообщения (+++XXX/XXXX/XXXXX+++)

Генерация, проверка mod-97 и поиск кодов в тексте, плюс лестница
восстановления ввода, искажённого транспортом ('+' ↔ пробел).
"""

from structcomm.config import StructCommSettings, build_service, configure_logging
from structcomm.core.domain import (
    CheckErr,
    CheckMismatch,
    CheckOk,
    CheckResult,
    Code,
    ErrorKind,
    NotationKind,
)
from structcomm.recovery import RecoveryConfig, RecoveryOutcome, RecoveryPolicy
from structcomm.service import StructCommService

__version__ = "0.1.0"

__all__ = [
    "Code",
    "ErrorKind",
    "NotationKind",
    "CheckOk",
    "CheckMismatch",
    "CheckErr",
    "CheckResult",
    "RecoveryConfig",
    "RecoveryOutcome",
    "RecoveryPolicy",
    "StructCommService",
    "StructCommSettings",
    "build_service",
    "configure_logging",
]
