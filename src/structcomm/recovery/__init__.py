"""Recovery — лестница восстановления '+'/пробел и транспортные помощники."""

from .policy import (
    RECOVERY_STEPS,
    InputSource,
    RecoveryAttempt,
    RecoveryConfig,
    RecoveryOutcome,
    RecoveryPolicy,
    RecoveryStep,
    identity,
    spaces_to_plus,
)
from .transport import normalize_query, raw_query_param

__all__ = [
    "RECOVERY_STEPS",
    "InputSource",
    "RecoveryStep",
    "RecoveryConfig",
    "RecoveryAttempt",
    "RecoveryOutcome",
    "RecoveryPolicy",
    "identity",
    "spaces_to_plus",
    "normalize_query",
    "raw_query_param",
]
