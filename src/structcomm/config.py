"""Lightweight configuration loader and logging setup."""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Final

from structcomm.generator.generator import CodeGenerator
from structcomm.recovery.policy import RecoveryConfig, RecoveryPolicy
from structcomm.service.facade import StructCommService

ENV_PREFIX: Final[str] = "STRUCTCOMM_"

LOG_FORMAT: Final[str] = "%(asctime)s [%(levelname)-5s] %(name)s: %(message)s"

# Единственный handler, который ставит configure_logging
_HANDLER: logging.Handler | None = None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off"}


@dataclass(frozen=True)
class StructCommSettings:
    """Immutable configuration sourced from environment variables."""

    log_level: str = "WARNING"
    recovery_use_raw: bool = True
    recovery_plus_for_space: bool = True

    @classmethod
    def from_env(cls) -> "StructCommSettings":
        log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", cls.log_level).strip().upper()
        # Неизвестный уровень заменяется на default
        if not isinstance(logging.getLevelName(log_level), int):
            log_level = cls.log_level

        return cls(
            log_level=log_level,
            recovery_use_raw=_env_bool(f"{ENV_PREFIX}RECOVERY_USE_RAW", cls.recovery_use_raw),
            recovery_plus_for_space=_env_bool(
                f"{ENV_PREFIX}RECOVERY_PLUS_FOR_SPACE", cls.recovery_plus_for_space
            ),
        )

    def recovery_config(self) -> RecoveryConfig:
        return RecoveryConfig(
            use_raw_alternate=self.recovery_use_raw,
            plus_for_space=self.recovery_plus_for_space,
        )


def configure_logging(settings: StructCommSettings) -> logging.Logger:
    """
    Один stream handler на логгере 'structcomm'.

    Повторный вызов меняет уровень, но не добавляет второй handler.
    """
    logger = logging.getLogger("structcomm")
    logger.setLevel(settings.log_level)

    global _HANDLER
    if _HANDLER is None:
        _HANDLER = logging.StreamHandler(sys.stderr)
        _HANDLER.setFormatter(logging.Formatter(LOG_FORMAT))
    if _HANDLER not in logger.handlers:
        logger.addHandler(_HANDLER)

    return logger


def build_service(settings: StructCommSettings | None = None) -> StructCommService:
    """Сервис с CSPRNG генератором и лестницей восстановления из настроек."""
    settings = settings or StructCommSettings()
    return StructCommService(
        generator=CodeGenerator(),
        recovery_policy=RecoveryPolicy(settings.recovery_config()),
    )


__all__ = ["StructCommSettings", "build_service", "configure_logging"]
