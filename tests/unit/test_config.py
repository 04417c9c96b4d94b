"""Тесты для StructCommSettings, configure_logging и build_service."""

import logging

import pytest

from structcomm import config
from structcomm.config import StructCommSettings, build_service, configure_logging
from structcomm.generator import SystemRandomSource


class TestSettings:
    """Тесты для StructCommSettings.from_env"""

    def test_defaults(self, monkeypatch) -> None:
        for name in ("LOG_LEVEL", "RECOVERY_USE_RAW", "RECOVERY_PLUS_FOR_SPACE"):
            monkeypatch.delenv(f"STRUCTCOMM_{name}", raising=False)
        settings = StructCommSettings.from_env()
        assert settings == StructCommSettings()
        assert settings.log_level == "WARNING"

    def test_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("STRUCTCOMM_LOG_LEVEL", " debug ")
        monkeypatch.setenv("STRUCTCOMM_RECOVERY_USE_RAW", "false")
        monkeypatch.setenv("STRUCTCOMM_RECOVERY_PLUS_FOR_SPACE", "0")
        settings = StructCommSettings.from_env()
        assert settings.log_level == "DEBUG"
        assert settings.recovery_use_raw is False
        assert settings.recovery_plus_for_space is False

    def test_unknown_log_level_falls_back(self, monkeypatch) -> None:
        """Неизвестный уровень не ломает configure_logging"""
        monkeypatch.setenv("STRUCTCOMM_LOG_LEVEL", "verbose")
        settings = StructCommSettings.from_env()
        assert settings.log_level == "WARNING"
        assert configure_logging(settings).level == logging.WARNING

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            StructCommSettings().log_level = "INFO"


class TestBuildService:
    """Тесты для build_service"""

    def test_default_wiring(self) -> None:
        service = build_service()
        assert isinstance(service.generator.random_source, SystemRandomSource)
        assert len(service.recovery_policy.steps) == 4

    def test_recovery_from_settings(self) -> None:
        service = build_service(StructCommSettings(recovery_use_raw=False))
        assert [s.name for s in service.recovery_policy.steps] == [
            "primary",
            "primary_plus_for_space",
        ]
        result = service.validate_structured_with_recovery("bad", "+++123/4567/89095+++")
        assert result.valid is False


class TestConfigureLogging:
    """Тесты для configure_logging"""

    def test_idempotent(self) -> None:
        logger = configure_logging(StructCommSettings(log_level="DEBUG"))
        count = len(logger.handlers)
        configure_logging(StructCommSettings(log_level="INFO"))
        assert len(logger.handlers) == count
        assert logger.level == logging.INFO

    def test_single_structcomm_handler(self) -> None:
        """Повторные вызовы оставляют ровно один handler с форматом structcomm"""
        logger = configure_logging(StructCommSettings())
        configure_logging(StructCommSettings())
        configure_logging(StructCommSettings())
        ours = [h for h in logger.handlers if h is config._HANDLER]
        assert len(ours) == 1
        assert ours[0].formatter._fmt == config.LOG_FORMAT

    def test_recovery_logged(self, caplog) -> None:
        configure_logging(StructCommSettings(log_level="INFO"))
        with caplog.at_level(logging.INFO, logger="structcomm"):
            build_service().validate_structured_with_recovery("   123/4567/89095   ")
        assert "primary_plus_for_space" in caplog.text
