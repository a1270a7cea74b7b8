"""Unit tests for settings and logging configuration."""

import logging

import pytest
from pydantic import ValidationError

from smartbill.infrastructure.config.settings import Settings, get_settings
from smartbill.infrastructure.observability.logging_config import configure_logging

pytestmark = pytest.mark.unit


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.environment == "dev"
    assert settings.app_name == "SmartBill"
    assert settings.log_level == "INFO"
    assert settings.audit_logger_name == "smartbill.audit"
    assert settings.id_sequence_start == 0
    assert not settings.is_production


def test_log_level_is_normalised():
    settings = Settings(_env_file=None, log_level=" debug ")

    assert settings.log_level == "DEBUG"


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        Settings(_env_file=None, log_level="LOUD")

    assert exc_info.value.errors()[0]["loc"] == ("log_level",)


def test_negative_id_sequence_start_is_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, id_sequence_start=-1)


def test_environment_variables_are_read(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("ID_SEQUENCE_START", "500")

    settings = Settings(_env_file=None)

    assert settings.is_testing
    assert settings.id_sequence_start == 500


def test_get_settings_is_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()


def test_configure_logging_sets_levels():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    settings = Settings(_env_file=None, log_level="WARNING", audit_logger_name="smartbill.test_audit")

    try:
        configure_logging(settings)

        assert logging.getLogger("smartbill").level == logging.WARNING
        assert logging.getLogger("smartbill.test_audit").level == logging.WARNING
        assert root.level == logging.WARNING
        assert any(isinstance(h, logging.StreamHandler) for h in root.handlers)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        logging.getLogger("smartbill").setLevel(logging.NOTSET)
        logging.getLogger("smartbill.test_audit").setLevel(logging.NOTSET)
