"""Unit tests for the pydantic-settings configuration."""

import pytest
from pydantic import ValidationError

from tablequery.config.settings import Settings, get_settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "ENVIRONMENT",
        "LOG_LEVEL",
        "TQ_LOG_TO_FILE",
        "LOG_TO_FILE",
        "TQ_LOG_FILE_DIR",
        "LOG_FILE_DIR",
        "TQ_LOG_SQL_PARAMS",
        "TQ_DEFAULT_PARAMSTYLE",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.mark.unit
def test_defaults(clean_env):
    settings_instance = Settings(_env_file=None)

    assert settings_instance.ENVIRONMENT == "dev"
    assert settings_instance.LOG_LEVEL == "INFO"
    assert settings_instance.log_to_file is False
    assert settings_instance.log_file_dir == "logs"
    assert settings_instance.log_sql_params is False
    assert settings_instance.default_paramstyle == "qmark"


@pytest.mark.unit
def test_prefixed_environment_overrides(clean_env):
    clean_env.setenv("TQ_LOG_SQL_PARAMS", "true")
    clean_env.setenv("TQ_DEFAULT_PARAMSTYLE", "pyformat")
    clean_env.setenv("TQ_LOG_FILE_DIR", "/tmp/tq-logs")

    settings_instance = Settings(_env_file=None)

    assert settings_instance.log_sql_params is True
    assert settings_instance.default_paramstyle == "pyformat"
    assert settings_instance.log_file_dir == "/tmp/tq-logs"


@pytest.mark.unit
def test_log_level_normalized_to_uppercase(clean_env):
    clean_env.setenv("LOG_LEVEL", "debug")
    assert Settings(_env_file=None).LOG_LEVEL == "DEBUG"


@pytest.mark.unit
def test_invalid_log_level_rejected(clean_env):
    clean_env.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError) as exc_info:
        Settings(_env_file=None)

    assert "LOG_LEVEL" in str(exc_info.value)


@pytest.mark.unit
def test_invalid_paramstyle_rejected(clean_env):
    clean_env.setenv("TQ_DEFAULT_PARAMSTYLE", "dollar")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


@pytest.mark.unit
def test_invalid_environment_rejected(clean_env):
    clean_env.setenv("ENVIRONMENT", "qa")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


@pytest.mark.unit
def test_settings_singleton(clean_env):
    get_settings.cache_clear()

    assert get_settings() is get_settings()


@pytest.mark.unit
def test_settings_module_keeps_no_logger():
    """Configuration loading is logging-free; loggers live in tablequery.utils.logging."""
    from tablequery.config import settings as settings_module

    assert not hasattr(settings_module, "logger")
    assert not hasattr(settings_module, "structlog")
