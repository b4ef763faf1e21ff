"""
Configuration management for tablequery.

Environment-based configuration using Pydantic BaseSettings. Values come from
process environment variables and, when present, a ``.env`` file at the
project root (override the path with ``TQ_ENV_FILE``).
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("TQ_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE

ParamStyle = Literal["qmark", "format", "numeric", "named", "pyformat"]


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Unprefixed fields (uppercase names):
    - ENVIRONMENT: Deployment environment (dev, staging, prod)
    - LOG_LEVEL: Logging level

    Prefixed fields are read with the TQ_ prefix, e.g. TQ_LOG_SQL_PARAMS=1.
    """

    ENVIRONMENT: Literal["dev", "staging", "prod"] = Field(
        default="dev",
        validation_alias="ENVIRONMENT",
        description="Deployment environment",
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )

    log_to_file: bool = Field(
        default=False,
        validation_alias=AliasChoices("TQ_LOG_TO_FILE", "LOG_TO_FILE"),
        description="Also write logs to a daily rotating file",
    )
    log_file_dir: str = Field(
        default="logs",
        validation_alias=AliasChoices("TQ_LOG_FILE_DIR", "LOG_FILE_DIR"),
        description="Directory for log files",
    )
    log_sql_params: bool = Field(
        default=False,
        description="Include bound parameter values in statement logs",
    )
    default_paramstyle: ParamStyle = Field(
        default="qmark",
        description="DBAPI paramstyle used when building statements without a handle",
    )

    model_config = SettingsConfigDict(
        env_prefix="TQ_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize LOG_LEVEL to uppercase and reject unknown level names."""
        level_name = value.strip().upper()
        if not isinstance(logging.getLevelName(level_name), int):
            raise ValueError(
                f"LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL; "
                f"got: {value!r}"
            )
        return level_name


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
