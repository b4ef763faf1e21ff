"""Structured logging for tablequery using structlog.

Importing tablequery never touches the host application's logging. Module
loggers from ``get_logger`` wrap a stdlib ``logging.Logger``, so records
follow whatever handlers and levels the host has set up, rendered with the
host's structlog processors if it configured any.

Applications (and the test suite) that want tablequery's own JSON output
call ``configure_logging()`` once at startup. It sets up:
- ISO-8601 timestamps, level and logger name
- Redaction of sensitive keys (password, token, api_key, secret, DATABASE_URL)
- JSON rendering
- A stdout handler, plus a daily rotating file when TQ_LOG_TO_FILE is on

Usage:
    >>> from tablequery.utils.logging import configure_logging, get_logger
    >>> configure_logging()
    >>> get_logger(__name__).info("statement_executed", operation="select")
"""

import logging
import re
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, MutableMapping, Optional

import structlog
from structlog.types import EventDict, Processor

from tablequery.config import get_settings

SENSITIVE_PATTERNS = [
    re.compile(r".*password.*", re.IGNORECASE),
    re.compile(r".*token.*", re.IGNORECASE),
    re.compile(r".*api_key.*", re.IGNORECASE),
    re.compile(r".*secret.*", re.IGNORECASE),
    re.compile(r"^DATABASE_URL$", re.IGNORECASE),
]

REDACTED_VALUE = "[REDACTED]"

# Handlers installed by configure_logging, removed again on reconfiguration
_installed_handlers: List[logging.Handler] = []


def _is_sensitive(key: Any) -> bool:
    return any(pattern.match(str(key)) for pattern in SENSITIVE_PATTERNS)


def sanitize_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``data`` with sensitive values replaced by [REDACTED].

    Nested dictionaries are sanitized recursively.

    Example:
        >>> sanitize_for_logging({"password": "secret123", "user": "admin"})
        {'password': '[REDACTED]', 'user': 'admin'}
    """
    sanitized: Dict[str, Any] = {}
    for key, value in data.items():
        if _is_sensitive(key):
            sanitized[key] = REDACTED_VALUE
        elif isinstance(value, dict):
            sanitized[key] = sanitize_for_logging(value)
        else:
            sanitized[key] = value
    return sanitized


def sanitization_processor(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    """Structlog processor applying ``sanitize_for_logging`` to each event."""
    return sanitize_for_logging(dict(event_dict))


def _log_file_path(log_dir: str) -> Path:
    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    return directory / f"tablequery-{datetime.now():%Y%m%d}.log"


def _build_handlers(level: int) -> List[logging.Handler]:
    settings = get_settings()
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if settings.log_to_file:
        handlers.append(
            TimedRotatingFileHandler(
                filename=str(_log_file_path(settings.log_file_dir)),
                when="midnight",
                interval=1,
                backupCount=30,  # 30-day retention
                encoding="utf-8",
            )
        )
    for handler in handlers:
        handler.setLevel(level)
    return handlers


def configure_logging(level: Optional[str] = None) -> None:
    """Install tablequery's JSON logging on the root logger.

    Safe to call more than once: handlers from an earlier call are replaced
    rather than duplicated.

    Args:
        level: Level name overriding the LOG_LEVEL setting
    """
    level_no = getattr(logging, (level or get_settings().LOG_LEVEL).upper(), logging.INFO)

    root = logging.getLogger()
    for handler in _installed_handlers:
        root.removeHandler(handler)
        handler.close()
    _installed_handlers[:] = _build_handlers(level_no)
    for handler in _installed_handlers:
        root.addHandler(handler)
    root.setLevel(level_no)

    processors: List[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        sanitization_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Get a structlog logger backed by the stdlib logger ``name``.

    Processors come from the active structlog configuration at call time;
    delivery, levels and handlers are the stdlib logger's.
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )


def bind_context(name: str, **kwargs: Any) -> Any:
    """Get a logger for ``name`` with ``kwargs`` bound to every event.

    Example:
        >>> log = bind_context(__name__, operation="select", table="users")
        >>> log.debug("sql.statement_executed", rowcount=2)
    """
    return get_logger(name).bind(**kwargs)
