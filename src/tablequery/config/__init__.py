"""Configuration management for tablequery.

Usage:
    >>> from tablequery.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.LOG_LEVEL)
"""

from tablequery.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
