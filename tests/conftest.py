"""Pytest configuration and shared database fixtures.

.tablequery_env is loaded first (when present) so local overrides such as
LOG_LEVEL apply before the suite opts into tablequery's JSON logging
with configure_logging().
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

_TQ_ENV_FILE = Path(__file__).parent.parent / ".tablequery_env"
if _TQ_ENV_FILE.exists():
    load_dotenv(_TQ_ENV_FILE, override=True)

from typing import Generator

import pytest
from sqlalchemy import Connection, Engine, create_engine

from tablequery.config.settings import get_settings
from tablequery.utils.logging import configure_logging

configure_logging()

USERS_DDL = (
    "CREATE TABLE users ("
    "id INTEGER PRIMARY KEY, "
    "name TEXT NOT NULL, "
    "email TEXT UNIQUE, "
    "active BOOLEAN, "
    "score REAL, "
    "avatar BLOB)"
)


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings around each test so monkeypatched env vars apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sqlite_engine() -> Generator[Engine, None, None]:
    """In-memory SQLite engine; pysqlite uses the qmark paramstyle."""
    engine = create_engine("sqlite:///:memory:")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def connection(sqlite_engine: Engine) -> Generator[Connection, None, None]:
    """Open connection with an empty ``users`` table."""
    with sqlite_engine.connect() as conn:
        conn.exec_driver_sql(USERS_DDL)
        yield conn


@pytest.fixture
def file_engine(tmp_path: Path) -> Generator[Engine, None, None]:
    """File-backed SQLite engine with a ``users`` table, shared across connections."""
    engine = create_engine(f"sqlite:///{tmp_path / 'tablequery.db'}")
    with engine.begin() as conn:
        conn.exec_driver_sql(USERS_DDL)
    try:
        yield engine
    finally:
        engine.dispose()
