"""
Core pytest configuration for the entire test suite.

This module provides only the essential database setup and core utilities
that are needed across ALL types of tests (repositories, services, API, logging).

Domain-specific fixtures are located in:
- tests/test_fixtures/repository_fixtures.py
- tests/test_fixtures/catalog_fixtures.py
- tests/test_fixtures/api_fixtures.py
"""

from __future__ import annotations

# -------------------------------
# Standard library imports
# -------------------------------
import os
import sys
import logging
from pathlib import Path
from urllib.parse import urlparse
from typing import AsyncGenerator

# -------------------------------
# Early logging tuning (IMPORTANT)
# -------------------------------
# Keep this block above the catalog_api imports so collection stays quiet.
NOISY_LOGGERS = (
    "sqlalchemy",
    "sqlalchemy.engine",
    "sqlalchemy.engine.Engine",
    "asyncio",
    "aiosqlite",
    "httpx",
    "urllib3",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

# -------------------------------
# Third-party / project imports
# -------------------------------
import pytest
from pytest import FixtureRequest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    create_async_engine,
    AsyncEngine,
)

# Ensure 'src' on sys.path so `import catalog_api...` works without an install
SRC = Path(__file__).resolve().parents[2]
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from catalog_api.database.base import Base
import catalog_api.models  # noqa: F401 – registers every table on Base.metadata
from catalog_api.config import get_settings
from catalog_api.core.logging.builder import setup_logging

settings = get_settings()
logger = logging.getLogger(__name__)


@pytest.fixture(scope="session", autouse=True)
def configure_logging(request: FixtureRequest):
    """
    Install application logging for the entire test session.

    dictConfig removes pytest's capture handler from the root logger; it is
    re-attached so `caplog.records` keeps working.
    """
    setup_logging(settings)

    caplog_plugin = request.config.pluginmanager.getplugin("logging-plugin")
    handler = getattr(caplog_plugin, "caplog_handler", None)
    if handler is not None:
        logging.getLogger().addHandler(handler)

    yield


# ------------------------------------------------------------------------------------------------
# Determining and Logging the Test Database URL for Tests
# ------------------------------------------------------------------------------------------------


def safe_log_db_url(db_url: str) -> str:
    """
    Return the database URL without credentials, for logging.
    """
    parsed = urlparse(db_url)
    return f"{parsed.scheme}://{parsed.hostname}:{parsed.port or ''}/{parsed.path.lstrip('/')}"


def get_test_database_url() -> str:
    """
    Determine the test database URL:
    1. `TEST_DATABASE_URL` environment variable (CI/CD override)
    2. settings.DATABASE_URL when `TESTING=true` and `TEST_POSTGRES_DB` is set
    3. a local SQLite file, so the suite runs without a database server
    """
    if test_url := os.getenv("TEST_DATABASE_URL"):
        return test_url

    if settings.TESTING and settings.TEST_POSTGRES_DB:
        return settings.DATABASE_URL

    return "sqlite+aiosqlite:///./test_database.db"


TEST_DATABASE_URL = get_test_database_url()
logger.info(f"Using test DB: {safe_log_db_url(TEST_DATABASE_URL)}")


# ------------------------------------------------------------------------------------------------
# DATABASE FIXTURES
# ------------------------------------------------------------------------------------------------


def _enable_sqlite_savepoints(engine: AsyncEngine) -> None:
    """
    pysqlite/aiosqlite begin transactions lazily and break SAVEPOINT; take over
    BEGIN so nested transactions behave like on Postgres.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _do_begin(conn):
        conn.exec_driver_sql("BEGIN")


@pytest.fixture(scope="session")
async def async_engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, pool_pre_ping=True)
    if engine.dialect.name == "sqlite":
        _enable_sqlite_savepoints(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture()
async def db_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """
    Transaction-per-test.

    The session joins an outer transaction on a single connection and turns
    its own commit/rollback into SAVEPOINT release/rollback
    (join_transaction_mode="create_savepoint"). Services can commit and roll
    back freely; everything is discarded when the outer transaction rolls back.

    Note: a service rollback undoes everything since the last commit, so
    fixtures commit the rows they insert.
    """
    async with async_engine.connect() as connection:
        await connection.begin()

        session = AsyncSession(
            bind=connection,
            join_transaction_mode="create_savepoint",
            expire_on_commit=False,
        )

        try:
            yield session
        finally:
            await session.close()
            await connection.rollback()


# Repository test fixtures
from .test_fixtures.repository_fixtures import (  # noqa: E402,F401
    analyst_repository,
    user_repository,
    refresh_token_repository,
    sample_user_data,
    create_user,
    created_user,
)

# Catalog entity factories
from .test_fixtures.catalog_fixtures import (  # noqa: E402,F401
    unique_suffix,
    make_analyst,
    make_resource,
    make_dictionary,
    make_dict_table,
    make_value_set,
    make_value_set_code,
    make_variable,
    make_mapping,
)

# API fixtures
from .test_fixtures.api_fixtures import (  # noqa: E402,F401
    app,
    client,
    access_token,
    auth_headers,
)
