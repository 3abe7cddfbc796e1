import ssl
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    create_async_engine,
    async_sessionmaker,
    AsyncSession,
)

from catalog_api.config.settings import Settings, get_settings


def build_engine(settings: Settings, url: str | None = None) -> AsyncEngine:
    """
    Create the AsyncEngine for `url` (defaults to settings.DATABASE_URL).

    - The catalog schema is applied with `schema_translate_map`, so models stay
      schema-less and the same metadata works on SQLite in tests.
    - When DB_SSL_ROOT_CERT is set (production) asyncpg verifies the server against it.
    """
    url = url or settings.DATABASE_URL
    execution_options = {}
    if settings.DB_SCHEMA and not url.startswith("sqlite"):
        execution_options["schema_translate_map"] = {None: settings.DB_SCHEMA}

    connect_args = {}
    if settings.DB_SSL_ROOT_CERT and "asyncpg" in url:
        connect_args["ssl"] = ssl.create_default_context(cafile=str(settings.DB_SSL_ROOT_CERT))

    return create_async_engine(
        url,
        echo=settings.SQLALCHEMY_ECHO,   # Set to False in production
        pool_pre_ping=True,              # Enables connection health checks
        execution_options=execution_options,
        connect_args=connect_args,
    )


settings = get_settings()

engine: AsyncEngine = build_engine(settings)

# `async_sessionmaker` returns an async session factory.
AsyncSessionMaker = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency. Yields a session and ensures it's closed after the request.

    Services commit their own writes; anything left uncommitted is rolled back
    when the session closes.

    Usage:
        async def endpoint(db: AsyncSession = Depends(get_async_session)):
            await db.execute(...)
    """
    async with AsyncSessionMaker() as session:
        yield session
