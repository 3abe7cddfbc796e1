"""
Application factory.

    uvicorn catalog_api.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.schema import CreateSchema

import catalog_api.models  # noqa: F401  (registers every table on Base.metadata)
from catalog_api.api.v1.error_handlers import register_exception_handlers
from catalog_api.api.v1.routers import api_router
from catalog_api.config.settings import Settings, get_settings
from catalog_api.core.logging import RequestIDMiddleware, setup_logging
from catalog_api.database.base import Base
from catalog_api.database.session import engine
from catalog_api.utils.project_metadata import get_project_name, get_project_version

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        setup_logging(settings)
        # production schemas are managed outside the app
        if settings.ENV in ("development", "testing"):
            async with engine.begin() as conn:
                if settings.DB_SCHEMA and engine.dialect.name == "postgresql":
                    await conn.execute(CreateSchema(settings.DB_SCHEMA, if_not_exists=True))
                await conn.run_sync(Base.metadata.create_all)
        logger.info("app.startup", extra={"env": settings.ENV})
        try:
            yield
        finally:
            await engine.dispose()
            logger.info("app.shutdown")

    app = FastAPI(
        title=get_project_name(),
        version=get_project_version(),
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGIN_LIST,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # added last so it wraps CORS too: every response carries X-Request-ID
    app.add_middleware(RequestIDMiddleware)

    app.include_router(api_router)
    register_exception_handlers(app)

    return app


app = create_app()
