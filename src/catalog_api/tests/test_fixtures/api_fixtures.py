"""
Fixtures for API tests.

The app is driven in-process through httpx's ASGI transport. The lifespan is
not run (no table creation against the configured database); requests use the
transactional `db_session` from conftest.py instead.
"""

import httpx
import pytest
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.core.security import build_access_token
from catalog_api.database.session import get_async_session
from catalog_api.main import create_app


@pytest.fixture
def app(db_session: AsyncSession) -> FastAPI:
    """A fresh app whose requests all share the test session."""
    application = create_app()

    async def _override_session():
        yield db_session

    application.dependency_overrides[get_async_session] = _override_session
    return application


@pytest.fixture
async def client(app: FastAPI):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def access_token() -> str:
    """A valid access token; protected routes only verify the token itself."""
    return build_access_token(user_id=1, email="tester@example.com")


@pytest.fixture
def auth_headers(access_token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {access_token}"}
