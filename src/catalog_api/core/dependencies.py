"""
Auth dependencies for protected FastAPI routes.
"""

from fastapi import Header

from catalog_api.core.security import AuthSecurityError, decode_access_token
from catalog_api.exceptions.base import InvalidTokenError, UnauthorizedError

NO_TOKEN_MESSAGE = "Access denied. No token provided."


def _extract_bearer_token(authorization: str | None) -> str:
    """
    "Bearer <token>" -> "<token>". A header without a token counts as no token.
    """
    raw = (authorization or "").strip()
    if not raw:
        raise UnauthorizedError(NO_TOKEN_MESSAGE)

    parts = raw.split(" ", 1)
    if len(parts) != 2 or parts[0].strip().lower() != "bearer" or not parts[1].strip():
        raise UnauthorizedError(NO_TOKEN_MESSAGE)

    return parts[1].strip()


async def verify_token(authorization: str | None = Header(default=None)) -> dict:
    """
    Gate for every protected router. Returns the access token claims.

    Raises:
        UnauthorizedError: no Authorization header / no bearer token (401)
        InvalidTokenError: signature, expiry or type check failed (400)
    """
    token = _extract_bearer_token(authorization)
    try:
        return decode_access_token(token)
    except AuthSecurityError as exc:
        raise InvalidTokenError("Invalid token.") from exc
