"""
Password hashing and JWT helpers.

Access and refresh tokens are both HS256 JWTs signed with `JWT_SECRET`; the
`type` claim keeps one from being accepted in place of the other. Refresh
tokens are stored as SHA-256 digests, never in clear.
"""

import hashlib
import hmac
import time
import uuid
from datetime import datetime, timezone
from typing import Any

import bcrypt
import jwt

from catalog_api.config.settings import Settings, get_settings


class AuthSecurityError(RuntimeError):
    pass


ACCESS = "access"
REFRESH = "refresh"


def now_epoch_s() -> int:
    return int(time.time())


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise AuthSecurityError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


def _build_token(*, user_id: int, email: str, token_type: str, lifetime_s: int, settings: Settings) -> str:
    issued_at = now_epoch_s()
    payload = {
        "sub": str(user_id),
        "email": email,
        "type": token_type,
        "iat": issued_at,
        "exp": issued_at + lifetime_s,
        # two tokens minted in the same second must still differ
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def build_access_token(*, user_id: int, email: str, settings: Settings | None = None) -> str:
    settings = settings or get_settings()
    return _build_token(
        user_id=user_id,
        email=email,
        token_type=ACCESS,
        lifetime_s=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        settings=settings,
    )


def build_refresh_token(*, user_id: int, email: str, settings: Settings | None = None) -> str:
    settings = settings or get_settings()
    return _build_token(
        user_id=user_id,
        email=email,
        token_type=REFRESH,
        lifetime_s=settings.REFRESH_TOKEN_EXPIRE_DAYS * 24 * 3600,
        settings=settings,
    )


def decode_token(token: str, expected_type: str, settings: Settings | None = None) -> dict[str, Any]:
    """
    Verify signature, expiry and `type` of a token and return its claims.

    Raises:
        AuthSecurityError: for any verification failure
    """
    settings = settings or get_settings()
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Token is empty.")

    try:
        payload = jwt.decode(raw, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError(f"Invalid {expected_type} token.") from exc

    token_type = str(payload.get("type") or "").strip().lower()
    if token_type != expected_type:
        raise AuthSecurityError(f"Token is not an {expected_type} token.")

    try:
        payload["sub"] = int(payload["sub"])
    except (KeyError, TypeError, ValueError) as exc:
        raise AuthSecurityError("Token subject is missing or malformed.") from exc

    return payload


def decode_access_token(token: str, settings: Settings | None = None) -> dict[str, Any]:
    return decode_token(token, ACCESS, settings)


def decode_refresh_token(token: str, settings: Settings | None = None) -> dict[str, Any]:
    return decode_token(token, REFRESH, settings)


def token_expiry(payload: dict[str, Any]) -> datetime:
    return datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc)


def hash_refresh_token(raw_refresh_token: str) -> str:
    token = (raw_refresh_token or "").encode("utf-8")
    if not token:
        raise AuthSecurityError("Refresh token is empty.")
    return hashlib.sha256(token).hexdigest()


def refresh_token_matches(raw_refresh_token: str, stored_hash: str) -> bool:
    """Constant-time comparison of a presented token against its stored digest."""
    return hmac.compare_digest(hash_refresh_token(raw_refresh_token), stored_hash or "")
