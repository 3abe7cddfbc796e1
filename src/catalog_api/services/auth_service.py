"""
Login, refresh-token rotation and logout.

A successful login or refresh issues a new access / refresh token pair and
stores the digest of the refresh token as the user's only valid one, so each
refresh token can be used once and logout revokes it.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.core.security import (
    AuthSecurityError,
    build_access_token,
    build_refresh_token,
    decode_refresh_token,
    hash_refresh_token,
    refresh_token_matches,
    token_expiry,
    verify_password,
)
from catalog_api.exceptions.base import (
    InvalidCredentialsError,
    NotFoundError,
    UnauthorizedError,
)
from catalog_api.models.user import User
from catalog_api.repositories.refresh_token_repository import RefreshTokenRepository
from catalog_api.repositories.user_repository import UserRepository
from catalog_api.schemas.service_response import ServiceResponse
from catalog_api.schemas.user import LoginResult, TokenPair, UserLogin, UserRead
from .base_service import store_error_text

logger = logging.getLogger(__name__)

INVALID_REFRESH_TOKEN = "Invalid refresh token"


class AuthService:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.users = UserRepository(db)
        self.tokens = RefreshTokenRepository(db)

    async def _issue_tokens(self, user: User) -> TokenPair:
        access_token = build_access_token(user_id=user.id, email=user.email)
        refresh_token = build_refresh_token(user_id=user.id, email=user.email)
        claims = decode_refresh_token(refresh_token)
        await self.tokens.save_for_user(user.id, hash_refresh_token(refresh_token), token_expiry(claims))
        return TokenPair(access_token=access_token, refresh_token=refresh_token)

    async def _unexpected(self, exc: Exception, action: str) -> ServiceResponse:
        await self.db.rollback()
        logger.exception("service.unexpected_error", extra={"entity": "User", "action": action})
        return ServiceResponse.failure(f"Error {action}: {store_error_text(exc)}", 500)

    async def login(self, payload: UserLogin) -> ServiceResponse:
        """
        - unknown email -> 404 "User not found"
        - wrong password -> 400 "Invalid credentials"
        - otherwise 200 "Login successful" with {accessToken, refreshToken, user}
        """
        try:
            user = await self.users.find_by_email(payload.email)
            if user is None:
                logger.info("auth.login.unknown_user")
                return ServiceResponse.from_error(NotFoundError("User not found"))

            if not verify_password(payload.password, user.password):
                logger.info("auth.login.invalid_credentials", extra={"user_id": user.id})
                return ServiceResponse.from_error(InvalidCredentialsError("Invalid credentials"))

            pair = await self._issue_tokens(user)
            result = LoginResult(
                access_token=pair.access_token,
                refresh_token=pair.refresh_token,
                user=UserRead.model_validate(user),
            )
            await self.db.commit()
        except Exception as exc:
            return await self._unexpected(exc, "logging in")

        logger.info("auth.login.success", extra={"user_id": result.user.id})
        return ServiceResponse.ok("Login successful", result)

    async def refresh(self, token: str | None) -> ServiceResponse:
        """
        Exchange a refresh token for a new pair. The presented token must be the
        one currently stored for its user; it is replaced by the new one.
        """
        try:
            claims = decode_refresh_token(token or "")
        except AuthSecurityError:
            logger.info("auth.refresh.invalid_token")
            return ServiceResponse.from_error(UnauthorizedError(INVALID_REFRESH_TOKEN))

        try:
            stored = await self.tokens.find_by_user_id(claims["sub"])
            if stored is None or not refresh_token_matches(token, stored.token):
                logger.info("auth.refresh.token_mismatch", extra={"user_id": claims["sub"]})
                return ServiceResponse.from_error(UnauthorizedError(INVALID_REFRESH_TOKEN))

            user = await self.users.find_by_id(claims["sub"])
            if user is None:
                return ServiceResponse.from_error(UnauthorizedError(INVALID_REFRESH_TOKEN))

            pair = await self._issue_tokens(user)
            await self.db.commit()
        except Exception as exc:
            return await self._unexpected(exc, "refreshing token")

        return ServiceResponse.ok("Token refreshed successfully", pair)

    async def logout(self, token: str | None) -> ServiceResponse:
        if not token:
            return ServiceResponse.from_error(UnauthorizedError("No refresh token provided"))

        try:
            claims = decode_refresh_token(token)
        except AuthSecurityError:
            return ServiceResponse.from_error(UnauthorizedError(INVALID_REFRESH_TOKEN))

        try:
            await self.tokens.delete_for_user(claims["sub"])
            await self.db.commit()
        except Exception as exc:
            return await self._unexpected(exc, "logging out")

        logger.info("auth.logout.success", extra={"user_id": claims["sub"]})
        return ServiceResponse.ok("Logout successful")
