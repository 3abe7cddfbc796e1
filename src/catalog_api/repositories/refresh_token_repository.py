"""
Storage of the active refresh token of each user.

A user has at most one row: saving a token replaces the previous one, which is
what makes refresh-token rotation and logout invalidate older tokens.
"""

import logging
from datetime import datetime

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.exceptions.mapper import db_error_handler
from catalog_api.models.refresh_token import RefreshToken
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class RefreshTokenRepository(BaseRepository[RefreshToken]):

    def __init__(self, db: AsyncSession):
        super().__init__(RefreshToken, db)

    async def find_by_user_id(self, user_id: int) -> RefreshToken | None:
        return await self.find_by_field("user_id", user_id)

    async def save_for_user(self, user_id: int, token_hash: str, expires_at: datetime) -> RefreshToken:
        """
        Store `token_hash` as the user's only refresh token.

        Args:
            user_id: Owner of the token
            token_hash: SHA-256 hex digest of the issued token
            expires_at: Expiry of the issued token
        """
        await self.delete_for_user(user_id)
        token = await self.create(user_id=user_id, token=token_hash, expires_at=expires_at)
        logger.debug(f"Stored refresh token for user {user_id}")
        return token

    async def delete_for_user(self, user_id: int) -> None:
        """Remove the user's refresh token, if any."""
        async with db_error_handler(self.db, "RefreshToken", RefreshToken.__tablename__):
            await self.db.execute(delete(RefreshToken).where(RefreshToken.user_id == user_id))
            # the unique user_id row must be gone before the replacement INSERT
            await self.db.flush()
