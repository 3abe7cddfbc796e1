"""
User repository for handling user-specific database operations.

Extends BaseRepository with the email lookup used by login and by the
registration uniqueness check.
"""

from sqlalchemy.ext.asyncio import AsyncSession
import logging

from catalog_api.models.user import User
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """
    Repository for User entity operations.

    Returns full `User` rows, password hash included; the public projection
    (`UserRead`) is applied by the service layer.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    async def create_user(self, name: str, email: str, hashed_password: str) -> User:
        """
        Create a new user.

        Args:
            name: Display name
            email: Login email (normalized to lowercase)
            hashed_password: bcrypt hash (never the raw password)

        Raises:
            DuplicateError: If the email is already registered
            RepositoryError: For any unexpected database errors
        """
        logger.info(f"Creating new user: {email.strip().lower()}")

        return await self.create(
            name=name.strip(),
            email=email.strip().lower(),
            password=hashed_password,
        )

    async def find_by_email(self, email: str) -> User | None:
        """
        Get a user by email (case-insensitive: emails are stored lowercase).
        """
        return await self.find_by_field("email", email.strip().lower())
