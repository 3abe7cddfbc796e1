import datetime

import pytest

from catalog_api.exceptions.base import DuplicateError
from catalog_api.models.user import User
from catalog_api.repositories.refresh_token_repository import RefreshTokenRepository
from catalog_api.repositories.user_repository import UserRepository


@pytest.mark.asyncio
class TestUserRepositoryCreate:
    """
    Tests covering creation of users through UserRepository.create_user().

    Rationale:
      - create_user() wraps BaseRepository.create() but normalizes input:
          * strips the name
          * lowercases and strips the email
      - The unique email constraint must produce DuplicateError when violated.
    """

    async def test_create_user_success(self, user_repository: UserRepository):
        user = await user_repository.create_user(
            name="Test User",
            email="testuser@example.com",
            hashed_password="$2b$12$hash",
        )

        assert isinstance(user, User)
        assert user.name == "Test User"
        assert user.email == "testuser@example.com"
        assert user.password == "$2b$12$hash"
        assert isinstance(user.id, int)
        assert isinstance(user.created_at, datetime.datetime)
        assert isinstance(user.updated_at, datetime.datetime)

    async def test_create_user_normalizes_input(self, user_repository: UserRepository):
        """
        Behavior:
          - Whitespace around the name and a mixed-case email are normalized before insert.
        """
        user = await user_repository.create_user(
            name="  Padded  ",
            email="  Mixed.Case@Example.COM ",
            hashed_password="pw",
        )

        assert user.name == "Padded"
        assert user.email == "mixed.case@example.com"

    async def test_create_user_duplicate_email_raises(self, user_repository: UserRepository):
        await user_repository.create_user(name="One", email="same@example.com", hashed_password="pw")

        with pytest.raises(DuplicateError) as exc_info:
            await user_repository.create_user(name="Two", email="SAME@example.com", hashed_password="pw")

        assert exc_info.value.fields == ["email"]


@pytest.mark.asyncio
class TestUserRepositoryLookup:

    async def test_find_by_email_is_case_insensitive(self, user_repository, created_user):
        found = await user_repository.find_by_email("TestUser@Example.com")

        assert found is not None
        assert found.id == created_user.id

    async def test_find_by_email_missing_returns_none(self, user_repository):
        assert await user_repository.find_by_email("nobody@example.com") is None


@pytest.mark.asyncio
class TestRefreshTokenRepository:

    @staticmethod
    def _expiry() -> datetime.datetime:
        return datetime.datetime.now(datetime.timezone.utc) + datetime.timedelta(days=7)

    async def test_save_for_user_stores_token(self, refresh_token_repository: RefreshTokenRepository, created_user):
        await refresh_token_repository.save_for_user(created_user.id, "a" * 64, self._expiry())

        stored = await refresh_token_repository.find_by_user_id(created_user.id)

        assert stored is not None
        assert stored.token == "a" * 64

    async def test_save_for_user_replaces_previous_token(self, refresh_token_repository, created_user):
        """
        Behavior:
          - Saving a second token for the same user leaves a single row holding the new digest.

        Importance:
          - Rotation relies on this: once replaced, the old refresh token no longer matches.
        """
        await refresh_token_repository.save_for_user(created_user.id, "a" * 64, self._expiry())
        await refresh_token_repository.save_for_user(created_user.id, "b" * 64, self._expiry())

        stored = await refresh_token_repository.find_by_user_id(created_user.id)

        assert stored.token == "b" * 64
        assert len(await refresh_token_repository.find_all()) == 1

    async def test_delete_for_user(self, refresh_token_repository, created_user):
        await refresh_token_repository.save_for_user(created_user.id, "a" * 64, self._expiry())

        await refresh_token_repository.delete_for_user(created_user.id)
        # nothing left to delete: still fine
        await refresh_token_repository.delete_for_user(created_user.id)

        assert await refresh_token_repository.find_by_user_id(created_user.id) is None
