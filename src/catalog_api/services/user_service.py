import logging

from catalog_api.core.security import hash_password
from catalog_api.repositories.user_repository import UserRepository
from catalog_api.schemas.service_response import ServiceResponse
from catalog_api.schemas.user import UserRead, UserRegister
from .base_service import CatalogService

logger = logging.getLogger(__name__)


class UserService(CatalogService):
    """
    User listing, lookup and registration.

    Responses always carry the `UserRead` projection, so the password hash
    never leaves the service.
    """

    repository_class = UserRepository
    read_schema = UserRead
    label = "User"
    empty_message = "Users found"
    empty_is_not_found = False
    unique_fields = ("email",)

    async def create(self, payload: UserRegister) -> ServiceResponse:
        """Register a user: email uniqueness check, bcrypt hash, persist."""
        candidate = {"email": payload.email}
        try:
            await self.validate_write(candidate)
            user = await self.repository.create_user(
                name=payload.name,
                email=payload.email,
                hashed_password=hash_password(payload.password),
            )
            result = self.project(user)
            await self.db.commit()
        except Exception as exc:
            return await self._fail(exc, "creating user", candidate)

        logger.info("auth.register.success", extra={"user_id": result.id})
        return ServiceResponse.ok("User created successfully", result, 201)
