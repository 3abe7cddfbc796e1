import logging
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.models.resource import Resource
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class ResourceRepository(BaseRepository[Resource]):
    """
    Repository for Resource entity operations.

    Adds the lookup by code (unique business key).
    """

    def __init__(self, db: AsyncSession):
        super().__init__(Resource, db)

    async def find_by_code(self, code: str) -> Resource | None:
        return await self.find_by_field("code", code)
