import logging
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.models.dictionary import Dictionary
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class DictionaryRepository(BaseRepository[Dictionary]):
    """
    Repository for Dictionary entity operations.

    A resource has at most one dictionary, so `find_by_resource_id` returns a
    single row.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(Dictionary, db)

    async def find_by_resource_id(self, resource_id: int) -> Dictionary | None:
        return await self.find_by_field("resource_id", resource_id)
