import logging
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.models.dict_table import DictTable
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class DictTableRepository(BaseRepository[DictTable]):

    def __init__(self, db: AsyncSession):
        super().__init__(DictTable, db)

    async def find_by_dictionary_id(self, dictionary_id: int) -> DictTable | None:
        return await self.find_by_field("dictionary_id", dictionary_id)

    async def find_by_name(self, name: str) -> DictTable | None:
        return await self.find_by_field("name", name)
