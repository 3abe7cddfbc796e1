import logging
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.models.mapping import Mapping
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class MappingRepository(BaseRepository[Mapping]):

    def __init__(self, db: AsyncSession):
        super().__init__(Mapping, db)

    async def find_by_value_set_code_id(self, value_set_code_id: int) -> Mapping | None:
        return await self.find_by_field("value_set_code_id", value_set_code_id)

    async def find_by_original_value(self, original_value: str) -> Mapping | None:
        return await self.find_by_field("original_value", original_value)
