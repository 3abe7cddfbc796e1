import logging
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.models.value_set_code import ValueSetCode
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class ValueSetCodeRepository(BaseRepository[ValueSetCode]):
    """
    Repository for ValueSetCode entity operations (lookups by value set and by code).
    """

    def __init__(self, db: AsyncSession):
        super().__init__(ValueSetCode, db)

    async def find_by_value_set_id(self, value_set_id: int) -> ValueSetCode | None:
        return await self.find_by_field("value_set_id", value_set_id)

    async def find_by_code(self, code: str) -> ValueSetCode | None:
        return await self.find_by_field("code", code)
