import logging
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.models.value_set import ValueSet
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class ValueSetRepository(BaseRepository[ValueSet]):

    def __init__(self, db: AsyncSession):
        super().__init__(ValueSet, db)

    async def find_by_name(self, name: str) -> ValueSet | None:
        return await self.find_by_field("name", name)
