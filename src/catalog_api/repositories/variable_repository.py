"""
Variable repository.

Variables are the largest table of the catalog; listing goes through the
paginated `find_all` (the API defaults to 50 rows per page).
"""

import logging
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.models.variable import Variable
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class VariableRepository(BaseRepository[Variable]):

    def __init__(self, db: AsyncSession):
        super().__init__(Variable, db)

    async def find_by_path(self, path: str) -> Variable | None:
        return await self.find_by_field("path", path)
