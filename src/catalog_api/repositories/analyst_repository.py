"""
Analyst repository: CRUD from BaseRepository plus the name lookup used by the
uniqueness check.
"""

import logging
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.models.analyst import Analyst
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class AnalystRepository(BaseRepository[Analyst]):

    def __init__(self, db: AsyncSession):
        super().__init__(Analyst, db)

    async def find_by_name(self, name: str) -> Analyst | None:
        return await self.find_by_field("name", name)
