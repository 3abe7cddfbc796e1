from catalog_api.repositories.analyst_repository import AnalystRepository
from catalog_api.schemas.analyst import AnalystRead
from .base_service import CatalogService


class AnalystService(CatalogService):
    repository_class = AnalystRepository
    read_schema = AnalystRead
    label = "Analyst"
    article = "An"
    empty_message = "No analysts found"
    unique_fields = ("name",)
