from catalog_api.repositories.value_set_repository import ValueSetRepository
from catalog_api.schemas.value_set import ValueSetRead
from .base_service import CatalogService


class ValueSetService(CatalogService):
    repository_class = ValueSetRepository
    read_schema = ValueSetRead
    label = "Value Set"
    display_name = "Value set"
    empty_message = "No value sets found"
    empty_is_not_found = False
    unique_fields = ("name",)
