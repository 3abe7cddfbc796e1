from catalog_api.repositories.dictionary_repository import DictionaryRepository
from catalog_api.repositories.resource_repository import ResourceRepository
from catalog_api.schemas.dictionary import DictionaryRead
from catalog_api.validators.write_validators import ReferenceCheck
from .base_service import CatalogService


class DictionaryService(CatalogService):
    """One dictionary per resource: `resource_id` is both a reference and unique."""

    repository_class = DictionaryRepository
    read_schema = DictionaryRead
    label = "Dictionary"
    display_plural = "Dictionaries"
    error_plural = "dictionaries"
    empty_message = "No dictionaries found"
    references = (
        ReferenceCheck("resource_id", ResourceRepository, "Resource"),
    )
    unique_fields = ("resource_id",)
