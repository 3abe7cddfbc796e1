from catalog_api.repositories.mapping_repository import MappingRepository
from catalog_api.repositories.value_set_code_repository import ValueSetCodeRepository
from catalog_api.schemas.mapping import MappingRead
from catalog_api.validators.write_validators import ReferenceCheck
from .base_service import CatalogService


class MappingService(CatalogService):
    """Maps an original source value onto a canonical value-set code."""

    repository_class = MappingRepository
    read_schema = MappingRead
    label = "Mapping"
    empty_message = "No Mappings found"
    empty_is_not_found = False
    references = (
        ReferenceCheck("value_set_code_id", ValueSetCodeRepository, "Value Set Code"),
    )
    unique_fields = ("value_set_code_id", "original_value")
