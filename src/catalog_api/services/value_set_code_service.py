from catalog_api.repositories.value_set_code_repository import ValueSetCodeRepository
from catalog_api.repositories.value_set_repository import ValueSetRepository
from catalog_api.schemas.value_set_code import ValueSetCodeRead
from catalog_api.validators.write_validators import ReferenceCheck
from .base_service import CatalogService


class ValueSetCodeService(CatalogService):
    repository_class = ValueSetCodeRepository
    read_schema = ValueSetCodeRead
    label = "Value Set Code"
    empty_message = "No Value Set Codes found"
    references = (
        ReferenceCheck("value_set_id", ValueSetRepository, "Value Set"),
    )
    unique_fields = ("value_set_id", "code")
