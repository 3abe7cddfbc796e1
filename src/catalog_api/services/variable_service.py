from catalog_api.repositories.dict_table_repository import DictTableRepository
from catalog_api.repositories.value_set_repository import ValueSetRepository
from catalog_api.repositories.variable_repository import VariableRepository
from catalog_api.schemas.variable import VariableRead
from catalog_api.validators.write_validators import ReferenceCheck
from .base_service import CatalogService


class VariableService(CatalogService):
    """
    Variables reference an optional value set and their dictionary table.
    The value set is checked first.
    """

    repository_class = VariableRepository
    read_schema = VariableRead
    label = "Variable"
    empty_message = "No Variables found"
    references = (
        ReferenceCheck("value_set_id", ValueSetRepository, "Value Set"),
        ReferenceCheck("table_id", DictTableRepository, "Dict Table"),
    )
    unique_fields = ("path",)
