from catalog_api.repositories.dict_table_repository import DictTableRepository
from catalog_api.repositories.dictionary_repository import DictionaryRepository
from catalog_api.schemas.dict_table import DictTableRead
from catalog_api.validators.write_validators import ReferenceCheck
from .base_service import CatalogService


class DictTableService(CatalogService):
    repository_class = DictTableRepository
    read_schema = DictTableRead
    label = "Dict Table"
    display_name = "DictTable"
    empty_message = "No DictTables found"
    empty_is_not_found = False
    references = (
        ReferenceCheck("dictionary_id", DictionaryRepository, "Dictionary"),
    )
    # dictionary_id is checked first: a payload conflicting on both reports dictionary_id
    unique_fields = ("dictionary_id", "name")
