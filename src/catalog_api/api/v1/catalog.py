"""Routers for the catalog entities, one per resource path."""

from catalog_api.schemas.analyst import AnalystCreate, AnalystUpdate
from catalog_api.schemas.dict_table import DictTableCreate, DictTableUpdate
from catalog_api.schemas.dictionary import DictionaryCreate, DictionaryUpdate
from catalog_api.schemas.mapping import MappingCreate, MappingUpdate
from catalog_api.schemas.resource import ResourceCreate, ResourceUpdate
from catalog_api.schemas.value_set import ValueSetCreate, ValueSetUpdate
from catalog_api.schemas.value_set_code import ValueSetCodeCreate, ValueSetCodeUpdate
from catalog_api.schemas.variable import VariableCreate, VariableUpdate
from catalog_api.services.analyst_service import AnalystService
from catalog_api.services.dict_table_service import DictTableService
from catalog_api.services.dictionary_service import DictionaryService
from catalog_api.services.mapping_service import MappingService
from catalog_api.services.resource_service import ResourceService
from catalog_api.services.value_set_code_service import ValueSetCodeService
from catalog_api.services.value_set_service import ValueSetService
from catalog_api.services.variable_service import VariableService
from .crud import build_crud_router, paginated_list_query

analyst_router = build_crud_router(
    service_class=AnalystService,
    create_schema=AnalystCreate,
    update_schema=AnalystUpdate,
)

resource_router = build_crud_router(
    service_class=ResourceService,
    create_schema=ResourceCreate,
    update_schema=ResourceUpdate,
)

dictionary_router = build_crud_router(
    service_class=DictionaryService,
    create_schema=DictionaryCreate,
    update_schema=DictionaryUpdate,
)

dict_table_router = build_crud_router(
    service_class=DictTableService,
    create_schema=DictTableCreate,
    update_schema=DictTableUpdate,
)

# variables are paginated: limit (default 50) / offset
variable_router = build_crud_router(
    service_class=VariableService,
    create_schema=VariableCreate,
    update_schema=VariableUpdate,
    list_dependency=paginated_list_query,
)

value_set_router = build_crud_router(
    service_class=ValueSetService,
    create_schema=ValueSetCreate,
    update_schema=ValueSetUpdate,
)

value_set_code_router = build_crud_router(
    service_class=ValueSetCodeService,
    create_schema=ValueSetCodeCreate,
    update_schema=ValueSetCodeUpdate,
)

mapping_router = build_crud_router(
    service_class=MappingService,
    create_schema=MappingCreate,
    update_schema=MappingUpdate,
)
