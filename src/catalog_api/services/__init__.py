"""
Service layer: one service per catalog entity plus authentication.

Services own the transaction: they commit after a successful write and roll
back on failure. Every method returns a `ServiceResponse` envelope.
"""

from .base_service import CatalogService
from .analyst_service import AnalystService
from .resource_service import ResourceService
from .dictionary_service import DictionaryService
from .dict_table_service import DictTableService
from .variable_service import VariableService
from .value_set_service import ValueSetService
from .value_set_code_service import ValueSetCodeService
from .mapping_service import MappingService
from .user_service import UserService
from .auth_service import AuthService

__all__ = [
    "CatalogService",
    "AnalystService",
    "ResourceService",
    "DictionaryService",
    "DictTableService",
    "VariableService",
    "ValueSetService",
    "ValueSetCodeService",
    "MappingService",
    "UserService",
    "AuthService",
]
