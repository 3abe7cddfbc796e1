"""
Pydantic request / response models.

Each entity has a Create model (POST body), an Update model (PUT body, every
field optional, only the fields sent are applied) and a Read model (the
projection returned inside `responseObject`).
"""

from .service_response import ServiceResponse
from .analyst import AnalystCreate, AnalystUpdate, AnalystRead
from .resource import ResourceCreate, ResourceUpdate, ResourceRead
from .dictionary import DictionaryCreate, DictionaryUpdate, DictionaryRead
from .dict_table import DictTableCreate, DictTableUpdate, DictTableRead
from .variable import VariableCreate, VariableUpdate, VariableRead
from .value_set import ValueSetCreate, ValueSetUpdate, ValueSetRead
from .value_set_code import ValueSetCodeCreate, ValueSetCodeUpdate, ValueSetCodeRead
from .mapping import MappingCreate, MappingUpdate, MappingRead
from .user import UserRegister, UserLogin, UserRead, TokenPair, LoginResult

__all__ = [
    "ServiceResponse",
    "AnalystCreate", "AnalystUpdate", "AnalystRead",
    "ResourceCreate", "ResourceUpdate", "ResourceRead",
    "DictionaryCreate", "DictionaryUpdate", "DictionaryRead",
    "DictTableCreate", "DictTableUpdate", "DictTableRead",
    "VariableCreate", "VariableUpdate", "VariableRead",
    "ValueSetCreate", "ValueSetUpdate", "ValueSetRead",
    "ValueSetCodeCreate", "ValueSetCodeUpdate", "ValueSetCodeRead",
    "MappingCreate", "MappingUpdate", "MappingRead",
    "UserRegister", "UserLogin", "UserRead", "TokenPair", "LoginResult",
]
