r"""
Centralized access to all catalog database models.

Importing this package registers every table on `Base.metadata`, which is what
`create_all` (app startup, test engine) relies on.

Example:
    from catalog_api.models import Analyst, Resource, Variable
"""

from .analyst import Analyst
from .resource import Resource
from .dictionary import Dictionary
from .dict_table import DictTable
from .variable import Variable
from .value_set import ValueSet
from .value_set_code import ValueSetCode
from .mapping import Mapping
from .user import User
from .refresh_token import RefreshToken
from .enums import (
    ResourceType,
    ProjectActive,
    ProjectStatus,
    EntityType,
    Domain,
    ValueType,
    VariableStatus,
    RollingVersion,
)

__all__ = [
    "Analyst",
    "Resource",
    "Dictionary",
    "DictTable",
    "Variable",
    "ValueSet",
    "ValueSetCode",
    "Mapping",
    "User",
    "RefreshToken",
    "ResourceType",
    "ProjectActive",
    "ProjectStatus",
    "EntityType",
    "Domain",
    "ValueType",
    "VariableStatus",
    "RollingVersion",
]
