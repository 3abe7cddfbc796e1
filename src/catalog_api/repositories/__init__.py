"""
Repository layer initialization module.

One repository per catalog entity, all built on the generic `BaseRepository`.

Usage:
    from catalog_api.repositories import AnalystRepository, VariableRepository
"""

from .base_repository import BaseRepository
from .analyst_repository import AnalystRepository
from .resource_repository import ResourceRepository
from .dictionary_repository import DictionaryRepository
from .dict_table_repository import DictTableRepository
from .variable_repository import VariableRepository
from .value_set_repository import ValueSetRepository
from .value_set_code_repository import ValueSetCodeRepository
from .mapping_repository import MappingRepository
from .user_repository import UserRepository
from .refresh_token_repository import RefreshTokenRepository

__all__ = [
    "BaseRepository",
    "AnalystRepository",
    "ResourceRepository",
    "DictionaryRepository",
    "DictTableRepository",
    "VariableRepository",
    "ValueSetRepository",
    "ValueSetCodeRepository",
    "MappingRepository",
    "UserRepository",
    "RefreshTokenRepository",
]
