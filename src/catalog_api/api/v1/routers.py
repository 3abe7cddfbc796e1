"""Aggregate v1 router: mounts every resource path."""

from fastapi import APIRouter

from . import catalog, health, users

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health-check", tags=["health"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(catalog.analyst_router, prefix="/analysts", tags=["analysts"])
api_router.include_router(catalog.resource_router, prefix="/resources", tags=["resources"])
api_router.include_router(catalog.dictionary_router, prefix="/dictionaries", tags=["dictionaries"])
api_router.include_router(catalog.dict_table_router, prefix="/dict-tables", tags=["dict-tables"])
api_router.include_router(catalog.variable_router, prefix="/variables", tags=["variables"])
api_router.include_router(catalog.value_set_router, prefix="/value-sets", tags=["value-sets"])
api_router.include_router(catalog.value_set_code_router, prefix="/value-set-codes", tags=["value-set-codes"])
api_router.include_router(catalog.mapping_router, prefix="/mappings", tags=["mappings"])
