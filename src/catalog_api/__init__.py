"""
catalog_api: REST backend for the research metadata catalog.

Entities (analysts, resources, dictionaries, dictionary tables, variables,
value sets, value-set codes, mappings and users) are exposed through FastAPI
routers, validated by pydantic schemas, checked by the reference / uniqueness
protocol in `catalog_api.validators.write_validators` and persisted through
async SQLAlchemy repositories.
"""
