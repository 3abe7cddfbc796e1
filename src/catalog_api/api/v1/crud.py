"""
Router factory for the catalog entities.

Every entity exposes the same five endpoints, all behind `verify_token`:

    GET    /            list (searchField, searchValue, sortBy, sortOrder[, limit, offset])
    GET    /{id}        one row
    POST   /            create
    PUT    /{id}        partial update
    DELETE /{id}        delete (idempotent)

Handlers only parse the request and hand the service envelope back as the
response; all rules live in the service.
"""

from typing import Any, Callable, Literal

from fastapi import APIRouter, Depends, Path, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.core.dependencies import verify_token
from catalog_api.database.session import get_async_session
from catalog_api.services.base_service import CatalogService

# page size of paginated listings when no limit is given
DEFAULT_PAGE_SIZE = 50


def list_query(
    search_field: str | None = Query(default=None, alias="searchField"),
    search_value: str | None = Query(default=None, alias="searchValue"),
    sort_by: str | None = Query(default=None, alias="sortBy"),
    sort_order: Literal["asc", "desc"] = Query(default="asc", alias="sortOrder"),
) -> dict[str, Any]:
    return {
        "search_field": search_field,
        "search_value": search_value,
        "sort_by": sort_by,
        "sort_order": sort_order,
    }


def paginated_list_query(
    base: dict[str, Any] = Depends(list_query),
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=1000),
    offset: int = Query(default=0, ge=0),
) -> dict[str, Any]:
    return {**base, "limit": limit, "offset": offset}


def build_crud_router(
    *,
    service_class: type[CatalogService],
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    list_dependency: Callable[..., dict[str, Any]] = list_query,
) -> APIRouter:
    router = APIRouter(dependencies=[Depends(verify_token)])
    name = service_class.label

    @router.get("", response_model=None, summary=f"List {name} entries")
    async def find_all(
        params: dict[str, Any] = Depends(list_dependency),
        db: AsyncSession = Depends(get_async_session),
    ) -> JSONResponse:
        response = await service_class(db).find_all(**params)
        return response.to_response()

    @router.get("/{id}", response_model=None, summary=f"Get a {name} by id")
    async def find_by_id(
        id: int = Path(..., gt=0),
        db: AsyncSession = Depends(get_async_session),
    ) -> JSONResponse:
        response = await service_class(db).find_by_id(id)
        return response.to_response()

    @router.post("", response_model=None, summary=f"Create a {name}")
    async def create(
        payload: create_schema,
        db: AsyncSession = Depends(get_async_session),
    ) -> JSONResponse:
        response = await service_class(db).create(payload)
        return response.to_response()

    @router.put("/{id}", response_model=None, summary=f"Update a {name}")
    async def update(
        payload: update_schema,
        id: int = Path(..., gt=0),
        db: AsyncSession = Depends(get_async_session),
    ) -> JSONResponse:
        response = await service_class(db).update(id, payload)
        return response.to_response()

    @router.delete("/{id}", response_model=None, summary=f"Delete a {name}")
    async def delete(
        id: int = Path(..., gt=0),
        db: AsyncSession = Depends(get_async_session),
    ) -> JSONResponse:
        response = await service_class(db).delete(id)
        return response.to_response()

    return router
