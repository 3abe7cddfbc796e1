"""
Generic catalog service: the write protocol, the response envelope and error
classification, shared by every entity.

A concrete service is mostly declarations:

    class ResourceService(CatalogService):
        repository_class = ResourceRepository
        read_schema = ResourceRead
        label = "Resource"
        references = (ReferenceCheck("analyst_id", AnalystRepository, "Analyst"),)
        unique_fields = ("code",)

Every write runs reference checks, then uniqueness checks, then the repository
call, and commits only when all of them succeed. Each method returns a
`ServiceResponse`; client errors become 4xx envelopes, anything else is
logged, rolled back and reported as a 500 envelope.
"""

import logging
from typing import Any, ClassVar, Literal

from pydantic import BaseModel
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.exceptions.base import DuplicateError, RepositoryError
from catalog_api.repositories.base_repository import BaseRepository
from catalog_api.schemas.service_response import ServiceResponse
from catalog_api.validators.write_validators import (
    ReferenceCheck,
    conflict_message,
    validate_references,
    validate_unique_fields,
)

logger = logging.getLogger(__name__)


def is_client_error(exc: Exception) -> bool:
    """App-level errors with a 4xx error_code are reported as-is; everything else is unexpected."""
    return isinstance(exc, RepositoryError) and exc.error_code is not None and exc.http_status() < 500


def store_error_text(exc: Exception) -> str:
    """
    Text of the error that actually failed.

    Repositories wrap store errors ("Failed to retrieve Analyst") and chain the
    original as `__cause__`; the driver's own message is what gets reported.
    """
    if not isinstance(exc, RepositoryError):
        return str(exc)
    cause = exc.__cause__
    if cause is None:
        return exc.message
    if isinstance(cause, DBAPIError) and cause.orig is not None:
        return str(cause.orig)
    return str(cause)


class CatalogService:
    repository_class: ClassVar[type[BaseRepository]]
    read_schema: ClassVar[type[BaseModel]]

    # Entity name inside protocol messages ("A Dict Table with name X already exists.")
    label: ClassVar[str]
    # "A" or "An", whichever reads right before `label`
    article: ClassVar[str] = "A"
    # Entity name inside CRUD messages ("DictTable found"); defaults to `label`
    display_name: ClassVar[str | None] = None
    # "DictTables found"; defaults to display_name + "s"
    display_plural: ClassVar[str | None] = None
    # Entity name inside 500 messages ("Error creating dict table: ...")
    error_name: ClassVar[str | None] = None
    error_plural: ClassVar[str | None] = None

    empty_message: ClassVar[str]
    # True: an empty list is a 404 failure. False: 200 with [].
    empty_is_not_found: ClassVar[bool] = True

    references: ClassVar[tuple[ReferenceCheck, ...]] = ()
    unique_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repository = self.repository_class(db)

    # --- naming helpers ---

    @property
    def entity_name(self) -> str:
        return self.display_name or self.label

    @property
    def entity_plural(self) -> str:
        return self.display_plural or f"{self.entity_name}s"

    @property
    def entity_error_name(self) -> str:
        return self.error_name or self.label.lower()

    @property
    def entity_error_plural(self) -> str:
        return self.error_plural or f"{self.entity_error_name}s"

    def project(self, entity) -> BaseModel:
        return self.read_schema.model_validate(entity)

    # --- protocol ---

    async def validate_write(self, candidate: dict[str, Any], exclude_id: int | None = None) -> None:
        """
        Reference checks (declared order), then uniqueness checks (declared order).

        Raises:
            InvalidReferenceError: first dangling reference
            DuplicateError: first conflicting unique field
        """
        await validate_references(self.db, self.references, candidate)
        await validate_unique_fields(
            self.repository, self.label, candidate, self.unique_fields, exclude_id, self.article
        )

    def _phrase_conflict(self, exc: DuplicateError, candidate: dict[str, Any]) -> DuplicateError:
        """
        A unique violation caught by the database is reported with the same
        message as the pre-check would have produced.
        """
        # the driver did not name the column: assume the first declared unique field sent
        fields = exc.fields or self.unique_fields
        for field in fields:
            if candidate.get(field) is not None:
                message = conflict_message(self.label, field, candidate[field], self.article)
                return DuplicateError(message, fields=[field])
        return exc

    async def _fail(self, exc: Exception, action: str, candidate: dict[str, Any] | None = None) -> ServiceResponse:
        """
        Roll back and turn `exc` into a failure envelope.

        `action` completes the 500 message, e.g. "creating analyst" or
        "updating analyst with id 3".
        """
        await self.db.rollback()

        if isinstance(exc, DuplicateError) and candidate is not None:
            exc = self._phrase_conflict(exc, candidate)

        if is_client_error(exc):
            logger.info(
                "service.client_error",
                extra={"entity": self.label, "action": action, "error_code": exc.error_code},
            )
            return ServiceResponse.from_error(exc)

        message = store_error_text(exc)
        logger.exception("service.unexpected_error", extra={"entity": self.label, "action": action})
        return ServiceResponse.failure(f"Error {action}: {message}", 500)

    # --- operations ---

    async def find_all(
        self,
        search_field: str | None = None,
        search_value: str | None = None,
        sort_by: str | None = None,
        sort_order: Literal["asc", "desc"] = "asc",
        offset: int = 0,
        limit: int | None = None,
    ) -> ServiceResponse:
        try:
            entities = await self.repository.find_all(
                search_field=search_field,
                search_value=search_value,
                sort_by=sort_by,
                sort_order=sort_order,
                offset=offset,
                limit=limit,
            )
        except Exception as exc:
            return await self._fail(exc, f"finding all {self.entity_error_plural}")

        if not entities:
            if self.empty_is_not_found:
                return ServiceResponse.failure(self.empty_message, 404)
            return ServiceResponse.ok(self.empty_message, [])

        return ServiceResponse.ok(f"{self.entity_plural} found", [self.project(e) for e in entities])

    async def find_by_id(self, entity_id: int) -> ServiceResponse:
        try:
            entity = await self.repository.find_by_id(entity_id)
        except Exception as exc:
            return await self._fail(exc, f"finding {self.entity_error_name} with id {entity_id}")

        if entity is None:
            return ServiceResponse.failure(f"{self.entity_name} not found", 404)
        return ServiceResponse.ok(f"{self.entity_name} found", self.project(entity))

    async def create(self, payload: BaseModel) -> ServiceResponse:
        candidate = payload.model_dump()
        try:
            await self.validate_write(candidate)
            entity = await self.repository.create(**candidate)
            result = self.project(entity)
            await self.db.commit()
        except Exception as exc:
            return await self._fail(exc, f"creating {self.entity_error_name}", candidate)

        return ServiceResponse.ok(f"{self.entity_name} created successfully", result, 201)

    async def update(self, entity_id: int, payload: BaseModel) -> ServiceResponse:
        """
        Apply the fields present in `payload` (partial replacement).

        The row's own id is excluded from the uniqueness checks, so re-sending
        an unchanged unique value is fine. A missing id is reported only after
        the checks pass.
        """
        candidate = payload.model_dump(exclude_unset=True)
        try:
            await self.validate_write(candidate, exclude_id=entity_id)
            entity = await self.repository.update(entity_id, **candidate)
            if entity is None:
                await self.db.rollback()
                return ServiceResponse.failure(f"{self.entity_name} not found", 404)
            result = self.project(entity)
            await self.db.commit()
        except Exception as exc:
            return await self._fail(exc, f"updating {self.entity_error_name} with id {entity_id}", candidate)

        return ServiceResponse.ok(f"{self.entity_name} updated successfully", result)

    async def delete(self, entity_id: int) -> ServiceResponse:
        """Unconditional and idempotent: deleting a missing id still succeeds."""
        try:
            await self.repository.delete(entity_id)
            await self.db.commit()
        except Exception as exc:
            return await self._fail(exc, f"deleting {self.entity_error_name} with id {entity_id}")

        return ServiceResponse.ok(f"{self.entity_name} deleted successfully")
