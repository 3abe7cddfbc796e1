"""
Base repository class providing common database operations.

This class serves as a reusable foundation for repositories that interact with
the database using SQLAlchemy's async sessions.

Every catalog entity gets the same single-table contract from it: list with
an optional substring search and a single sort column, lookup by id or by any
column, create, update and delete. Entity repositories only add the named
lookups their services need (`find_by_name`, `find_by_code`, ...).

Repositories never commit. They flush so generated ids and server defaults are
available, and leave the transaction boundary to the service layer.
"""
from catalog_api.exceptions.base import RepositoryError, InvalidFieldError
from catalog_api.exceptions.mapper import db_error_handler
from catalog_api.validators.exception_validators import (
    find_unknown_model_kwargs,
    get_required_columns,
    is_model_column,
)

import time
from typing import TypeVar, Generic, Type, Any, Literal
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, func, cast, String
import logging

from catalog_api.database.base import Base

# Type variable for the model class
ModelType = TypeVar("ModelType", bound=Base)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameters:
        ModelType: The SQLAlchemy model class this repository manages.
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Args:
            model: The SQLAlchemy model class (e.g. Analyst, not Analyst()).
            db: The async database session, injected per request.
        """
        self.model = model
        self.db = db

    # =================================================================================================================
    # Create
    # =================================================================================================================

    async def create(self, **kwargs) -> ModelType:
        """
        Create an entity with validation + DB write. Logging:
        - DEBUG: start event with model name and provided keys (not values).
        - INFO: expected input errors (invalid fields, missing required).
        - INFO: success event with created id and duration_ms.
        - EXCEPTION: unexpected errors with stack trace (inside db_error_handler).

        Uniqueness is not pre-checked here; the service runs the ordered
        uniqueness protocol and the unique constraints catch anything racing it.
        """
        logger.debug(
            "repo.create.start",
            extra={
                "model": self.model.__name__,
                "operation": "create",
                "provided_keys": sorted(list(kwargs.keys())),
            },
        )

        # 1) unknown fields
        unknown = find_unknown_model_kwargs(self.model, kwargs)
        if unknown:
            logger.info(
                "repo.create.invalid_fields",
                extra={
                    "model": self.model.__name__,
                    "operation": "create",
                    "invalid_fields": sorted(unknown),
                },
            )
            raise InvalidFieldError(f"Unknown field(s) for {self.model.__name__}: {', '.join(unknown)}", fields=unknown)

        # 2) required fields (missing or explicit None on a NOT NULL column)
        required_cols = get_required_columns(self.model)
        missing = [c for c in required_cols if (c not in kwargs) or (kwargs.get(c) is None)]
        if missing:
            logger.info(
                "repo.create.missing_required",
                extra={
                    "model": self.model.__name__,
                    "operation": "create",
                    "missing_fields": sorted(missing),
                },
            )
            raise RepositoryError(
                f"Missing required field(s): {', '.join(missing)} for {self.model.__name__}",
                fields=missing,
                error_code="invalid_input",
            )

        # 3) DB write; integrity errors are mapped by db_error_handler
        start = time.perf_counter()

        async with db_error_handler(self.db, self.model.__name__, self.model.__tablename__):
            entity = self.model(**kwargs)
            self.db.add(entity)
            await self.db.flush()
            # reload server-generated columns (id, last_update)
            await self.db.refresh(entity)

            logger.info(
                "repo.create.success",
                extra={
                    "model": self.model.__name__,
                    "operation": "create",
                    "id": entity.id,
                    "duration_ms": int((time.perf_counter() - start) * 1000),
                },
            )

            return entity

    # =================================================================================================================
    # Read
    # =================================================================================================================

    async def find_by_id(self, entity_id: int) -> ModelType | None:
        """
        Get an entity by its ID.

        Returns:
            The entity if found, otherwise None (never raises for not-found).

        Raises:
            RepositoryError: If the query itself fails.
        """
        try:
            result = await self.db.execute(
                select(self.model).where(self.model.id == entity_id)
            )
            entity = result.scalar_one_or_none()

            logger.debug(f"Retrieved {self.model.__name__} by ID: {entity_id}")
            return entity

        except Exception as e:
            logger.error(f"Error retrieving {self.model.__name__} by ID {entity_id}: {e}")
            raise RepositoryError(f"Failed to retrieve {self.model.__name__}") from e

    async def find_by_field(self, field: str, value: Any) -> ModelType | None:
        """
        Get the first entity whose `field` equals `value`.

        Raises:
            RepositoryError: If the field does not exist on the model or the query fails
        """
        if not is_model_column(self.model, field):
            raise RepositoryError(f"{self.model.__name__} has no field '{field}'", fields=[field])

        try:
            query = select(self.model).where(getattr(self.model, field) == value).order_by(self.model.id).limit(1)
            result = await self.db.execute(query)
            entity = result.scalars().first()

            logger.debug(f"Found {self.model.__name__} by {field}: {value}")
            return entity

        except Exception as e:
            logger.error(f"Error finding {self.model.__name__} by {field}={value}: {e}")
            raise RepositoryError(f"Failed to find {self.model.__name__}") from e

    async def find_all(
        self,
        search_field: str | None = None,                  # Column to filter on
        search_value: str | None = None,                  # Substring to look for in that column
        sort_by: str | None = None,                       # Column to sort by
        sort_order: Literal["asc", "desc"] = "asc",
        offset: int = 0,                                  # Used for pagination: how many records to skip
        limit: int | None = None                          # Max number of records to return (None = all)
    ) -> list[ModelType]:
        """
        Get all entities, optionally filtered and sorted.

        - Filter: `search_field LIKE %search_value%`, applied to the column cast
          to text so enums, numbers and dates are searchable too.
        - Sort: a single column, ascending unless `sort_order="desc"`. Defaults to id.
        - Unknown search or sort columns are ignored with a warning.

        Returns:
            A list of model instances (empty if none match).
        """
        try:
            query = select(self.model)

            if search_field and search_value is not None:
                if is_model_column(self.model, search_field):
                    column = getattr(self.model, search_field)
                    query = query.where(cast(column, String).like(f"%{search_value}%"))
                else:
                    logger.warning(
                        f"Ignored invalid 'searchField': '{search_field}' does not exist on {self.model.__name__}")

            order_column = self.model.id
            if sort_by:
                if is_model_column(self.model, sort_by):
                    order_column = getattr(self.model, sort_by)
                    logger.debug(f"Ordering {self.model.__name__} by field: '{sort_by}' {sort_order}")
                else:
                    logger.warning(
                        f"Ignored invalid 'sortBy' field: '{sort_by}' does not exist on {self.model.__name__}")

            query = query.order_by(order_column.desc() if sort_order == "desc" else order_column.asc())

            if offset:
                query = query.offset(offset)
            if limit is not None:
                query = query.limit(limit)

            result = await self.db.execute(query)
            entities = result.scalars().all()

            logger.debug(f"Retrieved {len(entities)} {self.model.__name__} entities")
            return list(entities)

        except Exception as e:
            logger.error(f"Error retrieving all {self.model.__name__}: {e}")
            raise RepositoryError(f"Failed to retrieve {self.model.__name__} entities") from e

    # =================================================================================================================
    # Update
    # =================================================================================================================

    async def update(self, entity_id: int, **kwargs) -> ModelType | None:
        """
        Update an entity by its ID.

        Only the supplied fields change; an explicit None clears a nullable column.
        `last_update` is always reset by the database.

        Returns:
            The updated entity if found, None otherwise

        Raises:
            InvalidFieldError: If a field is not a column of the model
            DuplicateError: If the update violates a unique constraint
            RepositoryError: For other database errors
        """
        unknown = find_unknown_model_kwargs(self.model, kwargs)
        if unknown:
            raise InvalidFieldError(f"Unknown field(s) for {self.model.__name__}: {', '.join(unknown)}", fields=unknown)

        update_data = dict(kwargs)
        if hasattr(self.model, "last_update"):
            update_data["last_update"] = func.now()

        async with db_error_handler(self.db, self.model.__name__, self.model.__tablename__):
            stmt = (
                update(self.model)
                .where(self.model.id == entity_id)
                .values(**update_data)
                .execution_options(synchronize_session=False)
            )
            result = await self.db.execute(stmt)

            if result.rowcount == 0:
                logger.warning(f"{self.model.__name__} with ID {entity_id} not found for update")
                return None

            # reload so an instance already in the identity map picks up the new values
            refreshed = await self.db.execute(
                select(self.model)
                .where(self.model.id == entity_id)
                .execution_options(populate_existing=True)
            )
            updated_entity = refreshed.scalar_one()

            logger.debug(f"Updated {self.model.__name__} with ID: {entity_id}")
            return updated_entity

    # =================================================================================================================
    # Delete
    # =================================================================================================================

    async def delete(self, entity_id: int) -> None:
        """
        Delete an entity by its ID. Deleting a missing id is not an error.

        Raises:
            RepositoryError: For database errors
        """
        async with db_error_handler(self.db, self.model.__name__, self.model.__tablename__):
            result = await self.db.execute(delete(self.model).where(self.model.id == entity_id))

            if result.rowcount > 0:
                logger.debug(f"Deleted {self.model.__name__} with ID: {entity_id}")
            else:
                logger.debug(f"{self.model.__name__} with ID {entity_id} not present, nothing to delete")
