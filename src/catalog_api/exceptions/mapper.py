import re
import logging
from contextlib import asynccontextmanager

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from .integrity_classifier import (
    classify_integrity_error,
    UniqueConstraintError,
    NotNullConstraintError,
    ForeignKeyConstraintError,
    CheckConstraintError,
)
from .base import DuplicateError, RepositoryError

logger = logging.getLogger(__name__)

# -----------------------
# Column extraction helpers
# -----------------------

def _extract_columns_postgres(msg: str) -> list[str] | None:
    """
    Try to extract involved column names from common Postgres messages:
      - 'null value in column "name" of relation "analyst" violates not-null constraint'
      - 'DETAIL:  Key (code)=(R01) already exists.'
    """
    if not msg:
        return None

    m = re.search(r'null value in column "(?P<col>[^"]+)"', msg, flags=re.IGNORECASE)
    if m:
        return [m.group("col")]

    m = re.search(r'key \((?P<cols>[^)]+)\)=', msg, flags=re.IGNORECASE)
    if m:
        return [c.strip().strip('"') for c in m.group("cols").split(",")]

    return None


def _extract_columns_sqlite(msg: str) -> list[str] | None:
    # SQLite: 'UNIQUE constraint failed: analyst.name' / 'NOT NULL constraint failed: analyst.name'
    m = re.search(r'(?:UNIQUE|NOT NULL) constraint failed: (?P<cols>.+)$', msg, flags=re.IGNORECASE | re.MULTILINE)
    if m:
        return [c.split('.')[-1].strip() for c in re.split(r',\s*', m.group("cols"))]
    return None


def _columns_from_constraint_name(constraint_name: str | None, table_name: str | None) -> list[str] | None:
    """
    Recover the column from a conventional unique constraint name
    (`uq_<table>_<column>`, see the naming convention on Base.metadata).
    asyncpg reports the constraint name without a DETAIL line in some versions.
    """
    if not constraint_name or not table_name:
        return None
    prefix = f"uq_{table_name}_"
    if constraint_name.startswith(prefix):
        return [constraint_name[len(prefix):]]
    return None


def extract_columns_from_integrity(exc: IntegrityError, table_name: str | None = None,
                                   constraint_name: str | None = None) -> list[str] | None:
    """
    Best-effort extraction of column names from the DB error (Postgres, SQLite).
    """
    orig = exc.orig
    msg = str(orig) if orig is not None else str(exc)

    cols = _extract_columns_postgres(msg)
    if cols:
        return cols

    cols = _extract_columns_sqlite(msg)
    if cols:
        return cols

    return _columns_from_constraint_name(constraint_name, table_name)


# -----------------------
# Mapper
# -----------------------

def raise_mapped_integrity_error(exc: IntegrityError, model_name: str | None = None,
                                 table_name: str | None = None) -> None:
    """
    Map a SQLAlchemy IntegrityError to an app-level exception and raise it.
    Populates `.fields` and `.constraint` where possible so the service layer can
    phrase a unique violation exactly like its own uniqueness pre-check.
    """
    exc_cls, constraint_name = classify_integrity_error(exc)
    columns = extract_columns_from_integrity(exc, table_name, constraint_name)

    model_part = f"{model_name}" if model_name else "Record"

    if exc_cls is UniqueConstraintError:
        # A unique violation that slipped past the service pre-check (concurrent
        # writers); still a client-level 409, so INFO.
        logger.info(
            "mapper.duplicate_detected",
            extra={"model": model_part, "fields": columns, "constraint": constraint_name},
        )
        if columns:
            raise DuplicateError(f"{model_part} already exists for field(s): {', '.join(columns)}",
                                 fields=columns, constraint=constraint_name) from exc
        raise DuplicateError(f"{model_part} already exists (unique constraint)",
                             fields=None, constraint=constraint_name) from exc

    if exc_cls is NotNullConstraintError:
        logger.info(
            "mapper.not_null_violation",
            extra={"model": model_part, "fields": columns, "constraint": constraint_name},
        )
        if columns:
            raise RepositoryError(f"Missing required field(s): {', '.join(columns)} for {model_part}",
                                  fields=columns, constraint=constraint_name, error_code="invalid_input") from exc
        raise RepositoryError(f"Missing required field for {model_part}", constraint=constraint_name,
                              error_code="invalid_input") from exc

    # Only refresh_token.user_id is a real foreign key; catalog references are
    # checked by the service layer and have no database constraint.
    if exc_cls is ForeignKeyConstraintError:
        logger.info(
            "mapper.foreign_key_violation",
            extra={"model": model_part, "fields": columns, "constraint": constraint_name},
        )
        raise RepositoryError(f"{model_part} foreign key constraint violated",
                              fields=columns, constraint=constraint_name) from exc

    if exc_cls is CheckConstraintError:
        # Raw DB text stays at DEBUG
        logger.debug(
            "mapper.check_constraint_failure",
            extra={"model": model_part, "raw": str(exc.orig), "constraint": constraint_name},
        )
        raise RepositoryError(f"{model_part} business rule violated (check constraint).",
                              constraint=constraint_name) from exc

    logger.warning(
        "mapper.unknown_integrity_error",
        extra={"model": model_part, "constraint": constraint_name},
    )
    logger.debug("mapper.unknown_integrity_raw", extra={"model": model_part, "raw": str(exc.orig)})
    raise RepositoryError(f"{model_part} database integrity error.") from exc


# -----------------------
# Async context manager to DRY error handling in repositories
# -----------------------
@asynccontextmanager
async def db_error_handler(db: AsyncSession, model_name: str | None = None, table_name: str | None = None):
    """
    Usage:
        async with db_error_handler(self.db, self.model.__name__, self.model.__tablename__):
            ... DB ops that may raise IntegrityError ...
    This will rollback on error and raise a mapped app-level exception.
    App-level errors raised inside the block pass through untouched.
    """
    try:
        yield
    except IntegrityError as exc:
        try:
            await db.rollback()
        except Exception:
            logger.exception("Failed to rollback session after IntegrityError", extra={"model": model_name})
        raise_mapped_integrity_error(exc, model_name, table_name)
    except RepositoryError:
        try:
            await db.rollback()
        except Exception:
            logger.exception("Failed to rollback session after repository error", extra={"model": model_name})
        raise
    except Exception as exc:
        try:
            await db.rollback()
        except Exception:
            logger.exception("Failed to rollback session after unexpected error", extra={"model": model_name})

        logger.exception("Unexpected DB error for %s", model_name, extra={"model": model_name})
        raise RepositoryError(f"Failed to operate on {model_name or 'database'}", error_code="unexpected") from exc
