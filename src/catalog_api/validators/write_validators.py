"""
Reference and uniqueness checks run by the service layer before every write.

Each service declares its checks as data (a tuple of `ReferenceCheck` and a
tuple of unique field names); the two routines below walk those declarations
in order and raise on the first failure:

    reference checks (all)  ->  uniqueness checks (in declared order)  ->  persist

References are validated first, so a payload that is both dangling and
conflicting reports the dangling reference.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, TYPE_CHECKING

from catalog_api.exceptions.base import DuplicateError, InvalidReferenceError

if TYPE_CHECKING:
    from catalog_api.repositories.base_repository import BaseRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferenceCheck:
    """
    A reference field of an entity and the repository of the entity it points at.

    - field: attribute on the payload holding the referenced id (e.g. "analyst_id")
    - repository: repository class of the referenced entity
    - label: display name of the referenced entity, used in the error message
    """
    field: str
    repository: type
    label: str


def conflict_message(label: str, field: str, value: Any, article: str = "A") -> str:
    """
    "A Value Set with name X already exists." / "An Analyst with name A already exists."

    The article goes by how the label is spoken ("A User"), so the caller passes it.
    """
    return f"{article} {label} with {field} {value} already exists."


async def validate_reference_id(
    repository: "BaseRepository",
    label: str,
    reference_id: int | None,
    field: str | None = None,
) -> None:
    """
    Ensure `reference_id` points at an existing row of `repository`.

    An absent reference (None) passes; optional references are allowed to be empty.

    Raises:
        InvalidReferenceError: "<label> with ID <id> does not exist"
    """
    if reference_id is None:
        return

    existing = await repository.find_by_id(reference_id)
    if existing is None:
        logger.info(
            "protocol.reference.invalid",
            extra={"entity": label, "field": field, "reference_id": reference_id},
        )
        raise InvalidReferenceError(
            f"{label} with ID {reference_id} does not exist",
            fields=[field] if field else None,
        )


async def validate_references(db, checks: Iterable[ReferenceCheck], candidate: Mapping[str, Any]) -> None:
    """Run every reference check in declared order; fields missing from the candidate pass."""
    for check in checks:
        await validate_reference_id(
            check.repository(db),
            check.label,
            candidate.get(check.field),
            check.field,
        )


async def validate_unique_fields(
    repository: "BaseRepository",
    label: str,
    candidate: Mapping[str, Any],
    fields: Iterable[str],
    exclude_id: int | None = None,
    article: str = "A",
) -> None:
    """
    Check `fields` of `candidate` against existing rows, in order.

    - A field is checked only when the candidate carries a value for it
      (`is not None`: 0 and "" are real values and are checked).
    - A row with the same value conflicts unless it is the row being updated
      (`exclude_id`).
    - The first conflicting field raises; later fields are not evaluated.

    Raises:
        DuplicateError: "<article> <label> with <field> <value> already exists."
    """
    for field in fields:
        value = candidate.get(field)
        if value is None:
            continue

        existing = await repository.find_by_field(field, value)
        if existing is not None and existing.id != exclude_id:
            logger.info(
                "protocol.uniqueness.conflict",
                extra={"entity": label, "field": field, "existing_id": existing.id, "exclude_id": exclude_id},
            )
            raise DuplicateError(conflict_message(label, field, value, article), fields=[field])
