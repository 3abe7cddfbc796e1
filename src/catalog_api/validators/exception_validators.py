"""
Column introspection used by the repositories before they touch the database.

A bad field name or a missing NOT NULL value is reported as a RepositoryError
subclass up front instead of surfacing later as a driver error.
"""

from sqlalchemy import UniqueConstraint
from sqlalchemy import inspect as sa_inspect


def find_unknown_model_kwargs(model, kwargs: dict) -> list[str]:
    """Keys of `kwargs` that are not mapped attributes of `model`, in input order."""
    known = {attr.key for attr in sa_inspect(model).attrs}
    return [key for key in kwargs if key not in known]


def is_model_column(model, name: str | None) -> bool:
    """True when `name` is a real table column (search / sort targets must be)."""
    return bool(name) and name in model.__table__.columns


def get_required_columns(model) -> list[str]:
    """
    NOT NULL columns the caller has to supply.

    Columns with a client or server default (`last_update`, `to_be_published`)
    and the autoincrement `id` are filled in by the database layer.
    """
    required = []
    for column in model.__table__.columns:
        if column.nullable:
            continue
        if column.default is not None or column.server_default is not None:
            continue
        if column.primary_key and column.autoincrement is True:
            continue
        required.append(column.name)
    return required


def get_unique_column_sets(model) -> list[tuple[str, ...]]:
    """
    Distinct unique column sets of `model`'s table, in declaration order.

    `unique=True` columns, UniqueConstraint objects and unique indexes all
    count; a set declared more than one way is listed once.
    """
    table = model.__table__
    candidates = [(column.name,) for column in table.columns if column.unique]
    candidates += [
        tuple(c.name for c in constraint.columns)
        for constraint in table.constraints
        if isinstance(constraint, UniqueConstraint)
    ]
    candidates += [tuple(c.name for c in index.columns) for index in table.indexes if index.unique]

    unique_sets: list[tuple[str, ...]] = []
    for column_set in candidates:
        if column_set and column_set not in unique_sets:
            unique_sets.append(column_set)
    return unique_sets
