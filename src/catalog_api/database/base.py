"""
Declarative base shared by every catalog model.

Models are declared without a schema. The Postgres schema (settings.DB_SCHEMA,
"catalog" by default) is applied per engine through `schema_translate_map`
(see database/session.py), which keeps the same metadata usable on SQLite.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    pass


# Naming convention for constraints and indexes
Base.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}


class CatalogEntityMixin:
    """
    Columns carried by every catalog entity: integer surrogate key and the
    server-assigned `last_update` stamp (set on insert, refreshed by the
    repository on every update).
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    last_update: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )
