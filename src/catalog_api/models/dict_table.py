from sqlalchemy import String, Boolean, Integer
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.database.base import Base, CatalogEntityMixin
from .enums import EntityType, Domain, enum_column_type


class DictTable(CatalogEntityMixin, Base):
    """
    A table described by a dictionary.
    """
    __tablename__ = "dict_table"

    # Reference to Dictionary (unique: one table per dictionary in this model)
    dictionary_id: Mapped[int] = mapped_column(Integer, unique=True, nullable=False)

    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)

    entity_type: Mapped[EntityType] = mapped_column(enum_column_type(EntityType), nullable=False)
    domain: Mapped[Domain | None] = mapped_column(enum_column_type(Domain), nullable=True)

    label_en: Mapped[str] = mapped_column(String(500), nullable=False)
    label_fr: Mapped[str] = mapped_column(String(500), nullable=False)

    # Optional filter expression applied to the source rows
    row_filter: Mapped[str | None] = mapped_column(String(500), nullable=True)

    to_be_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<DictTable(id={self.id!r}, name={self.name!r})>"
