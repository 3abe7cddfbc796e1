from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.database.base import Base, CatalogEntityMixin


class ValueSet(CatalogEntityMixin, Base):
    """
    A named set of canonical codes (see ValueSetCode).
    """
    __tablename__ = "value_set"

    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)

    description_en: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    description_fr: Mapped[str | None] = mapped_column(String(1000), nullable=True)

    # Link to the external definition of the value set, if any
    url: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<ValueSet(id={self.id!r}, name={self.name!r})>"
