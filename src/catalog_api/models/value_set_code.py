from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.database.base import Base, CatalogEntityMixin


class ValueSetCode(CatalogEntityMixin, Base):
    """
    One code of a value set.
    """
    __tablename__ = "value_set_code"

    # Reference to ValueSet (unique in this model)
    value_set_id: Mapped[int] = mapped_column(Integer, unique=True, nullable=False)

    code: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)

    label_en: Mapped[str] = mapped_column(String(255), nullable=False)
    label_fr: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<ValueSetCode(id={self.id!r}, code={self.code!r})>"
