from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.database.base import Base, CatalogEntityMixin


class Mapping(CatalogEntityMixin, Base):
    """
    Maps an original source value onto a canonical value-set code.
    """
    __tablename__ = "mapping"

    # Reference to ValueSetCode (unique)
    value_set_code_id: Mapped[int] = mapped_column(Integer, unique=True, nullable=False)

    # Value as found in the source system (unique)
    original_value: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Mapping(id={self.id!r}, original_value={self.original_value!r})>"
