from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.database.base import Base, CatalogEntityMixin


class Analyst(CatalogEntityMixin, Base):
    """
    An analyst who can be assigned to resources.
    """
    __tablename__ = "analyst"

    # Display name (unique across analysts)
    name: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False
    )

    def __repr__(self) -> str:
        return f"<Analyst(id={self.id!r}, name={self.name!r})>"
