from sqlalchemy import Boolean, Float, Integer
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.database.base import Base, CatalogEntityMixin


class Dictionary(CatalogEntityMixin, Base):
    """
    Data dictionary of a resource. A resource has at most one dictionary,
    hence the unique `resource_id`.
    """
    __tablename__ = "dictionary"

    resource_id: Mapped[int] = mapped_column(Integer, unique=True, nullable=False)

    current_version: Mapped[float] = mapped_column(Float, nullable=False)

    to_be_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<Dictionary(id={self.id!r}, resource_id={self.resource_id!r})>"
