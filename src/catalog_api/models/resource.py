from datetime import date

from sqlalchemy import String, Boolean, Date, Integer
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.database.base import Base, CatalogEntityMixin
from .enums import ResourceType, ProjectActive, ProjectStatus, enum_column_type


class Resource(CatalogEntityMixin, Base):
    """
    A data resource: warehouse, research project, source system, ...

    `analyst_id` is an optional reference to Analyst. It is validated by the
    service layer and intentionally carries no database foreign key, because
    deletes are unconditional and may leave dangling references.
    """
    __tablename__ = "resource"

    # Short business code (unique)
    code: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)

    resource_type: Mapped[ResourceType] = mapped_column(
        enum_column_type(ResourceType),
        nullable=False
    )

    description_en: Mapped[str] = mapped_column(String(1000), nullable=False)
    description_fr: Mapped[str] = mapped_column(String(1000), nullable=False)

    # --- Project metadata (all optional) ---
    principal_investigator: Mapped[str | None] = mapped_column(String(500), nullable=True)
    erb_project_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    project_creation_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    project_active: Mapped[ProjectActive | None] = mapped_column(
        enum_column_type(ProjectActive),
        nullable=True
    )
    project_status: Mapped[ProjectStatus | None] = mapped_column(
        enum_column_type(ProjectStatus),
        nullable=True
    )
    project_approved: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    project_folder: Mapped[str | None] = mapped_column(String(255), nullable=True)
    project_approval_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    project_completion_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    to_be_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # --- Source system metadata ---
    system_database_type: Mapped[str | None] = mapped_column(String(255), nullable=True)
    system_collection_starting_year: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Reference to Analyst (validated in the service layer)
    analyst_id: Mapped[int | None] = mapped_column(Integer, index=True, nullable=True)

    def __repr__(self) -> str:
        return f"<Resource(id={self.id!r}, code={self.code!r})>"
