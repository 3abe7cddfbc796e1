"""Request / response models for resources (projects, warehouses, source systems)."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from catalog_api.models.enums import ResourceType, ProjectActive, ProjectStatus


class ResourceCreate(BaseModel):
    code: str = Field(..., min_length=1, max_length=20)
    name: str = Field(..., min_length=1, max_length=255)
    title: str | None = Field(default=None, max_length=255)
    resource_type: ResourceType
    description_en: str = Field(..., max_length=1000)
    description_fr: str = Field(..., max_length=1000)
    principal_investigator: str | None = Field(default=None, max_length=500)
    erb_project_id: str | None = Field(default=None, max_length=255)
    project_creation_date: date | None = None
    project_active: ProjectActive | None = None
    project_status: ProjectStatus | None = None
    project_approved: bool | None = None
    project_folder: str | None = Field(default=None, max_length=255)
    project_approval_date: date | None = None
    project_completion_date: date | None = None
    to_be_published: bool = False
    system_database_type: str | None = Field(default=None, max_length=255)
    system_collection_starting_year: int | None = None
    analyst_id: int | None = Field(default=None, gt=0)


class ResourceUpdate(BaseModel):
    code: str | None = Field(default=None, min_length=1, max_length=20)
    name: str | None = Field(default=None, min_length=1, max_length=255)
    title: str | None = Field(default=None, max_length=255)
    resource_type: ResourceType | None = None
    description_en: str | None = Field(default=None, max_length=1000)
    description_fr: str | None = Field(default=None, max_length=1000)
    principal_investigator: str | None = Field(default=None, max_length=500)
    erb_project_id: str | None = Field(default=None, max_length=255)
    project_creation_date: date | None = None
    project_active: ProjectActive | None = None
    project_status: ProjectStatus | None = None
    project_approved: bool | None = None
    project_folder: str | None = Field(default=None, max_length=255)
    project_approval_date: date | None = None
    project_completion_date: date | None = None
    to_be_published: bool | None = None
    system_database_type: str | None = Field(default=None, max_length=255)
    system_collection_starting_year: int | None = None
    analyst_id: int | None = Field(default=None, gt=0)


class ResourceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    code: str
    name: str
    title: str | None = None
    resource_type: ResourceType
    description_en: str
    description_fr: str
    principal_investigator: str | None = None
    erb_project_id: str | None = None
    project_creation_date: date | None = None
    project_active: ProjectActive | None = None
    project_status: ProjectStatus | None = None
    project_approved: bool | None = None
    project_folder: str | None = None
    project_approval_date: date | None = None
    project_completion_date: date | None = None
    to_be_published: bool
    system_database_type: str | None = None
    system_collection_starting_year: int | None = None
    analyst_id: int | None = None
    last_update: datetime
