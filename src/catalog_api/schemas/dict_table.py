from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from catalog_api.models.enums import EntityType, Domain


class DictTableCreate(BaseModel):
    dictionary_id: int = Field(..., gt=0)
    name: str = Field(..., min_length=1, max_length=255)
    entity_type: EntityType
    domain: Domain | None = None
    label_en: str = Field(..., max_length=500)
    label_fr: str = Field(..., max_length=500)
    row_filter: str | None = Field(default=None, max_length=500)
    to_be_published: bool = False


class DictTableUpdate(BaseModel):
    dictionary_id: int | None = Field(default=None, gt=0)
    name: str | None = Field(default=None, min_length=1, max_length=255)
    entity_type: EntityType | None = None
    domain: Domain | None = None
    label_en: str | None = Field(default=None, max_length=500)
    label_fr: str | None = Field(default=None, max_length=500)
    row_filter: str | None = Field(default=None, max_length=500)
    to_be_published: bool | None = None


class DictTableRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    dictionary_id: int
    name: str
    entity_type: EntityType
    domain: Domain | None = None
    label_en: str
    label_fr: str
    row_filter: str | None = None
    to_be_published: bool
    last_update: datetime
