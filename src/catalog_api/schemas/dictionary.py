from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class DictionaryCreate(BaseModel):
    resource_id: int = Field(..., gt=0)
    current_version: float
    to_be_published: bool = False


class DictionaryUpdate(BaseModel):
    resource_id: int | None = Field(default=None, gt=0)
    current_version: float | None = None
    to_be_published: bool | None = None


class DictionaryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    resource_id: int
    current_version: float
    to_be_published: bool
    last_update: datetime
