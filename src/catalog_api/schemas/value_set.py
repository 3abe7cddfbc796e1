from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ValueSetCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description_en: str | None = Field(default=None, max_length=1000)
    description_fr: str | None = Field(default=None, max_length=1000)
    url: str | None = Field(default=None, max_length=255)


class ValueSetUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description_en: str | None = Field(default=None, max_length=1000)
    description_fr: str | None = Field(default=None, max_length=1000)
    url: str | None = Field(default=None, max_length=255)


class ValueSetRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description_en: str | None = None
    description_fr: str | None = None
    url: str | None = None
    last_update: datetime
