from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ValueSetCodeCreate(BaseModel):
    value_set_id: int = Field(..., gt=0)
    code: str = Field(..., min_length=1, max_length=50)
    label_en: str = Field(..., max_length=255)
    label_fr: str = Field(..., max_length=255)


class ValueSetCodeUpdate(BaseModel):
    value_set_id: int | None = Field(default=None, gt=0)
    code: str | None = Field(default=None, min_length=1, max_length=50)
    label_en: str | None = Field(default=None, max_length=255)
    label_fr: str | None = Field(default=None, max_length=255)


class ValueSetCodeRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    value_set_id: int
    code: str
    label_en: str
    label_fr: str
    last_update: datetime
