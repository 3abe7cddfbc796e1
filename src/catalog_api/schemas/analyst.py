from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AnalystCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class AnalystUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)


class AnalystRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    last_update: datetime
