from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MappingCreate(BaseModel):
    value_set_code_id: int = Field(..., gt=0)
    original_value: str = Field(..., min_length=1, max_length=255)


class MappingUpdate(BaseModel):
    value_set_code_id: int | None = Field(default=None, gt=0)
    original_value: str | None = Field(default=None, min_length=1, max_length=255)


class MappingRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    value_set_code_id: int
    original_value: str
    last_update: datetime
