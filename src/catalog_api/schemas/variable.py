"""Request / response models for variables."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from catalog_api.models.enums import ValueType, VariableStatus, RollingVersion


class VariableCreate(BaseModel):
    table_id: int = Field(..., gt=0)
    name: str = Field(..., min_length=1, max_length=255)
    path: str = Field(..., min_length=1, max_length=500)
    value_type: ValueType
    label_en: str = Field(..., max_length=500)
    label_fr: str = Field(..., max_length=500)
    value_set_id: int | None = Field(default=None, gt=0)
    # ids of the source variables of a derived variable
    from_variable_id: list[int] | None = None
    derivation_algorithm: str | None = None
    notes: str | None = None
    variable_status: VariableStatus
    rolling_version: RollingVersion
    to_be_published: bool = False


class VariableUpdate(BaseModel):
    table_id: int | None = Field(default=None, gt=0)
    name: str | None = Field(default=None, min_length=1, max_length=255)
    path: str | None = Field(default=None, min_length=1, max_length=500)
    value_type: ValueType | None = None
    label_en: str | None = Field(default=None, max_length=500)
    label_fr: str | None = Field(default=None, max_length=500)
    value_set_id: int | None = Field(default=None, gt=0)
    from_variable_id: list[int] | None = None
    derivation_algorithm: str | None = None
    notes: str | None = None
    variable_status: VariableStatus | None = None
    rolling_version: RollingVersion | None = None
    to_be_published: bool | None = None


class VariableRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    table_id: int
    name: str
    path: str
    value_type: ValueType
    label_en: str
    label_fr: str
    value_set_id: int | None = None
    from_variable_id: list[int] | None = None
    derivation_algorithm: str | None = None
    notes: str | None = None
    variable_status: VariableStatus
    rolling_version: RollingVersion
    to_be_published: bool
    last_update: datetime
