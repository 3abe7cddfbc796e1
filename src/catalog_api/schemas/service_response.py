"""
The response envelope returned by every service method and every endpoint:

    {"success": true, "message": "Analyst found", "responseObject": {...}, "statusCode": 200}

The HTTP status of the response always equals `statusCode`.
"""

from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from catalog_api.exceptions.base import RepositoryError


class ServiceResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: str
    response_object: Any = Field(default=None, alias="responseObject")
    status_code: int = Field(alias="statusCode")

    @classmethod
    def ok(cls, message: str, response_object: Any = None, status_code: int = 200) -> "ServiceResponse":
        return cls(success=True, message=message, response_object=response_object, status_code=status_code)

    @classmethod
    def failure(cls, message: str, status_code: int, response_object: Any = None) -> "ServiceResponse":
        return cls(success=False, message=message, response_object=response_object, status_code=status_code)

    @classmethod
    def from_error(cls, exc: RepositoryError) -> "ServiceResponse":
        """Envelope for an app-level exception (status from its error_code)."""
        return cls.failure(exc.message, exc.http_status())

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.to_json())
