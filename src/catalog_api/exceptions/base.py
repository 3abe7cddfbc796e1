"""
App-level exceptions for repository, protocol and auth failures.

Every exception carries an `error_code` that decides its HTTP status and can
render itself as the standard response envelope, so services and FastAPI
exception handlers report failures the same way.
"""

from typing import Iterable


class RepositoryError(Exception):
    """
    Base exception for repository/service errors.

    - message: human-friendly message (safe to show to clients)
    - fields: optional list of field names related to the error (e.g., ['email'])
    - constraint: optional DB constraint name or identifier (for logs only)
    - error_code: canonical short code (e.g., 'duplicate', 'invalid_reference')
    """

    ERROR_CODE_TO_STATUS = {
        "invalid_input": 400,
        "invalid_field": 400,
        "invalid_reference": 400,
        "invalid_token": 400,
        "invalid_credentials": 400,
        "unauthorized": 401,
        "not_found": 404,
        "duplicate": 409,
        "unexpected": 500,
    }

    def __init__(self, message: str, *, fields: Iterable[str] | None = None,
                 constraint: str | None = None, error_code: str | None = None):
        super().__init__(message)
        self.message = message  # user-friendly message
        self.fields = list(fields) if fields else None
        self.constraint = constraint
        self.error_code = error_code

    def __str__(self) -> str:
        base = self.message
        parts = []
        if self.fields:
            parts.append(f"fields: {', '.join(self.fields)}")
        if self.constraint:
            parts.append(f"constraint: {self.constraint}")
        if self.error_code:
            parts.append(f"code: {self.error_code}")
        if parts:
            return f"{base} ({'; '.join(parts)})"
        return base

    def http_status(self) -> int:
        """
        Return the HTTP status code that should accompany this error.
        - If the exception has an error_code that will be looked up in ERROR_CODE_TO_STATUS.
        - Otherwise default to 400 (Bad Request).
        """
        if self.error_code:
            return self.ERROR_CODE_TO_STATUS.get(self.error_code, 400)
        return 400

    def to_payload(self) -> dict:
        """
        Return the failure envelope for this error:
            {
                "success": false,
                "message": "A human-friendly message",
                "responseObject": null,
                "statusCode": 409
            }
        Raw DB messages never end up here; `message` is always the friendly one.
        """
        return {
            "success": False,
            "message": self.message,
            "responseObject": None,
            "statusCode": self.http_status(),
        }


class NotFoundError(RepositoryError):
    def __init__(self, message: str = "Not found", *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields, error_code="not_found")


class DuplicateError(RepositoryError):
    """A uniqueness conflict: pre-checked by the service or raised by a unique constraint."""

    def __init__(self, message: str, *, fields: Iterable[str] | None = None, constraint: str | None = None):
        super().__init__(message, fields=fields, constraint=constraint, error_code="duplicate")


class InvalidFieldError(RepositoryError):
    """Raised when the caller passes unexpected/unknown fields to repository methods."""

    def __init__(self, message: str, *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields, error_code="invalid_field")


class InvalidReferenceError(RepositoryError):
    """A reference field points at a row that does not exist."""

    def __init__(self, message: str, *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields, error_code="invalid_reference")


class UnauthorizedError(RepositoryError):
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, error_code="unauthorized")


class InvalidTokenError(RepositoryError):
    """An access token was presented but failed signature / expiry verification."""

    def __init__(self, message: str = "Invalid token."):
        super().__init__(message, error_code="invalid_token")


class InvalidCredentialsError(RepositoryError):
    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, error_code="invalid_credentials")


__all__ = [
    "RepositoryError",
    "NotFoundError",
    "DuplicateError",
    "InvalidFieldError",
    "InvalidReferenceError",
    "UnauthorizedError",
    "InvalidTokenError",
    "InvalidCredentialsError",
]
