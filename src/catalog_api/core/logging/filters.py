"""
Logging filters.

- RequestIdFilter: stamps `record.request_id` from a ContextVar so every line
  logged while serving a request carries that request's id ("-" outside requests).
- RedactFilter: masks secrets passed through `extra={...}`, including inside
  nested dicts (e.g. a logged payload holding a password).
"""

import contextvars
import logging
from logging import LogRecord
from typing import Any

_request_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)

REDACTED = "***REDACTED***"


def set_request_id(request_id: str | None):
    """Set the id for the current context; returns the token for `reset_request_id`."""
    return _request_id_ctx.set(request_id)


def reset_request_id(token) -> None:
    _request_id_ctx.reset(token)


def get_request_id() -> str | None:
    return _request_id_ctx.get()


class RequestIdFilter(logging.Filter):
    def filter(self, record: LogRecord) -> bool:
        # explicit extra={"request_id": ...} wins over the context value
        record.request_id = (
            getattr(record, "request_id", None) or get_request_id() or "-"
        )
        return True


class RedactFilter(logging.Filter):
    SENSITIVE = {
        "password",
        "hashed_password",
        "secret",
        "jwt_secret",
        "token",
        "access_token",
        "refresh_token",
        "accesstoken",
        "refreshtoken",
        "authorization",
        "cookie",
    }

    def _redact(self, value: Any) -> Any:
        if isinstance(value, dict):
            return {
                k: REDACTED if str(k).lower() in self.SENSITIVE else self._redact(v)
                for k, v in value.items()
            }
        return value

    def filter(self, record: LogRecord) -> bool:
        for key, value in list(record.__dict__.items()):
            if key.lower() in self.SENSITIVE:
                record.__dict__[key] = REDACTED
            elif isinstance(value, dict):
                record.__dict__[key] = self._redact(value)
        return True
