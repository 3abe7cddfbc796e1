import pytest
from sqlalchemy.exc import OperationalError

from catalog_api.api.v1.error_handlers import format_validation_errors
from catalog_api.exceptions.base import (
    DuplicateError,
    InvalidCredentialsError,
    InvalidFieldError,
    InvalidReferenceError,
    InvalidTokenError,
    NotFoundError,
    RepositoryError,
    UnauthorizedError,
)
from catalog_api.schemas.service_response import ServiceResponse
from catalog_api.services.base_service import store_error_text


@pytest.mark.parametrize(
    "exc, status",
    [
        (InvalidReferenceError("Analyst with ID 9 does not exist"), 400),
        (InvalidFieldError("Unknown field(s)"), 400),
        (InvalidTokenError(), 400),
        (InvalidCredentialsError(), 400),
        (UnauthorizedError(), 401),
        (NotFoundError(), 404),
        (DuplicateError("An Analyst with name A already exists."), 409),
        (RepositoryError("boom", error_code="unexpected"), 500),
        (RepositoryError("no code"), 400),
    ],
    ids=lambda v: type(v).__name__ if isinstance(v, Exception) else str(v),
)
def test_error_code_to_status(exc, status):
    assert exc.http_status() == status
    assert exc.to_payload() == {
        "success": False,
        "message": exc.message,
        "responseObject": None,
        "statusCode": status,
    }


def test_service_response_serializes_with_aliases():
    envelope = ServiceResponse.ok("Analyst found", {"id": 1})

    assert envelope.to_json() == {
        "success": True,
        "message": "Analyst found",
        "responseObject": {"id": 1},
        "statusCode": 200,
    }


def test_service_response_from_error():
    envelope = ServiceResponse.from_error(DuplicateError("A Value Set with name x already exists."))

    assert envelope.success is False
    assert envelope.status_code == 409
    assert envelope.to_response().status_code == 409


def test_format_validation_errors_drops_locations():
    message = format_validation_errors([
        {"loc": ("path", "id"), "msg": "Input should be greater than 0"},
        {"loc": ("body", "name"), "msg": "Field required"},
        {"loc": ("body",), "msg": "Field required"},
    ])

    assert message == (
        "Invalid input: id: Input should be greater than 0; name: Field required; body: Field required"
    )


def _wrapped(cause: Exception) -> RepositoryError:
    try:
        raise RepositoryError("Failed to retrieve Analyst") from cause
    except RepositoryError as exc:
        return exc


def test_store_error_text_unwraps_repository_errors():
    """
    Behavior:
      - A repository wrapper reports the text of the error it chained.
      - A SQLAlchemy DBAPI error reports the driver message, without the SQL statement.
      - An unchained repository error and a plain exception report their own text.
    """
    driver_error = OperationalError("SELECT 1", {}, Exception("database is locked"))

    assert store_error_text(_wrapped(ConnectionError("connection refused"))) == "connection refused"
    assert store_error_text(_wrapped(driver_error)) == "database is locked"
    assert store_error_text(RepositoryError("Analyst has no field 'foo'")) == "Analyst has no field 'foo'"
    assert store_error_text(ValueError("bad")) == "bad"
