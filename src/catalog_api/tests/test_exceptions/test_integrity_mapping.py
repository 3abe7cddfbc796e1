from types import SimpleNamespace

import pytest
from sqlalchemy.exc import IntegrityError

from catalog_api.exceptions.base import DuplicateError, RepositoryError
from catalog_api.exceptions.integrity_classifier import (
    CheckConstraintError,
    ForeignKeyConstraintError,
    NotNullConstraintError,
    UniqueConstraintError,
    UnknownIntegrityError,
    classify_integrity_error,
)
from catalog_api.exceptions.mapper import extract_columns_from_integrity, raise_mapped_integrity_error


def integrity_error(orig) -> IntegrityError:
    return IntegrityError("INSERT ...", params={}, orig=orig)


class SqliteError(Exception):
    """Stands in for sqlite3.IntegrityError: message only, no SQLSTATE."""


class TestClassifier:

    @pytest.mark.parametrize(
        "pgcode, expected",
        [
            ("23505", UniqueConstraintError),
            ("23502", NotNullConstraintError),
            ("23503", ForeignKeyConstraintError),
            ("23514", CheckConstraintError),
            ("23999", UnknownIntegrityError),
        ],
    )
    def test_postgres_codes(self, pgcode, expected):
        orig = SimpleNamespace(pgcode=pgcode, diag=SimpleNamespace(constraint_name="uq_analyst_name"))

        exc_cls, constraint = classify_integrity_error(integrity_error(orig))

        assert exc_cls is expected
        assert constraint == "uq_analyst_name"

    def test_asyncpg_style_sqlstate(self):
        orig = SimpleNamespace(sqlstate="23505", constraint_name="uq_resource_code")

        exc_cls, constraint = classify_integrity_error(integrity_error(orig))

        assert exc_cls is UniqueConstraintError
        assert constraint == "uq_resource_code"

    @pytest.mark.parametrize(
        "message, expected",
        [
            ("UNIQUE constraint failed: analyst.name", UniqueConstraintError),
            ("NOT NULL constraint failed: analyst.name", NotNullConstraintError),
            ("FOREIGN KEY constraint failed", ForeignKeyConstraintError),
            ("CHECK constraint failed: positive", CheckConstraintError),
            ("something odd", UnknownIntegrityError),
        ],
    )
    def test_message_fallback(self, message, expected):
        exc_cls, constraint = classify_integrity_error(integrity_error(SqliteError(message)))

        assert exc_cls is expected
        assert constraint is None


class TestColumnExtraction:

    def test_postgres_detail_line(self):
        orig = SqliteError('duplicate key value violates unique constraint "uq_resource_code"\n'
                           "DETAIL:  Key (code)=(R1) already exists.")

        assert extract_columns_from_integrity(integrity_error(orig)) == ["code"]

    def test_postgres_not_null(self):
        orig = SqliteError('null value in column "name" of relation "analyst" violates not-null constraint')

        assert extract_columns_from_integrity(integrity_error(orig)) == ["name"]

    def test_sqlite_message(self):
        orig = SqliteError("UNIQUE constraint failed: value_set_code.code")

        assert extract_columns_from_integrity(integrity_error(orig)) == ["code"]

    def test_constraint_name_convention(self):
        orig = SqliteError("")

        columns = extract_columns_from_integrity(integrity_error(orig), "dict_table", "uq_dict_table_dictionary_id")

        assert columns == ["dictionary_id"]


class TestMapper:

    def test_unique_becomes_duplicate(self):
        orig = SqliteError("UNIQUE constraint failed: analyst.name")

        with pytest.raises(DuplicateError) as exc_info:
            raise_mapped_integrity_error(integrity_error(orig), "Analyst", "analyst")

        assert exc_info.value.fields == ["name"]
        assert exc_info.value.http_status() == 409

    def test_not_null_is_invalid_input(self):
        orig = SqliteError("NOT NULL constraint failed: analyst.name")

        with pytest.raises(RepositoryError) as exc_info:
            raise_mapped_integrity_error(integrity_error(orig), "Analyst", "analyst")

        assert exc_info.value.error_code == "invalid_input"
        assert exc_info.value.fields == ["name"]

    def test_refresh_token_foreign_key(self):
        """
        Behavior:
          - Saving a token for a user row that no longer exists violates
            refresh_token.user_id and surfaces as a plain RepositoryError.
        """
        orig = SimpleNamespace(pgcode="23503", constraint_name="fk_refresh_token_user_id_user")

        with pytest.raises(RepositoryError) as exc_info:
            raise_mapped_integrity_error(integrity_error(orig), "RefreshToken", "refresh_token")

        assert not isinstance(exc_info.value, DuplicateError)
        assert exc_info.value.message == "RefreshToken foreign key constraint violated"
        assert exc_info.value.constraint == "fk_refresh_token_user_id_user"

    def test_unknown_keeps_raw_text_out_of_message(self):
        orig = SqliteError("secret internals")

        with pytest.raises(RepositoryError) as exc_info:
            raise_mapped_integrity_error(integrity_error(orig), "Analyst", "analyst")

        assert "secret internals" not in exc_info.value.message
        assert exc_info.value.to_payload()["statusCode"] == 400
