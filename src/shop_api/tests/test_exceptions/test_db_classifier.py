import pytest
from sqlalchemy.exc import DBAPIError

from shop_api.exceptions.base import DatabaseError
from shop_api.exceptions.db_classifier import (
    classify_db_error,
    code_for_number,
    db_error_message,
    extract_error_number,
)
from shop_api.tests.test_fixtures.app_fixtures import FakeMssqlError, FakeOdbcError, make_dbapi_error


@pytest.mark.parametrize(
    "number, code",
    [
        (50401, "UNAUTHENTICATED_OR_NO_SESSION_USER"),
        (50402, "USER_INFO_NOT_FOUND"),
        (50403, "USER_UPDATE_PROFILE_FAILED"),
        (50404, "PHONE_ALREADY_IN_USE"),
    ],
)
def test_known_numbers(number, code):
    assert code_for_number(number) == code


@pytest.mark.parametrize("number", [99999, 50400, 50405, 2627, 0, -1, None])
def test_unknown_numbers_fall_back_to_error(number):
    assert code_for_number(number) == "ERROR"


def test_classification_is_deterministic():
    results = [code_for_number(n) for n in (50404, 99999, 50404, 50401, 99999)]
    assert results == ["PHONE_ALREADY_IN_USE", "ERROR", "PHONE_ALREADY_IN_USE", "UNAUTHENTICATED_OR_NO_SESSION_USER", "ERROR"]


class TestExtractErrorNumber:
    def test_pymssql_number_attribute(self):
        exc = make_dbapi_error(FakeMssqlError(50404, "Phone in use"))
        assert extract_error_number(exc) == 50404

    def test_pyodbc_number_in_message(self):
        exc = make_dbapi_error(FakeOdbcError(50402, "User info not found"))
        assert extract_error_number(exc) == 50402

    def test_leading_int_arg(self):
        class Driver(Exception):
            pass

        assert extract_error_number(make_dbapi_error(Driver(50403, "failed"))) == 50403

    def test_raw_driver_exception(self):
        assert extract_error_number(FakeMssqlError(50401, "no session user")) == 50401

    def test_database_error(self):
        assert extract_error_number(DatabaseError(50402, "missing")) == 50402

    def test_no_number(self):
        exc = make_dbapi_error(Exception("connection reset by peer"))
        assert extract_error_number(exc) is None

    def test_bool_is_not_a_number(self):
        class Driver(Exception):
            number = True

        assert extract_error_number(Driver("x")) is None


def test_classify_db_error_returns_code_and_number():
    assert classify_db_error(make_dbapi_error(FakeMssqlError(50404, "Phone in use"))) == ("PHONE_ALREADY_IN_USE", 50404)
    assert classify_db_error(make_dbapi_error(FakeMssqlError(99999, "boom"))) == ("ERROR", 99999)
    assert classify_db_error(make_dbapi_error(Exception("timeout"))) == ("ERROR", None)


def test_db_error_message_uses_driver_text():
    exc = make_dbapi_error(FakeMssqlError(50404, "Phone in use"))
    assert isinstance(exc, DBAPIError)
    # SQLAlchemy's str(exc) appends the statement; the driver text does not.
    assert db_error_message(exc) == "Phone in use"
    assert db_error_message(DatabaseError(50402, "missing")) == "missing"
