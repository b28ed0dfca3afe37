"""
Classify database failures by their SQL Server error number.

The stored procedures signal business outcomes with user-defined error numbers
(RAISERROR / THROW 50401..50404). Drivers expose that number differently:

  - pymssql: `exc.number`, also `exc.args[0]`
  - pyodbc:  only inside the message, e.g. "... Phone in use (50404) (SQLExecDirectW)"

`extract_error_number` hides those differences and `classify_db_error` turns
the number into a canonical error code. Unknown numbers are ERROR.
"""
import re
from enum import IntEnum
from types import MappingProxyType

from sqlalchemy.exc import DBAPIError

from .base import DatabaseError
from .codes import ErrorCode


class SqlErrorNumbers(IntEnum):
    NO_SESSION_USER = 50401
    USER_INFO_NOT_FOUND = 50402
    USER_UPDATE_PROFILE_FAILED = 50403
    PHONE_ALREADY_IN_USE = 50404


NUMBER_CODE_MAP = MappingProxyType({
    SqlErrorNumbers.NO_SESSION_USER: ErrorCode.UNAUTHENTICATED_OR_NO_SESSION_USER,
    SqlErrorNumbers.USER_INFO_NOT_FOUND: ErrorCode.USER_INFO_NOT_FOUND,
    SqlErrorNumbers.USER_UPDATE_PROFILE_FAILED: ErrorCode.USER_UPDATE_PROFILE_FAILED,
    SqlErrorNumbers.PHONE_ALREADY_IN_USE: ErrorCode.PHONE_ALREADY_IN_USE,
})

# pyodbc puts the native error number in parentheses: "[42000] ... (50404) (SQLExecDirectW)"
_NUMBER_IN_MESSAGE = re.compile(r"\((\d{5,})\)")


def _number_from_attributes(orig) -> int | None:
    number = getattr(orig, "number", None)
    if isinstance(number, int) and not isinstance(number, bool):
        return number

    args = getattr(orig, "args", None) or ()
    if args and isinstance(args[0], int) and not isinstance(args[0], bool):
        return args[0]

    return None


def _number_from_message(msg: str) -> int | None:
    m = _NUMBER_IN_MESSAGE.search(msg or "")
    if m:
        return int(m.group(1))
    return None


def extract_error_number(exc: BaseException) -> int | None:
    """
    Best-effort extraction of the vendor error number from a database failure.

    Accepts DatabaseError, a SQLAlchemy DBAPIError (inspects `.orig`) or a raw
    DBAPI exception. Returns None when no number can be found.
    """
    if isinstance(exc, DatabaseError):
        return exc.number

    orig = exc.orig if isinstance(exc, DBAPIError) else exc
    if orig is None:
        return None

    number = _number_from_attributes(orig)
    if number is not None:
        return number

    return _number_from_message(str(orig))


def code_for_number(number: int | None) -> str:
    """Map a vendor error number to a canonical code (ERROR when unknown)."""
    if number is None:
        return ErrorCode.ERROR.value
    code = NUMBER_CODE_MAP.get(number, ErrorCode.ERROR)
    return code.value


def classify_db_error(exc: BaseException) -> tuple[str, int | None]:
    """
    Classify a database failure.

    Returns:
        A tuple of (canonical code, vendor error number if found)
    """
    number = extract_error_number(exc)
    return code_for_number(number), number


def db_error_message(exc: BaseException) -> str:
    """The driver's own message, without SQLAlchemy's statement/parameters suffix."""
    if isinstance(exc, DatabaseError):
        return exc.message
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)
