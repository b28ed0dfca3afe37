"""
Canonical error codes returned to API consumers and their HTTP statuses.

The codes and the status table are part of the public API contract: clients
branch on `code`, so entries may be added but never renamed or remapped.
"""

from enum import Enum
from types import MappingProxyType


class ErrorCode(str, Enum):
    UNAUTHENTICATED = "UNAUTHENTICATED"
    UNAUTHENTICATED_OR_NO_SESSION_USER = "UNAUTHENTICATED_OR_NO_SESSION_USER"
    TOKEN_INVALID_OR_NO_USERID = "TOKEN_INVALID_OR_NO_USERID"
    USER_INFO_NOT_FOUND = "USER_INFO_NOT_FOUND"
    USER_UPDATE_PROFILE_FAILED = "USER_UPDATE_PROFILE_FAILED"
    PHONE_ALREADY_IN_USE = "PHONE_ALREADY_IN_USE"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    CART_NOT_FOUND = "CART_NOT_FOUND"
    CART_EMPTY = "CART_EMPTY"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    ORDER_NOT_FOUND = "ORDER_NOT_FOUND"
    ORDER_ALREADY_PAID = "ORDER_ALREADY_PAID"
    ZALOPAY_BUILD_FAILED = "ZALOPAY_BUILD_FAILED"
    VNPAY_BUILD_FAILED = "VNPAY_BUILD_FAILED"
    PAYLINK_CREATE_FAILED = "PAYLINK_CREATE_FAILED"
    UNSUPPORTED_METHOD = "UNSUPPORTED_METHOD"
    CLIENT_CANCELLED = "CLIENT_CANCELLED"
    ERROR = "ERROR"


# nginx's "client closed request"; not part of the status table below.
CLIENT_CLOSED_REQUEST = 499

DEFAULT_STATUS = 500

CODE_TO_STATUS = MappingProxyType({
    "UNAUTHENTICATED": 401,
    "UNAUTHENTICATED_OR_NO_SESSION_USER": 401,
    "USER_INFO_NOT_FOUND": 404,
    "PHONE_ALREADY_IN_USE": 409,
    "USER_UPDATE_PROFILE_FAILED": 500,
    "VALIDATION_FAILED": 400,
    "CART_NOT_FOUND": 404,
    "CART_EMPTY": 409,
    "OUT_OF_STOCK": 409,
    "ORDER_NOT_FOUND": 404,
    "ORDER_ALREADY_PAID": 409,
    "ZALOPAY_BUILD_FAILED": 502,
    "VNPAY_BUILD_FAILED": 502,
    "PAYLINK_CREATE_FAILED": 502,
    "UNSUPPORTED_METHOD": 400,
})


def code_value(code: str | ErrorCode) -> str:
    """Plain string form of a code (ErrorCode members or free-form strings)."""
    return code.value if isinstance(code, ErrorCode) else code


def status_for_code(code: str | ErrorCode) -> int:
    """
    Return the HTTP status for an error code; unknown codes map to 500.

    CLIENT_CANCELLED is not looked up here, callers use CLIENT_CLOSED_REQUEST.
    """
    return CODE_TO_STATUS.get(code_value(code), DEFAULT_STATUS)


__all__ = [
    "ErrorCode",
    "CODE_TO_STATUS",
    "CLIENT_CLOSED_REQUEST",
    "DEFAULT_STATUS",
    "code_value",
    "status_for_code",
]
