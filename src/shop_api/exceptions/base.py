"""
Exceptions raised by the business and data layers.

Services raise AppError with one of the canonical codes (see codes.py); the
problem details middleware turns it into a response. Anything else that
escapes a handler is still translated, but ends up as ERROR / 500.
"""

from .codes import ErrorCode, code_value


class AppError(Exception):
    """
    Business error with a canonical code.

    - code: canonical code, e.g. ErrorCode.CART_EMPTY or any custom string.
      Blank codes become ERROR.
    - message: optional technical message (logged, exposed only when allowed)
    """

    def __init__(self, code: str | ErrorCode, message: str | None = None):
        super().__init__(message)
        code = code_value(code) if code is not None else ""
        self.code = code if code.strip() else ErrorCode.ERROR.value
        self.message = message

    def __str__(self) -> str:
        if self.message:
            return f"{self.message} (code: {self.code})"
        return self.code


class AuthorizationDenied(PermissionError):
    """The caller is not authenticated or the token carries no usable user id."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)
        self.message = message


class DatabaseError(Exception):
    """
    Database failure identified by a vendor error number.

    Data-access code that does not go through SQLAlchemy (or that re-raises
    with more context) can raise this instead of the driver exception.
    """

    def __init__(self, number: int | None, message: str):
        super().__init__(message)
        self.number = number
        self.message = message

    def __str__(self) -> str:
        return f"{self.message} (number: {self.number})" if self.number is not None else self.message


__all__ = [
    "AppError",
    "AuthorizationDenied",
    "DatabaseError",
]
