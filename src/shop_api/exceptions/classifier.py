"""
Turn a caught exception into one of a closed set of failure kinds.

The kinds are checked in a fixed order and the first match wins, so an
exception that fits several kinds (e.g. an AppError that is also a
PermissionError) is classified exactly once.
"""
import asyncio
from dataclasses import dataclass
from typing import Union

from sqlalchemy.exc import DBAPIError

from .base import AppError, DatabaseError
from .db_classifier import classify_db_error, db_error_message

INFRASTRUCTURE_ERRORS = (DBAPIError, DatabaseError)


@dataclass(frozen=True)
class DomainFailure:
    code: str
    message: str | None
    exc: BaseException


@dataclass(frozen=True)
class InfrastructureFailure:
    code: str
    number: int | None
    message: str
    exc: BaseException


@dataclass(frozen=True)
class AuthorizationFailure:
    message: str
    exc: BaseException


@dataclass(frozen=True)
class CancellationFailure:
    exc: BaseException


@dataclass(frozen=True)
class UnclassifiedFailure:
    message: str
    exc: BaseException


Failure = Union[
    DomainFailure,
    InfrastructureFailure,
    AuthorizationFailure,
    CancellationFailure,
    UnclassifiedFailure,
]


def _message_of(exc: BaseException) -> str:
    return str(exc) or exc.__class__.__name__


def classify_failure(exc: BaseException, *, client_disconnected: bool = False) -> Failure:
    """
    Classify an exception escaping a request handler.

    Args:
        exc: the exception.
        client_disconnected: True only when this request's own client went away.
            A CancelledError without it (shutdown, an unrelated timeout) is an
            internal fault, not a client cancellation.
    """
    if isinstance(exc, AppError):
        return DomainFailure(code=exc.code, message=exc.message, exc=exc)

    if isinstance(exc, INFRASTRUCTURE_ERRORS):
        code, number = classify_db_error(exc)
        return InfrastructureFailure(code=code, number=number, message=db_error_message(exc), exc=exc)

    if isinstance(exc, PermissionError):
        return AuthorizationFailure(message=_message_of(exc), exc=exc)

    if isinstance(exc, asyncio.CancelledError) and client_disconnected:
        return CancellationFailure(exc=exc)

    return UnclassifiedFailure(message=_message_of(exc), exc=exc)


__all__ = [
    "Failure",
    "DomainFailure",
    "InfrastructureFailure",
    "AuthorizationFailure",
    "CancellationFailure",
    "UnclassifiedFailure",
    "classify_failure",
]
