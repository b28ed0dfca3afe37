"""
Map a classified failure to the (code, status, message) the response writer needs.

This is the only place a failure is logged, once per failure: INFO for domain,
authorization and cancellation outcomes, WARNING for database errors and
ERROR (with traceback) for anything unclassified.
"""
import logging
from dataclasses import dataclass

from .classifier import (
    Failure,
    DomainFailure,
    InfrastructureFailure,
    AuthorizationFailure,
    CancellationFailure,
    UnclassifiedFailure,
)
from .codes import ErrorCode, CLIENT_CLOSED_REQUEST, status_for_code

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ErrorResponse:
    """What the problem writer needs: code, HTTP status and an optional technical message."""
    code: str
    status: int
    message: str | None = None


def map_failure(failure: Failure, *, context: dict | None = None) -> ErrorResponse:
    """
    Map a classified failure to an ErrorResponse, logging it exactly once.

    - context: structured fields (method, path, ...) added to the log record.
    """
    extra = dict(context or {})

    if isinstance(failure, DomainFailure):
        # Business outcomes are expected: INFO.
        logger.info("mapper.domain_error", extra={**extra, "error_code": failure.code})
        return ErrorResponse(failure.code, status_for_code(failure.code), failure.message)

    if isinstance(failure, InfrastructureFailure):
        logger.warning(
            "SQL error mapped to code %s",
            failure.code,
            exc_info=failure.exc,
            extra={**extra, "error_code": failure.code, "db_error_number": failure.number},
        )
        return ErrorResponse(failure.code, status_for_code(failure.code), failure.message)

    if isinstance(failure, AuthorizationFailure):
        code = ErrorCode.UNAUTHENTICATED.value
        logger.info("mapper.unauthenticated", extra={**extra, "error_code": code})
        return ErrorResponse(code, status_for_code(code), failure.message)

    if isinstance(failure, CancellationFailure):
        code = ErrorCode.CLIENT_CANCELLED.value
        logger.info("mapper.client_cancelled", extra={**extra, "error_code": code})
        return ErrorResponse(code, CLIENT_CLOSED_REQUEST, None)

    if isinstance(failure, UnclassifiedFailure):
        code = ErrorCode.ERROR.value
        logger.error("Unhandled exception", exc_info=failure.exc, extra={**extra, "error_code": code})
        return ErrorResponse(code, status_for_code(code), failure.message)

    raise TypeError(f"Unknown failure kind: {type(failure).__name__}")


__all__ = ["ErrorResponse", "map_failure"]
