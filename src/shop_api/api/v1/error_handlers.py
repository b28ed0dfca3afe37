# shop_api/api/v1/error_handlers.py
"""
Translate failures escaping the route handlers into problem+json responses.

ProblemDetailsMiddleware is the single interception point: it wraps the rest
of the pipeline, classifies whatever is raised (classifier.py), maps it to
(code, status, message) with one log entry (mapper.py) and hands that to the
ProblemWriter. Request validation errors are raised before any handler runs,
so they get a regular FastAPI exception handler writing the same shape.

The middleware is plain ASGI rather than BaseHTTPMiddleware: call_next only
forwards `Exception`, so an `asyncio.CancelledError` from a handler would never
reach a dispatch() method.

Register with install_error_handling(app, writer) *before* adding
RequestIDMiddleware, so the request id wraps the translation.
"""

import asyncio
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from shop_api.exceptions.classifier import classify_failure
from shop_api.exceptions.codes import ErrorCode, status_for_code
from shop_api.exceptions.mapper import ErrorResponse, map_failure
from .problem_writer import ProblemWriter

logger = logging.getLogger(__name__)

# How long to wait for a pending http.disconnect after a cancellation.
DISCONNECT_WAIT_TIMEOUT = 0.1


class _DisconnectWatch:
    """
    Wraps `receive` and remembers whether the client has gone away.
    """

    def __init__(self, receive: Receive):
        self._receive = receive
        self.disconnected = False

    async def __call__(self) -> Message:
        message = await self._receive()
        if message["type"] == "http.disconnect":
            self.disconnected = True
        return message

    async def wait_for_disconnect(self, timeout: float) -> bool:
        # Drain what is left of the request; a connected client sends nothing more.
        if not self.disconnected:
            try:
                async with asyncio.timeout(timeout):
                    while not self.disconnected:
                        await self()
            except TimeoutError:
                pass
        return self.disconnected


class ProblemDetailsMiddleware:
    def __init__(self, app: ASGIApp, writer: ProblemWriter, disconnect_timeout: float = DISCONNECT_WAIT_TIMEOUT):
        self.app = app
        self.writer = writer
        self.disconnect_timeout = disconnect_timeout

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        watch = _DisconnectWatch(receive)
        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, watch, send_wrapper)
        except (Exception, asyncio.CancelledError) as exc:
            if response_started:
                # Headers are out; the server has to close the connection.
                raise

            # Only this request's own disconnect counts as a client cancellation.
            client_disconnected = isinstance(exc, asyncio.CancelledError) and await watch.wait_for_disconnect(self.disconnect_timeout)
            request = Request(scope, receive)
            failure = classify_failure(exc, client_disconnected=client_disconnected)
            error = map_failure(failure, context={"http_method": request.method, "path": request.url.path})
            response = self.writer.write(request, error)
            await response(scope, receive, send)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """
    400 VALIDATION_FAILED with the field errors under `errors`.
    """
    writer: ProblemWriter = request.app.state.problem_writer
    code = ErrorCode.VALIDATION_FAILED.value
    logger.info("Validation failed for %s %s", request.method, request.url.path, extra={"error_code": code})
    error = ErrorResponse(code, status_for_code(code), None)
    return writer.write(request, error, extensions={"errors": jsonable_encoder(exc.errors())})


def install_error_handling(app: FastAPI, writer: ProblemWriter) -> None:
    app.state.problem_writer = writer
    app.add_middleware(ProblemDetailsMiddleware, writer=writer)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
