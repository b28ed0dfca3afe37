"""
Writes error responses as RFC 7807 problem+json.

    {
      "type": "about:blank",
      "title": "PHONE_ALREADY_IN_USE",
      "status": 409,
      "detail": "Số điện thoại này đã được dùng. Vui lòng chọn số khác.",
      "instance": "/api/users/me",
      "traceId": "5c0e...",
      "code": "PHONE_ALREADY_IN_USE",
      "message": "Phone in use (50404)"      # only when messages are exposed
    }

`detail` always comes from the error catalog. The technical `message` is
included only when the exposure policy allows it (off in production by default).
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from shop_api.config.settings import Settings
from shop_api.core.logging.filters import get_request_id
from shop_api.exceptions.catalog import friendly_message, resolve_locale, DEFAULT_LOCALE
from shop_api.exceptions.mapper import ErrorResponse

PROBLEM_JSON = "application/problem+json"


class ProblemWriter:
    def __init__(self, *, expose_messages: bool, default_locale: str = DEFAULT_LOCALE):
        self.expose_messages = expose_messages
        self.default_locale = default_locale

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProblemWriter":
        return cls(expose_messages=settings.expose_error_messages, default_locale=settings.DEFAULT_LOCALE)

    def write(self, request: Request, error: ErrorResponse, *, extensions: dict | None = None) -> JSONResponse:
        locale = resolve_locale(request.headers.get("accept-language"), default=self.default_locale)

        body = {
            "type": "about:blank",
            "title": error.code,
            "status": error.status,
            "detail": friendly_message(error.code, locale=locale),
            "instance": request.url.path,
            "traceId": getattr(request.state, "request_id", None) or get_request_id() or "-",
            "code": error.code,
        }
        if self.expose_messages and error.message:
            body["message"] = error.message
        if extensions:
            body.update(extensions)

        return JSONResponse(content=body, status_code=error.status, media_type=PROBLEM_JSON)
