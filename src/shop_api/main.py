import logging

from fastapi import FastAPI, Request

from shop_api.api.v1.error_handlers import install_error_handling
from shop_api.api.v1.problem_writer import ProblemWriter
from shop_api.config.settings import Settings, get_settings
from shop_api.core.logging import setup_logging, RequestIDMiddleware
from shop_api.db.connection import build_connection_factory

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(title="Shop API")
    app.state.settings = settings
    app.state.connection_factory = build_connection_factory(settings)

    # Order matters: the middleware added last is the outermost one.
    install_error_handling(app, ProblemWriter.from_settings(settings))
    app.add_middleware(RequestIDMiddleware)

    @app.get("/healthz")
    async def healthz(request: Request):
        return {"db": request.app.state.connection_factory.backend_name, "ok": True}

    logger.info("Application created", extra={"env": settings.ENV})
    return app
