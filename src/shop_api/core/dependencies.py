from fastapi import Request

from shop_api.db.connection import ConnectionFactory
from shop_api.db.session import get_async_session


def get_connection_factory(request: Request) -> ConnectionFactory:
    # Built once by create_app() and shared by every request
    return request.app.state.connection_factory


__all__ = ["get_connection_factory", "get_async_session"]
