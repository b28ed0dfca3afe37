"""
Connection factories for raw SQL / stored procedure access.

Handlers that call stored procedures ask for a ConnectionFactory and open a
connection per unit of work:

    async with factory.create() as conn:
        await conn.execute(text("EXEC dbo.usp_user_get_profile :uid"), {"uid": uid})

Errors raised by the procedures (RAISERROR 50401..50404) surface as
sqlalchemy.exc.DBAPIError and are translated by the problem details middleware.
"""

import logging
from abc import ABC, abstractmethod

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from ..config.settings import Settings
from .session import build_engine

logger = logging.getLogger(__name__)


class DatabaseNotConfiguredError(RuntimeError):
    """Raised when a connection is requested but no DATABASE_URL is set."""

    def __init__(self, message: str = "Database is not configured. Set DATABASE_URL to enable SQL Server."):
        super().__init__(message)


class ConnectionFactory(ABC):

    @property
    @abstractmethod
    def backend_name(self) -> str:
        ...

    @abstractmethod
    def create(self) -> AsyncConnection:
        """Return a new, not yet opened, connection."""


class SqlConnectionFactory(ConnectionFactory):
    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    @property
    def backend_name(self) -> str:
        return self.engine.url.get_backend_name()

    def create(self) -> AsyncConnection:
        return self.engine.connect()


class NullConnectionFactory(ConnectionFactory):
    """Stand-in used when the API runs without a database."""

    @property
    def backend_name(self) -> str:
        return "InMemory"

    def create(self) -> AsyncConnection:
        raise DatabaseNotConfiguredError()


def build_connection_factory(settings: Settings, engine: AsyncEngine | None = None) -> ConnectionFactory:
    """
    Pick the connection factory for the current settings.

    `engine` lets callers share the session engine; when omitted a new one is
    created from DATABASE_URL.
    """
    if not settings.database_configured:
        return NullConnectionFactory()

    if engine is None:
        engine = build_engine(settings)

    logger.debug("Using SQL connection factory", extra={"backend": engine.url.get_backend_name()})
    return SqlConnectionFactory(engine)
