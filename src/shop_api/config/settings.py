from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from pathlib import Path
from typing import Literal
from functools import lru_cache
from ..validators.config_validators import to_uppercase, to_lowercase


class Settings(BaseSettings):
    """
    Application settings loaded from environment.
    """

    # Environment
    ENV: Literal["development", "testing", "staging", "production"] = "development"

    # Database configuration ("Default" connection string). When unset the API
    # starts without SQL Server: connections are refused and the ORM session
    # falls back to an in-memory SQLite engine.
    DATABASE_URL: str | None = None

    # SQLAlchemy
    SQLALCHEMY_ECHO: bool = False

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FORMAT: Literal["json", "text"] = "json"
    LOG_TO_STDOUT: bool = True
    LOG_DIR: Path = Path("/var/log/shop-api")
    LOG_MAX_BYTES: int = 10_000_000  # 10 MB
    LOG_BACKUP_COUNT: int = 5
    ENABLE_SQL_LOGGING: bool = False

    # Error responses
    EXPOSE_ERROR_MESSAGES: bool | None = None
    DEFAULT_LOCALE: Literal["vi", "en"] = "vi"

    # --- Derived settings ---
    @property
    def database_configured(self) -> bool:
        return bool(self.DATABASE_URL and self.DATABASE_URL.strip())

    @property
    def expose_error_messages(self) -> bool:
        """
        Whether raw failure messages are included in error responses.

        An explicit EXPOSE_ERROR_MESSAGES wins. Otherwise messages are exposed
        everywhere except production, where clients only get catalog text.
        """
        if self.EXPOSE_ERROR_MESSAGES is not None:
            return self.EXPOSE_ERROR_MESSAGES
        return self.ENV != "production"

    # --- Validators ---
    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: str | None) -> str | None:
        """
        Normalize LOG_LEVEL to uppercase before Literal validation runs.
        """
        return to_uppercase(v)

    @field_validator("LOG_FORMAT", "DEFAULT_LOCALE", mode="before")
    def normalize_lowercase(cls, v: str | None) -> str | None:
        return to_lowercase(v)

    model_config = SettingsConfigDict(
        # Load environment variables from the .env file located two levels up relative to this file.
        env_file=str(Path(__file__).parent.parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )


# get_settings() takes no arguments and always returns the same settings from the environment,
# so caching it with @lru_cache() is good for performance.
@lru_cache()
def get_settings() -> Settings:
    return Settings()
