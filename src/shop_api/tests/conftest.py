"""
Core pytest configuration for the entire test suite.

Only settings, logging and the application fixtures live here. Fakes and
route helpers for the error translation tests are in
tests/test_fixtures/app_fixtures.py and imported at the bottom of this file
so they are available everywhere.
"""

from __future__ import annotations

# -------------------------------
# Standard library imports
# -------------------------------
import sys
import logging
from pathlib import Path

# -------------------------------
# Early logging tuning (IMPORTANT)
# -------------------------------
# Keep this block before importing shop_api.* so noisy libraries are quiet during collection.
NOISY_LOGGERS = (
    "sqlalchemy",
    "sqlalchemy.engine",
    "sqlalchemy.engine.Engine",
    "asyncio",
    "aiosqlite",
    "httpx",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

# Ensure 'src' on sys.path so `import shop_api...` works without an install
SRC = Path(__file__).resolve().parents[2]
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# -------------------------------
# Third-party / project imports
# -------------------------------
import pytest

from shop_api.config.settings import Settings
from shop_api.core.logging.builder import setup_logging
from .test_fixtures.app_fixtures import make_test_settings


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """
    Install application logging once for the whole session.

    Tests that assert on logs use `caplog`; pytest re-attaches its capture
    handler for every test phase, after this dictConfig has run.
    """
    setup_logging(make_test_settings())
    yield


@pytest.fixture
def test_settings() -> Settings:
    return make_test_settings()


# Application fixtures
from .test_fixtures.app_fixtures import (  # noqa: E402,F401
    failing_app,
    client,
    production_client,
)
