"""
Unit tests for the application lifespan.

Startup sets up logging and monitoring and starts the connection monitor;
the server comes up whether or not the database answers.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI

from skillvouch.server.main import lifespan

MAIN = "skillvouch.server.main"


@pytest.fixture
def patched_startup():
    with (
        patch(f"{MAIN}.setup_logging") as setup_logging,
        patch(f"{MAIN}.initialize_logfire", return_value=False) as initialize_logfire,
        patch(f"{MAIN}.db_monitor") as monitor,
        patch(f"{MAIN}.engine") as engine,
    ):
        monitor.start = AsyncMock(return_value=True)
        monitor.stop = AsyncMock()
        engine.dispose = AsyncMock()
        yield {
            "setup_logging": setup_logging,
            "initialize_logfire": initialize_logfire,
            "monitor": monitor,
            "engine": engine,
        }


class TestLifespan:
    async def test_startup_and_shutdown(self, patched_startup):
        app = FastAPI()

        async with lifespan(app):
            patched_startup["setup_logging"].assert_called_once()
            patched_startup["initialize_logfire"].assert_called_once_with(app=app, engine=patched_startup["engine"])
            patched_startup["monitor"].start.assert_awaited_once()
            patched_startup["monitor"].stop.assert_not_awaited()

        patched_startup["monitor"].stop.assert_awaited_once()
        patched_startup["engine"].dispose.assert_awaited_once()

    async def test_starts_without_database(self, patched_startup):
        patched_startup["monitor"].start.return_value = False

        with patch(f"{MAIN}.logger") as mock_logger:
            async with lifespan(FastAPI()):
                pass

        warnings = [c[0][0] for c in mock_logger.warning.call_args_list]
        assert any("Database unavailable at startup" in w for w in warnings)
        patched_startup["monitor"].stop.assert_awaited_once()
