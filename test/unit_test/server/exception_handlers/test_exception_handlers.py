"""
Unit tests for the server exception handlers.

Handlers are called directly with a mocked request; the last class checks
the mappings end to end through the application.
"""

import json
from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from httpx import ASGITransport, AsyncClient

from skillvouch.core.errors import AIServiceError, DatabaseUnavailableError
from skillvouch.server.exception_handlers import setup_exception_handlers
from skillvouch.server.exception_handlers.app_errors import (
    ai_service_error_handler,
    database_unavailable_handler,
    validation_error_handler,
)
from skillvouch.server.exception_handlers.global_handler import global_exception_handler


@pytest.fixture
def mock_request():
    request = Mock(spec=Request)
    request.method = "POST"
    request.url.path = "/api/users"
    request.query_params = {}
    request.client = Mock()
    request.client.host = "127.0.0.1"
    return request


def _body(response) -> dict:
    return json.loads(response.body.decode())


class TestGlobalExceptionHandler:
    async def test_returns_500_with_error_id(self, mock_request):
        exc = RuntimeError("boom")

        with patch("skillvouch.server.exception_handlers.global_handler.logger"):
            response = await global_exception_handler(mock_request, exc)

        assert response.status_code == 500
        body = _body(response)
        assert body["detail"] == "Internal server error"
        assert body["error_id"] == id(exc)
        assert body["error_type"] == "RuntimeError"

    async def test_logs_request_context(self, mock_request):
        with patch("skillvouch.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, ValueError("bad"))

        mock_logger.error.assert_called_once()
        message = mock_logger.error.call_args[0][0]
        extra = mock_logger.error.call_args[1]["extra"]
        assert "Unhandled exception" in message
        assert extra["error_type"] == "ValueError"
        assert extra["path"] == "/api/users"
        assert extra["client"] == "127.0.0.1"

    async def test_request_without_client(self, mock_request):
        mock_request.client = None

        with patch("skillvouch.server.exception_handlers.global_handler.logger") as mock_logger:
            response = await global_exception_handler(mock_request, KeyError("k"))

        assert response.status_code == 500
        assert mock_logger.error.call_args[1]["extra"]["client"] == "unknown"


class TestAppErrorHandlers:
    async def test_database_unavailable_is_503(self, mock_request):
        response = await database_unavailable_handler(mock_request, DatabaseUnavailableError("refused"))

        assert response.status_code == 503
        assert _body(response) == {"detail": "Database connection unavailable"}

    async def test_ai_error_is_502(self, mock_request):
        exc = AIServiceError("quiz", "rate limited", attempts=3)

        with patch("skillvouch.server.exception_handlers.app_errors.log_error") as mock_log_error:
            response = await ai_service_error_handler(mock_request, exc)

        assert response.status_code == 502
        body = _body(response)
        assert body["success"] is False
        assert body["message"] == "AI service unavailable"
        assert body["error"] == "AI quiz failed after 3 attempt(s): rate limited"
        context = mock_log_error.call_args[0][2]
        assert context["operation"] == "quiz"
        assert context["attempts"] == 3

    async def test_validation_error_is_400(self, mock_request):
        exc = RequestValidationError(
            [{"type": "missing", "loc": ("body", "email"), "msg": "Field required", "input": {}}]
        )

        response = await validation_error_handler(mock_request, exc)

        assert response.status_code == 400
        body = _body(response)
        assert body["detail"] == "email: Field required"
        assert body["errors"][0]["type"] == "missing"

    async def test_validation_error_without_location(self, mock_request):
        exc = RequestValidationError([{"type": "json_invalid", "loc": ("body",), "msg": "JSON decode error"}])

        response = await validation_error_handler(mock_request, exc)

        assert _body(response)["detail"] == "JSON decode error"


class TestSetupExceptionHandlers:
    @pytest.fixture
    def app(self) -> FastAPI:
        app = FastAPI()
        setup_exception_handlers(app)

        @app.get("/db")
        async def db_down():
            raise DatabaseUnavailableError()

        @app.get("/ai")
        async def ai_down():
            raise AIServiceError("chat", "timeout")

        @app.get("/crash")
        async def crash():
            raise RuntimeError("unexpected")

        @app.get("/items/{item_id}")
        async def item(item_id: int):
            return {"id": item_id}

        return app

    async def test_registers_all_handlers(self, app):
        for exc_type in (DatabaseUnavailableError, AIServiceError, RequestValidationError, Exception):
            assert exc_type in app.exception_handlers

    async def test_status_codes_through_the_app(self, app):
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://localhost") as client:
            assert (await client.get("/db")).status_code == 503
            assert (await client.get("/ai")).status_code == 502
            assert (await client.get("/items/not-a-number")).status_code == 400
            crashed = await client.get("/crash")

        assert crashed.status_code == 500
        assert crashed.json()["error_type"] == "RuntimeError"
