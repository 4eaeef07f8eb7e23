"""Tests for LoggingContextMiddleware."""

from unittest.mock import patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from structlog.contextvars import get_contextvars

from missive.observability.middleware import LoggingContextMiddleware


@pytest.fixture
def app() -> FastAPI:
    """Create a FastAPI app with middleware."""
    app = FastAPI()
    app.add_middleware(LoggingContextMiddleware)

    @app.get("/context")
    async def context_endpoint():
        return get_contextvars()

    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


class TestLoggingContextMiddleware:
    def test_uses_request_id_header(self, client: TestClient) -> None:
        response = client.get("/context", headers={"X-Request-ID": "req-42"})

        assert response.json()["request_id"] == "req-42"
        assert response.headers["X-Request-ID"] == "req-42"

    def test_generates_request_id(self, client: TestClient) -> None:
        response = client.get("/context")

        request_id = response.headers["X-Request-ID"]
        assert request_id
        assert response.json()["request_id"] == request_id

    def test_clears_previous_context(self, client: TestClient) -> None:
        with patch("missive.observability.middleware.clear_contextvars") as mock_clear:
            client.get("/context")
            mock_clear.assert_called_once()
