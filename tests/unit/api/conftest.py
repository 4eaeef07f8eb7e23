"""Fixtures for API tests."""

from collections.abc import Callable, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from jose import jwt

from missive.api.app import create_app
from missive.api.dependencies import get_engine, get_settings, reset_dependencies
from missive.config.models import EngineConfig, MetricsConfig, ObservabilityConfig
from missive.config.settings import Settings
from missive.records import CrudEngine

JWT_SECRET = "test-jwt-secret"


@pytest.fixture
def api_settings(owner) -> Settings:
    """Settings for an in-memory engine owned by `owner`."""
    return Settings(
        engine=EngineConfig(creator=owner),
        observability=ObservabilityConfig(metrics=MetricsConfig(enabled=True)),
    )


@pytest.fixture(autouse=True)
def jwt_secret(monkeypatch: pytest.MonkeyPatch) -> str:
    monkeypatch.setenv("MISSIVE_JWT_SECRET", JWT_SECRET)
    return JWT_SECRET


@pytest.fixture
def make_headers() -> Callable[..., dict[str, str]]:
    """Factory for Authorization headers carrying a signed identity."""

    def _make_headers(identity: str | None, secret: str = JWT_SECRET) -> dict[str, str]:
        claims = {} if identity is None else {"sub": identity}
        token = jwt.encode(claims, secret, algorithm="HS256")
        return {"Authorization": f"Bearer {token}"}

    return _make_headers


@pytest.fixture
def app(
    api_settings: Settings,
    engine: CrudEngine,
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[FastAPI, None, None]:
    """Full application wired to the test engine."""
    reset_dependencies()
    monkeypatch.setattr("missive.api.app.get_settings", lambda: api_settings)

    app = create_app()
    app.dependency_overrides[get_settings] = lambda: api_settings
    app.dependency_overrides[get_engine] = lambda: engine

    yield app

    reset_dependencies()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Test client."""
    return TestClient(app, raise_server_exceptions=False)
