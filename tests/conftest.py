"""Shared test fixtures for the Missive test suite."""

import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

os.environ.setdefault("MISSIVE_ENV", "test")

from missive.records import CrudEngine, IdentityKey  # noqa: E402
from missive.runtime import ManualClock, RecordingEventSink  # noqa: E402

START_TIME = 1_700_000_000_000


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "debug = true",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


class EnvOverrideContext:
    """Context manager for temporarily setting environment variables."""

    def __init__(self, overrides: dict[str, str]) -> None:
        self.overrides = overrides
        self.original_env: dict[str, str | None] = {}

    def __enter__(self) -> None:
        for key, value in self.overrides.items():
            self.original_env[key] = os.environ.get(key)
            os.environ[key] = value

    def __exit__(self, *args: Any) -> None:
        for key in self.overrides:
            if self.original_env[key] is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = self.original_env[key]


@pytest.fixture
def env_override() -> Generator[Callable[[dict[str, str]], EnvOverrideContext], None, None]:
    """Context manager for temporarily setting environment variables.

    Usage:
        def test_something(env_override):
            with env_override({"MISSIVE_DEBUG": "true"}):
                # test code here
    """

    def _env_override(overrides: dict[str, str]) -> EnvOverrideContext:
        return EnvOverrideContext(overrides)

    yield _env_override


@pytest.fixture(autouse=True)
def clear_settings_cache(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Clear cached settings and point config loading at an empty directory.

    Settings built in a test only see TOML files the test writes itself.
    """
    from missive.config import get_settings

    empty_dir = tmp_path / "empty-config"
    empty_dir.mkdir()
    monkeypatch.setenv("MISSIVE_CONFIG_DIR", str(empty_dir))

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# Record engine fixtures


@pytest.fixture
def owner() -> IdentityKey:
    """Identity that deploys the engine."""
    return IdentityKey("owner-c0")


@pytest.fixture
def alice() -> IdentityKey:
    return IdentityKey("alice-c1")


@pytest.fixture
def bob() -> IdentityKey:
    return IdentityKey("bob-c2")


@pytest.fixture
def clock() -> ManualClock:
    """Manual clock starting at a fixed instant."""
    return ManualClock(start=START_TIME)


@pytest.fixture
def sink() -> RecordingEventSink:
    """Event sink that records emitted events."""
    return RecordingEventSink()


@pytest.fixture
def engine(owner: IdentityKey, clock: ManualClock, sink: RecordingEventSink) -> CrudEngine:
    """Freshly deployed engine owned by `owner`."""
    return CrudEngine.deploy(owner, clock=clock, sink=sink)
