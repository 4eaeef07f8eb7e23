"""Dependency injection for API routes.

Provides the settings and the single CRUD engine instance used by API
endpoints. Dependencies can be overridden for testing.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from missive.api.exceptions import EngineNotConfiguredError, SnapshotWriteError
from missive.config.settings import Settings
from missive.observability.logging import get_logger
from missive.records import CrudEngine, IdentityKey
from missive.records.snapshot import load_snapshot, save_snapshot
from missive.runtime import FanOutEventSink, LoggingEventSink

logger = get_logger(__name__)

# Engine instance - created once and reused
_engine: CrudEngine | None = None


@lru_cache
def get_settings() -> Settings:
    """Get application settings.

    Loads configuration from TOML files and environment variables.
    Cached to avoid reloading on every request.
    """
    return Settings()


def build_engine(settings: Settings) -> CrudEngine:
    """Restore the engine from its snapshot, or deploy a fresh one.

    Raises:
        EngineNotConfiguredError: If there is no snapshot and no creator
        SnapshotWriteError: If the freshly deployed state can't be persisted
    """
    sink = FanOutEventSink([LoggingEventSink()])
    engine_config = settings.engine
    snapshot_path = settings.storage.snapshot_path

    if snapshot_path is not None and snapshot_path.exists():
        return CrudEngine.from_snapshot(
            load_snapshot(snapshot_path),
            sink=sink,
            min_message_length=engine_config.min_message_length,
        )

    if not engine_config.creator:
        raise EngineNotConfiguredError(
            "No engine snapshot found and engine.creator is not set"
        )

    engine = CrudEngine.deploy(
        IdentityKey(engine_config.creator),
        seed_message=engine_config.seed_message,
        sink=sink,
        min_message_length=engine_config.min_message_length,
    )
    persist_engine(engine, settings)
    return engine


def get_engine(settings: Annotated[Settings, Depends(get_settings)]) -> CrudEngine:
    """Get the CrudEngine instance, building it on first access."""
    global _engine
    if _engine is None:
        _engine = build_engine(settings)
        logger.info("engine_initialized", owner=_engine.owner)
    return _engine


def get_cached_engine() -> CrudEngine | None:
    """Get the engine if it has already been built, without building it."""
    return _engine


def persist_engine(engine: CrudEngine, settings: Settings) -> None:
    """Write the engine state back when a snapshot path is configured.

    Raises:
        SnapshotWriteError: If the snapshot file can't be written
    """
    snapshot_path = settings.storage.snapshot_path
    if snapshot_path is None:
        return

    try:
        save_snapshot(snapshot_path, engine.snapshot())
    except OSError as e:
        logger.error("snapshot_write_failed", path=str(snapshot_path), error=str(e))
        raise SnapshotWriteError("Engine state could not be persisted") from e


@contextmanager
def persisted(engine: CrudEngine, settings: Settings) -> Iterator[None]:
    """Run engine mutations and persist them as one unit.

    The mutations only take effect, and their events are only delivered,
    once the snapshot has been written. Any failure inside the block or
    while persisting leaves the engine as it was.
    """
    with engine.staged():
        yield
        persist_engine(engine, settings)


def reset_dependencies() -> None:
    """Reset all cached dependencies.

    Used for testing to ensure fresh instances.
    """
    global _engine
    _engine = None
    get_settings.cache_clear()


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
EngineDep = Annotated[CrudEngine, Depends(get_engine)]
