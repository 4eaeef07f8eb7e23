"""Engine state snapshots and JSON file persistence.

The execution environment owns durable storage. A snapshot carries
everything needed to rebuild an engine: the owner, current records in
roster order, and both ledgers.
"""

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator

from missive.observability.logging import get_logger
from missive.records.models import DeleteEntry, IdentityKey, MessageRecord, UpdateEntry

logger = get_logger(__name__)

SNAPSHOT_VERSION = 1


class EngineSnapshot(BaseModel):
    """Serializable copy of the complete engine state."""

    model_config = ConfigDict(frozen=True)

    version: int = Field(default=SNAPSHOT_VERSION, description="Snapshot format")
    owner: IdentityKey = Field(..., description="Identity with ledger access")
    messages: list[MessageRecord] = Field(
        default_factory=list, description="Current records in roster order"
    )
    updates: list[UpdateEntry] = Field(
        default_factory=list, description="Update ledger in append order"
    )
    deletions: list[DeleteEntry] = Field(
        default_factory=list, description="Delete ledger in append order"
    )

    @model_validator(mode="after")
    def _check_unique_senders(self) -> "EngineSnapshot":
        seen: set[str] = set()
        for record in self.messages:
            if record.sender in seen:
                raise ValueError(f"Duplicate sender in snapshot: {record.sender}")
            seen.add(record.sender)
        return self


def save_snapshot(path: Path, snapshot: EngineSnapshot) -> None:
    """Write a snapshot as JSON, replacing any previous file atomically.

    Args:
        path: Destination file
        snapshot: State to persist
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(f"{path.name}.tmp")
    tmp_path.write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")
    os.replace(tmp_path, path)
    logger.debug(
        "snapshot_saved",
        path=str(path),
        messages=len(snapshot.messages),
        updates=len(snapshot.updates),
        deletions=len(snapshot.deletions),
    )


def load_snapshot(path: Path) -> EngineSnapshot:
    """Read a snapshot written by `save_snapshot`.

    Raises:
        FileNotFoundError: If the file doesn't exist
        pydantic.ValidationError: If the file content is not a valid snapshot
    """
    if not path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {path}")

    snapshot = EngineSnapshot.model_validate_json(path.read_text(encoding="utf-8"))
    logger.debug("snapshot_loaded", path=str(path), messages=len(snapshot.messages))
    return snapshot
