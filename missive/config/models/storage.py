"""Storage configuration models."""

from pathlib import Path

from pydantic import BaseModel, Field


class StorageConfig(BaseModel):
    """Where the API persists engine state between restarts."""

    snapshot_path: Path | None = Field(
        default=None,
        description="JSON snapshot file; state is kept in memory only when unset",
    )
