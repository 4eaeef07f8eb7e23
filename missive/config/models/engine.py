"""Record engine configuration models."""

from pydantic import BaseModel, Field

from missive.records.engine import MIN_MESSAGE_LENGTH, SEED_MESSAGE


class EngineConfig(BaseModel):
    """Configuration for deploying the CRUD engine."""

    creator: str | None = Field(
        default=None,
        description="Identity that deploys the engine and becomes its owner",
    )
    seed_message: str = Field(
        default=SEED_MESSAGE,
        min_length=1,
        description="Initial message held by the creator",
    )
    min_message_length: int = Field(
        default=MIN_MESSAGE_LENGTH,
        ge=1,
        description="Minimum message length in UTF-8 bytes",
    )
