"""Domain events emitted by the CRUD engine.

Events are fire-and-forget notifications for external subscribers.
They are not part of any operation's return value.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from missive.records.models.identity import IdentityKey


class MessageCreated(BaseModel):
    """A new record was created."""

    model_config = ConfigDict(frozen=True)

    event_type: Literal["message_created"] = "message_created"
    sender: IdentityKey = Field(..., description="Record holder")
    message: str = Field(..., description="Created text")


class MessageUpdated(BaseModel):
    """An existing record was replaced with new text."""

    model_config = ConfigDict(frozen=True)

    event_type: Literal["message_updated"] = "message_updated"
    sender: IdentityKey = Field(..., description="Record holder")
    new_message: str = Field(..., description="Replacement text")


class MessageDeleted(BaseModel):
    """A record was removed."""

    model_config = ConfigDict(frozen=True)

    event_type: Literal["message_deleted"] = "message_deleted"
    sender: IdentityKey = Field(..., description="Former record holder")


DomainEvent = MessageCreated | MessageUpdated | MessageDeleted
