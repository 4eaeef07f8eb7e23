"""Message and history request/response models."""

from pydantic import BaseModel, Field

from missive.records.models import DeleteEntry, MessageRecord, UpdateEntry


class MessageRequest(BaseModel):
    """Body for creating or updating the caller's message.

    Length rules are enforced by the engine, not here, so that an empty
    or short message yields the engine's error code.
    """

    message: str = Field(..., description="Message text")


class MessageResponse(BaseModel):
    """A single current message."""

    sender: str
    message: str

    @classmethod
    def from_record(cls, record: MessageRecord) -> "MessageResponse":
        return cls(sender=record.sender, message=record.message)


class MessageListResponse(BaseModel):
    """Every current message in roster order."""

    items: list[MessageResponse]
    total: int


class UpdateHistoryResponse(BaseModel):
    """Full update ledger in append order."""

    items: list[UpdateEntry]
    total: int


class DeleteHistoryResponse(BaseModel):
    """Full delete ledger in append order."""

    items: list[DeleteEntry]
    total: int
