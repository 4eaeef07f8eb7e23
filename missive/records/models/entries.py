"""Record and ledger entry models."""

from pydantic import BaseModel, ConfigDict, Field

from missive.records.models.identity import IdentityKey


class MessageRecord(BaseModel):
    """A current message together with the identity holding it."""

    model_config = ConfigDict(frozen=True)

    sender: IdentityKey = Field(..., description="Record holder")
    message: str = Field(..., description="Current message text")


class UpdateEntry(BaseModel):
    """Immutable ledger entry for a successful update."""

    model_config = ConfigDict(frozen=True)

    sender: IdentityKey = Field(..., description="Identity that updated")
    old_message: str = Field(..., description="Text before the update")
    new_message: str = Field(..., description="Text after the update")
    timestamp: int = Field(..., ge=0, description="Epoch milliseconds")


class DeleteEntry(BaseModel):
    """Immutable ledger entry for a successful delete."""

    model_config = ConfigDict(frozen=True)

    sender: IdentityKey = Field(..., description="Identity that deleted")
    message: str = Field(..., description="Text at the time of deletion")
    timestamp: int = Field(..., ge=0, description="Epoch milliseconds")
