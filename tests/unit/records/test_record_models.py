"""Tests for record domain models."""

import pytest
from pydantic import ValidationError

from missive.records.models import (
    DeleteEntry,
    IdentityKey,
    MessageCreated,
    MessageDeleted,
    MessageRecord,
    MessageUpdated,
    UpdateEntry,
)


class TestLedgerEntries:
    def test_update_entry_is_frozen(self):
        entry = UpdateEntry(
            sender=IdentityKey("a"),
            old_message="old message",
            new_message="new message",
            timestamp=5,
        )

        with pytest.raises(ValidationError):
            entry.new_message = "tampered"

    def test_delete_entry_is_frozen(self):
        entry = DeleteEntry(sender=IdentityKey("a"), message="gone message", timestamp=5)

        with pytest.raises(ValidationError):
            entry.message = "tampered"

    def test_negative_timestamp_rejected(self):
        with pytest.raises(ValidationError):
            DeleteEntry(sender=IdentityKey("a"), message="gone message", timestamp=-1)

    def test_entries_compare_by_value(self):
        first = MessageRecord(sender=IdentityKey("a"), message="hello there")
        second = MessageRecord(sender=IdentityKey("a"), message="hello there")
        assert first == second


class TestEvents:
    def test_event_types(self):
        sender = IdentityKey("a")

        assert MessageCreated(sender=sender, message="m").event_type == "message_created"
        assert MessageUpdated(sender=sender, new_message="m").event_type == "message_updated"
        assert MessageDeleted(sender=sender).event_type == "message_deleted"

    def test_event_serialization(self):
        event = MessageUpdated(sender=IdentityKey("a"), new_message="new text here")

        assert event.model_dump() == {
            "event_type": "message_updated",
            "sender": "a",
            "new_message": "new text here",
        }
