"""Tests for HistoryLedger."""

from missive.records.ledger import HistoryLedger
from missive.records.models import DeleteEntry, IdentityKey, UpdateEntry


def _update(n: int) -> UpdateEntry:
    return UpdateEntry(
        sender=IdentityKey(f"id-{n}"),
        old_message=f"old message {n}",
        new_message=f"new message {n}",
        timestamp=n,
    )


class TestHistoryLedger:
    """Tests for append-only behaviour."""

    def test_starts_empty(self):
        ledger: HistoryLedger[UpdateEntry] = HistoryLedger()

        assert ledger.all() == []
        assert len(ledger) == 0

    def test_append_preserves_order(self):
        ledger: HistoryLedger[UpdateEntry] = HistoryLedger()
        entries = [_update(n) for n in range(5)]

        for entry in entries:
            ledger.append(entry)

        assert ledger.all() == entries
        assert len(ledger) == 5

    def test_duplicates_kept(self):
        ledger: HistoryLedger[UpdateEntry] = HistoryLedger()
        entry = _update(1)

        ledger.append(entry)
        ledger.append(entry)

        assert ledger.all() == [entry, entry]

    def test_all_returns_snapshot(self):
        ledger: HistoryLedger[DeleteEntry] = HistoryLedger()
        ledger.append(DeleteEntry(sender=IdentityKey("a"), message="gone message", timestamp=1))

        snapshot = ledger.all()
        snapshot.clear()

        assert len(ledger) == 1

    def test_initial_entries(self):
        entries = [_update(1), _update(2)]

        ledger = HistoryLedger(entries)
        entries.append(_update(3))

        assert ledger.all() == [_update(1), _update(2)]
