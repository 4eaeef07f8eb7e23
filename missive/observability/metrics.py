"""Prometheus metrics for Missive.

Tracks engine operation outcomes and the size of the record store and
history ledgers.
"""

from prometheus_client import Counter, Gauge

# Operation metrics
OPERATION_COUNT = Counter(
    "missive_operations_total",
    "Total number of engine operations",
    labelnames=["operation", "outcome"],
)

# State metrics
CURRENT_MESSAGES = Gauge(
    "missive_messages_current",
    "Number of identities currently holding a message",
)

LEDGER_ENTRIES = Gauge(
    "missive_ledger_entries",
    "Number of entries in a history ledger",
    labelnames=["ledger"],
)


def record_operation(operation: str, outcome: str) -> None:
    """Count one engine operation.

    Args:
        operation: Engine operation name
        outcome: "ok" or the error code of the failure
    """
    OPERATION_COUNT.labels(operation=operation, outcome=outcome).inc()


def set_state_sizes(messages: int, updates: int, deletions: int) -> None:
    """Publish current store and ledger sizes."""
    CURRENT_MESSAGES.set(messages)
    LEDGER_ENTRIES.labels(ledger="updates").set(updates)
    LEDGER_ENTRIES.labels(ledger="deletions").set(deletions)
