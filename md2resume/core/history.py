"""In-memory ledger of successful deployments."""

import threading
from collections import deque
from functools import lru_cache

from md2resume.config import settings
from md2resume.models.history import HistoryEntry, HistoryRecord


class HistoryLedger:
    """Keeps the most recent successful deployments, newest first.

    Note: history is process-local and is lost on restart.
    """

    def __init__(self, capacity: int = 50):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._records: deque[HistoryRecord] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def record(self, entry: HistoryEntry) -> HistoryRecord:
        """Add a deployment at the head, evicting the oldest past capacity."""
        record = HistoryRecord.from_entry(entry)
        with self._lock:
            self._records.appendleft(record)
        return record

    def list(self) -> tuple[HistoryRecord, ...]:
        """Return a snapshot of the ledger, newest first."""
        with self._lock:
            return tuple(self._records)

    def clear(self) -> int:
        """Remove all records. Returns the number removed."""
        with self._lock:
            removed = len(self._records)
            self._records.clear()
        return removed

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


_ledger: HistoryLedger | None = None


@lru_cache
def get_history_ledger() -> HistoryLedger:
    """Get the process-wide history ledger."""
    global _ledger
    if _ledger is None:
        _ledger = HistoryLedger(capacity=settings.history_capacity)
    return _ledger
