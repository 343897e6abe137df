"""Ring buffer storage adapter for captured log entries.

Provides bounded in-memory storage that automatically evicts the oldest
entries when the buffer is full, so a long-running keeper keeps
predictable memory usage.
"""

import threading
from collections import deque
from collections.abc import AsyncIterable

from keeper_telemetry.core.models import LogEntry


class RingBufferLogStorage:
    """Ring buffer implementation of LogStoragePort.

    Stores log entries in a fixed-size circular buffer. When the buffer
    is full, the oldest entry is automatically evicted to make room for
    new entries. Writes are synchronous so logging handlers can call them
    from inside a running event loop.

    Args:
        max_size: Maximum number of entries to store.
    """

    def __init__(self, max_size: int = 1000) -> None:
        self._buffer: deque[LogEntry] = deque(maxlen=max_size)
        self._lock = threading.Lock()

    def write(self, entry: LogEntry) -> None:
        """Write a log entry to storage."""
        with self._lock:
            self._buffer.append(entry)

    async def read(
        self, since: float = 0, level: str | None = None
    ) -> AsyncIterable[LogEntry]:
        """Read log entries since the given timestamp.

        Returns entries with timestamp > since, ordered by timestamp ascending,
        optionally restricted to one level.
        """
        with self._lock:
            entries = list(self._buffer)
        filtered = [e for e in entries if e.timestamp > since]
        if level is not None:
            filtered = [e for e in filtered if e.level.upper() == level.upper()]
        for entry in sorted(filtered, key=lambda e: e.timestamp):
            yield entry

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)
