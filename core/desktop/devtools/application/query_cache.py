import time
from dataclasses import dataclass
from threading import Lock
from typing import Callable, Dict, Optional

from core import QueryKey, TaskPage

DEFAULT_STALE_AFTER = 30.0


@dataclass
class CacheEntry:
    page: TaskPage
    fetched_at: float
    invalidated: bool = False


class QueryCache:
    """Task pages keyed by QueryKey with a freshness window."""

    def __init__(self, stale_after: float = DEFAULT_STALE_AFTER, clock: Callable[[], float] = time.monotonic) -> None:
        self.stale_after = stale_after
        self.clock = clock
        self._entries: Dict[QueryKey, CacheEntry] = {}
        self._lock = Lock()

    def get_fresh(self, key: QueryKey) -> Optional[TaskPage]:
        now = self.clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None or entry.invalidated:
                return None
            if now - entry.fetched_at >= self.stale_after:
                return None
            return entry.page

    def peek(self, key: QueryKey) -> Optional[TaskPage]:
        """Last known page for key regardless of freshness."""
        with self._lock:
            entry = self._entries.get(key)
            return entry.page if entry else None

    def store(self, key: QueryKey, page: TaskPage) -> None:
        with self._lock:
            self._entries[key] = CacheEntry(page=page, fetched_at=self.clock())

    def invalidate_all(self) -> None:
        with self._lock:
            for entry in self._entries.values():
                entry.invalidated = True

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = ["QueryCache", "CacheEntry", "DEFAULT_STALE_AFTER"]
