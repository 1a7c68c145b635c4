"""TTL cache with a background reaper thread."""
from __future__ import annotations

import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    created_at: float
    value: bytes


class TTLCache:
    """Thread-safe cache for raw API responses.

    Entries are never expired on read. A reaper thread wakes every
    ``interval_seconds`` and drops entries older than the interval, so an
    entry lives between one and two intervals depending on when it was
    added relative to the sweep.
    """

    def __init__(
        self,
        interval_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if not math.isfinite(interval_seconds) or not 0 < interval_seconds <= threading.TIMEOUT_MAX:
            raise ValueError(f"Cache interval must be a finite positive number, got {interval_seconds!r}")
        self._interval = interval_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._reaper = threading.Thread(
            target=self._reap_loop, name="ttl-cache-reaper", daemon=True
        )
        self._reaper.start()

    @property
    def interval(self) -> float:
        return self._interval

    def add(self, key: str, value: bytes) -> None:
        with self._lock:
            self._entries[key] = CacheEntry(created_at=self._clock(), value=value)

    def get(self, key: str) -> Tuple[Optional[bytes], bool]:
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return None, False
        return entry.value, True

    def reap(self) -> int:
        """Run one sweep and return the number of entries removed."""

        with self._lock:
            threshold = self._clock() - self._interval
            expired = [key for key, entry in self._entries.items() if entry.created_at < threshold]
            for key in expired:
                del self._entries[key]
        if expired:
            LOGGER.debug("cache sweep", extra={"evicted": len(expired)})
        return len(expired)

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def __len__(self) -> int:
        return self.size()

    def close(self) -> None:
        """Stop the reaper thread. Safe to call more than once."""

        self._stop.set()
        if self._reaper.is_alive() and self._reaper is not threading.current_thread():
            self._reaper.join()

    def __enter__(self) -> "TTLCache":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _reap_loop(self) -> None:
        while not self._stop.wait(self._interval):
            self.reap()
