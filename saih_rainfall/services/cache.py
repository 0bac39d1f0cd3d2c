from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple

import structlog

from ..schemas.readings import Reading

logger = structlog.get_logger()


@dataclass(frozen=True)
class CacheEntry:
    timestamp: float
    readings: Tuple[Reading, ...]


class FreshnessCache:
    """Holds the latest reading collection and decides when to refetch it.

    An entry is fresh while ``now - entry.timestamp < ttl_s``. Refreshes run
    one at a time; a failed refresh leaves the previous entry in place.

    The refresh lock is held for the whole refresh call, fetch included. While
    the source hangs, every request that finds the entry stale waits behind it,
    for up to the fetcher's connect + read timeout (25 s by default).
    """

    def __init__(self, ttl_s: float = 600.0, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl_s = float(ttl_s)
        self._clock = clock
        self._entry: Optional[CacheEntry] = None
        self._lock = threading.Lock()

    @property
    def entry(self) -> Optional[CacheEntry]:
        return self._entry

    def is_fresh(self, now: Optional[float] = None) -> bool:
        entry = self._entry
        if entry is None:
            return False
        now = self._clock() if now is None else now
        return now - entry.timestamp < self.ttl_s

    def age(self, now: Optional[float] = None) -> Optional[float]:
        entry = self._entry
        if entry is None:
            return None
        now = self._clock() if now is None else now
        return max(0.0, now - entry.timestamp)

    def get_or_refresh(
        self,
        refresh_fn: Callable[[], Iterable[Reading]],
        now: Optional[float] = None,
    ) -> Tuple[Reading, ...]:
        now = self._clock() if now is None else now
        entry = self._entry
        if entry is not None and now - entry.timestamp < self.ttl_s:
            logger.debug("rainfall_cache_hit", age_s=now - entry.timestamp)
            return entry.readings

        with self._lock:
            # Another request may have refreshed while we waited
            entry = self._entry
            if entry is not None and now - entry.timestamp < self.ttl_s:
                return entry.readings
            readings = tuple(refresh_fn())
            self._entry = CacheEntry(timestamp=now, readings=readings)
            return readings

    def clear(self) -> None:
        with self._lock:
            self._entry = None
