"""In-process detection result cache.

Bounded LRU map from raw user-agent string to DetectionResult, with an
optional per-entry lifetime.

Behavior:
    - Thread-safe (one re-entrant lock around the map)
    - Expiry is lazy: an expired entry is dropped when it is looked up
    - When full, the least recently used entry is evicted (expired entries
      are pruned first)
    - Lost on restart
"""

from __future__ import annotations

import time
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass
from threading import RLock

from uadetect.domain.value_objects import DetectionResult


@dataclass(slots=True)
class _Entry:
    value: DetectionResult
    expires_at: float | None


class DetectionCache:
    """LRU result cache with optional TTL (implements DetectionCacheProtocol).

    Args:
        max_entries: Capacity; must be positive.
        ttl_seconds: Entry lifetime, None for entries that never expire.
        clock: Monotonic time source (injectable for tests).
    """

    def __init__(
        self,
        *,
        max_entries: int,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries <= 0:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        if ttl_seconds is not None and ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")
        self._max = max_entries
        self._ttl = ttl_seconds
        self._clock = clock
        self._data: OrderedDict[str, _Entry] = OrderedDict()
        self._lock = RLock()

    @property
    def max_entries(self) -> int:
        return self._max

    @property
    def ttl_seconds(self) -> float | None:
        return self._ttl

    def get(self, key: str) -> DetectionResult | None:
        now = self._clock()
        with self._lock:
            entry = self._data.get(key)
            if entry is None:
                return None
            if entry.expires_at is not None and entry.expires_at <= now:
                del self._data[key]
                return None
            self._data.move_to_end(key)
            return entry.value

    def set(self, key: str, value: DetectionResult) -> None:
        expires_at = None if self._ttl is None else self._clock() + self._ttl
        with self._lock:
            if key in self._data:
                self._data.move_to_end(key)
            elif len(self._data) >= self._max:
                self._prune_locked()
                while len(self._data) >= self._max:
                    self._data.popitem(last=False)
            self._data[key] = _Entry(value=value, expires_at=expires_at)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def _prune_locked(self) -> None:
        if self._ttl is None:
            return
        now = self._clock()
        expired = [
            key
            for key, entry in self._data.items()
            if entry.expires_at is not None and entry.expires_at <= now
        ]
        for key in expired:
            del self._data[key]
