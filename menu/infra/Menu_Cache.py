"""In-memory TTL cache for recommendation responses, keyed by request fingerprint."""
from __future__ import annotations
import time
from collections import OrderedDict
from threading import Lock
from typing import Any, Callable, Optional, Tuple


class MenuCache:
    def __init__(self, ttl_seconds: int = 300, max_entries: int = 256,
                 clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._lock = Lock()
        self._data: "OrderedDict[str, Tuple[float, Any]]" = OrderedDict()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            self._gc()
            hit = self._data.get(key)
            return hit[1] if hit else None

    def put(self, key: str, value: Any) -> None:
        if self.ttl_seconds <= 0:
            return
        with self._lock:
            self._data.pop(key, None)
            self._data[key] = (self._clock(), value)
            while len(self._data) > self.max_entries:
                self._data.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __len__(self) -> int:
        with self._lock:
            self._gc()
            return len(self._data)

    def _gc(self) -> None:
        now = self._clock()
        expired = [k for k, (stored, _) in self._data.items() if now - stored > self.ttl_seconds]
        for k in expired:
            self._data.pop(k, None)


__all__ = ['MenuCache']
