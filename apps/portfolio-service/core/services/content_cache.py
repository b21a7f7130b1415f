"""
In-process cache for public read results.

Keys are collection names ("projects", "skills", ...). Admin mutations call
`invalidate` with the key they touched so the next public read is fresh.
Values must be plain data or Pydantic models, never ORM rows bound to a
session.
"""
from __future__ import annotations

import threading
import time
from typing import Any, Callable, Dict, Optional, Tuple

from core.utils.settings import get_settings


class ContentCache:
    def __init__(self, ttl_seconds: Optional[float] = None, clock: Callable[[], float] = time.monotonic):
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[float, Any]] = {}
        self._lock = threading.Lock()
        self._generation = 0

    @property
    def ttl(self) -> float:
        if self._ttl is not None:
            return self._ttl
        return get_settings().public_cache_ttl_seconds

    def get_or_load(self, key: str, loader: Callable[[], Any]) -> Any:
        ttl = self.ttl
        if ttl <= 0:
            return loader()
        now = self._clock()
        with self._lock:
            hit = self._entries.get(key)
            if hit is not None and hit[0] > now:
                return hit[1]
            generation = self._generation
        value = loader()
        with self._lock:
            # A write that landed while loading makes this value stale
            if generation == self._generation:
                self._entries[key] = (now + ttl, value)
        return value

    def invalidate(self, *keys: str) -> None:
        with self._lock:
            self._generation += 1
            for key in keys:
                # Derived keys such as "projects:featured" go with their parent
                for cached in [k for k in self._entries if k == key or k.startswith(f"{key}:")]:
                    del self._entries[cached]

    def clear(self) -> None:
        with self._lock:
            self._generation += 1
            self._entries.clear()

    def __contains__(self, key: str) -> bool:
        with self._lock:
            hit = self._entries.get(key)
            return hit is not None and hit[0] > self._clock()


_cache: Optional[ContentCache] = None


def get_content_cache() -> ContentCache:
    global _cache
    if _cache is None:
        _cache = ContentCache()
    return _cache


def reset_content_cache_for_tests() -> None:
    get_content_cache().clear()
