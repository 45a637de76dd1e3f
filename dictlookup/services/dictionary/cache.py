"""In-memory lookup cache with TTL and size-based eviction."""

import logging
import re
import threading
from typing import Any

from cachetools import TTLCache

from dictlookup.config import settings

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


def make_cache_key(url: str) -> str:
    """Derive a cache key from a fetch URL."""
    return f"cache_{_NON_ALNUM.sub('_', url)}"


class CacheManager:
    """Manages lookup cache operations.

    Values are stored as-is; callers must not mutate them after ``set``.
    """

    def __init__(
        self,
        ttl_seconds: float | None = None,
        max_size: int | None = None,
    ) -> None:
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else settings.cache_ttl_seconds
        self.max_size = max_size if max_size is not None else settings.cache_max_size
        self._store = TTLCache(maxsize=self.max_size, ttl=self.ttl_seconds)
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        """Return the cached value, or None on a miss or after expiry."""
        with self._lock:
            return self._store.get(key)

    def set(self, key: str, value: Any) -> None:
        """Store a value; it expires after ``ttl_seconds``."""
        with self._lock:
            self._store[key] = value
        logger.debug(f"Cached {key} (ttl={self.ttl_seconds}s)")

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
