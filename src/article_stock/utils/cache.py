"""In-memory caching utilities."""

import time
from collections import OrderedDict
from typing import Generic, TypeVar

import anyio
import structlog

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class LRUCache(Generic[T]):
    """
    LRU cache with optional TTL, safe for concurrent tasks.

    Uses an OrderedDict for O(1) access and LRU eviction.
    """

    def __init__(self, max_size: int = 1000, ttl_seconds: float | None = None) -> None:
        """
        Initialize the LRU cache.

        Args:
            max_size: Maximum number of items in the cache
            ttl_seconds: Time-to-live for cache entries (None for no expiry)
        """
        self.max_size = max_size
        self.ttl_seconds = ttl_seconds
        self._entries: OrderedDict[str, tuple[T, float]] = OrderedDict()
        self._lock = anyio.Lock()

    def _is_expired(self, stored_at: float) -> bool:
        if self.ttl_seconds is None:
            return False
        return time.monotonic() - stored_at > self.ttl_seconds

    async def get(self, key: str) -> T | None:
        """
        Get a value from the cache.

        Returns:
            Cached value or None if not found/expired
        """
        async with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            value, stored_at = entry
            if self._is_expired(stored_at):
                del self._entries[key]
                return None

            self._entries.move_to_end(key)
            return value

    async def set(self, key: str, value: T) -> None:
        """Store a value, evicting the least recently used entries at capacity."""
        async with self._lock:
            self._entries.pop(key, None)
            while self._entries and len(self._entries) >= self.max_size:
                self._entries.popitem(last=False)
            self._entries[key] = (value, time.monotonic())

    async def delete(self, key: str) -> bool:
        """
        Delete a value from the cache.

        Returns:
            True if key was deleted, False if not found
        """
        async with self._lock:
            return self._entries.pop(key, None) is not None

    async def clear(self) -> None:
        """Clear all entries from the cache."""
        async with self._lock:
            self._entries.clear()

    async def cleanup_expired(self) -> int:
        """
        Remove all expired entries.

        Returns:
            Number of entries removed
        """
        if self.ttl_seconds is None:
            return 0

        async with self._lock:
            expired = [key for key, (_, stored_at) in self._entries.items() if self._is_expired(stored_at)]
            for key in expired:
                del self._entries[key]
            return len(expired)

    @property
    def size(self) -> int:
        """Return current cache size."""
        return len(self._entries)


async def sweep_expired(cache: LRUCache, interval_seconds: float) -> None:
    """
    Periodically drop expired entries until cancelled.

    Args:
        cache: Cache to sweep
        interval_seconds: Pause between sweeps
    """
    while True:
        await anyio.sleep(interval_seconds)
        removed = await cache.cleanup_expired()
        if removed:
            logger.debug("cache_sweep", removed=removed, size=cache.size)
