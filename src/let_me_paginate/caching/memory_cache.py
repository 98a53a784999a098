"""
Memory Cache - TTL-based Caching with LRU Eviction.

In-memory implementation of the CacheService protocol for pagination
results.

Design Notes:
    - Entry count bounded by max_size
    - Every entry expires ttl_ms after it was set
    - Expiry is checked lazily on get/has; cleanup_expired() sweeps
    - LRU by a monotonically increasing access counter; get and set
      count as accesses, has does not
    - One reentrant lock guards the map and the counter
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


def _now_ms() -> float:
    return time.time() * 1000


@dataclass
class CacheEntry:
    """A single cache entry. Timestamps are epoch milliseconds."""

    value: Any
    created_at: float
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now > self.expires_at


@dataclass
class CacheConfig:
    """Configuration for the memory cache."""

    # Maximum number of entries (None = unbounded)
    max_size: Optional[int] = 1000

    # TTL used when set() gets none (5 minutes)
    default_ttl_ms: int = 5 * 60 * 1000

    # Log cache hits/misses
    log_access: bool = False


@dataclass
class CacheStats:
    """Cache statistics."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0
    expirations: int = 0
    current_entries: int = 0
    max_size: Optional[int] = None
    expired_entries: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


class MemoryCache:
    """
    Bounded TTL cache with least-recently-used eviction.

    Features:
        - At most max_size live entries
        - Per-entry expiry, removed on first access after it passes
        - Evicts the least recently accessed key when a new key arrives
          at capacity
        - Statistics tracking

    The coroutine API matches CacheService; no await happens while the
    lock is held, so every operation runs to completion atomically.
    """

    def __init__(
        self,
        config: Optional[CacheConfig] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        """
        Initialize memory cache.

        Args:
            config: Cache configuration
            clock: Returns the current time in epoch milliseconds
        """
        self.config = config or CacheConfig()
        self._clock = clock or _now_ms
        self._entries: Dict[str, CacheEntry] = {}
        self._access_order: Dict[str, int] = {}
        self._access_counter = 0
        self._lock = threading.RLock()
        self._stats = CacheStats()

    async def get(self, key: str) -> Optional[Any]:
        """
        Get value from cache.

        Args:
            key: Cache key

        Returns:
            Cached value or None if not found/expired
        """
        with self._lock:
            entry = self._entries.get(key)

            if entry is None:
                self._stats.misses += 1
                if self.config.log_access:
                    logger.debug(f"Cache MISS: {key}")
                return None

            if entry.is_expired(self._clock()):
                self._remove_entry(key)
                self._stats.expirations += 1
                self._stats.misses += 1
                if self.config.log_access:
                    logger.debug(f"Cache EXPIRED: {key}")
                return None

            self._touch(key)
            self._stats.hits += 1
            if self.config.log_access:
                logger.debug(f"Cache HIT: {key}")

            return entry.value

    async def set(self, key: str, value: Any, ttl_ms: Optional[int] = None) -> None:
        """
        Set value in cache.

        Args:
            key: Cache key
            value: Value to cache
            ttl_ms: TTL in milliseconds (uses default if None)
        """
        ttl = ttl_ms if ttl_ms is not None else self.config.default_ttl_ms

        with self._lock:
            now = self._clock()

            if key not in self._entries and self._is_full():
                self._evict_least_recently_used()

            self._entries[key] = CacheEntry(
                value=value,
                created_at=now,
                expires_at=now + ttl,
            )
            self._touch(key)

            if self.config.log_access:
                logger.debug(f"Cache SET: {key} (TTL={ttl}ms)")

    async def delete(self, key: str) -> None:
        """Remove an entry. No-op if absent."""
        with self._lock:
            self._remove_entry(key)

    async def clear(self) -> None:
        """Clear all cache entries and reset the access counter."""
        with self._lock:
            self._entries.clear()
            self._access_order.clear()
            self._access_counter = 0
            logger.info("Cache CLEARED")

    async def has(self, key: str) -> bool:
        """
        Check whether a live entry exists.

        Removes the entry if it has expired. Does not refresh recency.
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return False

            if entry.is_expired(self._clock()):
                self._remove_entry(key)
                self._stats.expirations += 1
                return False

            return True

    async def cleanup_expired(self) -> int:
        """
        Remove every expired entry.

        Returns:
            Number of entries removed
        """
        with self._lock:
            now = self._clock()
            expired_keys = [
                key for key, entry in self._entries.items() if entry.is_expired(now)
            ]
            for key in expired_keys:
                self._remove_entry(key)
            self._stats.expirations += len(expired_keys)

            if expired_keys:
                logger.debug(f"Cache CLEANUP removed {len(expired_keys)} expired entries")

            return len(expired_keys)

    def get_stats(self) -> CacheStats:
        """Get cache statistics."""
        with self._lock:
            now = self._clock()
            return CacheStats(
                hits=self._stats.hits,
                misses=self._stats.misses,
                evictions=self._stats.evictions,
                expirations=self._stats.expirations,
                current_entries=len(self._entries),
                max_size=self.config.max_size,
                expired_entries=sum(
                    1 for entry in self._entries.values() if entry.is_expired(now)
                ),
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _touch(self, key: str) -> None:
        """Mark key as most recently used (must hold lock)."""
        self._access_counter += 1
        self._access_order[key] = self._access_counter

    def _is_full(self) -> bool:
        max_size = self.config.max_size
        return max_size is not None and len(self._entries) >= max_size

    def _remove_entry(self, key: str) -> None:
        """Remove entry and its recency record (must hold lock)."""
        self._entries.pop(key, None)
        self._access_order.pop(key, None)

    def _evict_least_recently_used(self) -> None:
        """Evict the key with the smallest access counter (must hold lock)."""
        if not self._access_order:
            return

        lru_key = min(self._access_order, key=self._access_order.__getitem__)
        self._remove_entry(lru_key)
        self._stats.evictions += 1
        logger.debug(f"Cache EVICTED (LRU): {lru_key}")
