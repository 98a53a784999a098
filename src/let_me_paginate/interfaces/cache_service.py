"""
Cache Service Protocol.

Defines the abstract interface every cache backend implements. The
paginator depends only on this protocol, so an in-memory cache, a remote
cache or the null cache can be swapped without touching it.

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - All methods are coroutines so backends may perform I/O
    - TTLs are in milliseconds
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class CacheService(Protocol):
    """Abstract interface for result caches."""

    async def get(self, key: str) -> Optional[Any]:
        """
        Get a value from the cache.

        Args:
            key: Cache key

        Returns:
            The cached value, or None if missing or expired
        """
        ...

    async def set(self, key: str, value: Any, ttl_ms: Optional[int] = None) -> None:
        """
        Store a value in the cache.

        Args:
            key: Cache key
            value: Value to cache
            ttl_ms: Time to live in milliseconds
        """
        ...

    async def delete(self, key: str) -> None:
        """Remove an entry. No-op if absent."""
        ...

    async def clear(self) -> None:
        """Remove every entry."""
        ...

    async def has(self, key: str) -> bool:
        """Check whether a live entry exists for key."""
        ...
