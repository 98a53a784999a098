"""
Null Cache.

A cache backend that stores nothing. Used by the paginator when no real
cache is injected, so ``enable_cache`` never needs a None check.
"""

from __future__ import annotations

from typing import Any, Optional


class NullCache:
    """Cache that always misses."""

    async def get(self, key: str) -> Optional[Any]:
        return None

    async def set(self, key: str, value: Any, ttl_ms: Optional[int] = None) -> None:
        return None

    async def delete(self, key: str) -> None:
        return None

    async def clear(self) -> None:
        return None

    async def has(self, key: str) -> bool:
        return False
