"""
Caching Layer.

Provides the in-memory result cache:
    - MemoryCache: TTL-based caching with LRU eviction
    - CacheConfig: Configuration for cache behavior
    - CacheStats: Statistics tracking for cache operations
"""

from let_me_paginate.caching.memory_cache import (
    CacheConfig,
    CacheEntry,
    CacheStats,
    MemoryCache,
)

__all__ = [
    "CacheConfig",
    "CacheEntry",
    "CacheStats",
    "MemoryCache",
]
