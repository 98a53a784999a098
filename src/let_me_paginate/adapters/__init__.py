"""
Adapters Package - Infrastructure Implementations.

Concrete implementations of the interfaces package that carry no caching
logic of their own.

Caches:
    - NullCache: Stores nothing, always misses

Design Principles:
    - All adapters implement their respective protocols
    - Easily swappable via Dependency Injection
"""

from let_me_paginate.adapters.null_cache import NullCache

__all__ = ["NullCache"]
