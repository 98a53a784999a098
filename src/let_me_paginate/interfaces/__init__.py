"""
Interfaces Layer - Abstract Protocols for Dependencies.

Protocols:
    - CacheService: Result cache abstraction (in-memory, remote, null)

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Small, focused interfaces
"""

from let_me_paginate.interfaces.cache_service import CacheService

__all__ = ["CacheService"]
