"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with mocked dependencies.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_paginator.py: Pagination modes, caching and links
    - test_memory_cache.py: TTL expiry and LRU eviction
    - test_config_validator.py: Config validation rules
    - test_config_loader.py: Configuration loading/validation
"""
