"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import pytest

from let_me_paginate.caching.memory_cache import CacheConfig, MemoryCache
from let_me_paginate.config.models import PaginationSettings
from let_me_paginate.pagination.paginator import Paginator
from tests.fixtures import FakeClock, make_items


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock for TTL tests."""
    return FakeClock()


@pytest.fixture
def memory_cache(clock: FakeClock) -> MemoryCache:
    """Create a cache driven by the fake clock."""
    return MemoryCache(CacheConfig(max_size=50), clock=clock)


@pytest.fixture
def paginator(memory_cache: MemoryCache) -> Paginator:
    """Create a paginator backed by the memory cache."""
    return Paginator(cache=memory_cache, settings=PaginationSettings())


@pytest.fixture
def fifty_items() -> List[Dict[str, Any]]:
    """Fifty records."""
    return make_items(50)


@pytest.fixture
def hundred_items() -> List[Dict[str, Any]]:
    """One hundred records."""
    return make_items(100)
