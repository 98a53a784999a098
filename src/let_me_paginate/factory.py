"""
Factory Functions - Wire a Paginator from Settings.

Builds a ready-to-use Paginator with or without an in-memory cache, either
from plain arguments or from a loaded PaginatorConfig.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, TypeVar

from let_me_paginate.caching.memory_cache import CacheConfig, MemoryCache
from let_me_paginate.config.models import PaginationSettings, PaginatorConfig
from let_me_paginate.domain.entities import PaginatedResult
from let_me_paginate.pagination.paginator import Paginator

logger = logging.getLogger(__name__)

T = TypeVar("T")


def create_paginator(
    enable_cache: bool = False,
    max_cache_size: int = 1000,
    settings: Optional[PaginationSettings] = None,
) -> Paginator:
    """
    Create a paginator, optionally backed by a MemoryCache.

    Args:
        enable_cache: Attach an in-memory cache
        max_cache_size: Maximum number of cached pages
        settings: Page size and TTL defaults

    Returns:
        Configured Paginator
    """
    settings = settings or PaginationSettings()
    cache = None
    if enable_cache:
        cache = MemoryCache(
            CacheConfig(
                max_size=max_cache_size,
                default_ttl_ms=settings.default_cache_ttl_ms,
            )
        )
    return Paginator(cache=cache, settings=settings)


def build_paginator(config: PaginatorConfig) -> Paginator:
    """
    Create a paginator from a loaded configuration.

    The cache is attached only when config.cache.enabled is set.
    """
    cache = None
    if config.cache.enabled:
        cache = MemoryCache(
            CacheConfig(
                max_size=config.cache.max_size,
                default_ttl_ms=config.cache.default_ttl_ms,
                log_access=config.cache.log_access,
            )
        )
        logger.debug(
            f"Paginator cache enabled (max_size={config.cache.max_size}, "
            f"ttl={config.cache.default_ttl_ms}ms)"
        )
    return Paginator(cache=cache, settings=config.pagination)


async def quick_paginate(
    data: Sequence[T],
    page: int = 1,
    page_size: int = 10,
    enable_cache: bool = False,
    no_pagination: bool = False,
    max_items_before_pagination: Optional[int] = None,
) -> PaginatedResult[T]:
    """
    Paginate with a throwaway paginator.

    Routes to get_all_data when no_pagination is set, to smart_paginate
    when a threshold is given, and to simple_paginate otherwise.
    """
    paginator = create_paginator(enable_cache=enable_cache)

    if no_pagination:
        return await paginator.get_all_data(data, enable_cache)

    if max_items_before_pagination:
        return await paginator.smart_paginate(
            data, max_items_before_pagination, page_size, page
        )

    return await paginator.simple_paginate(data, page, page_size, enable_cache)
