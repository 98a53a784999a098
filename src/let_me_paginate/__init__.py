"""
Let Me Paginate - In-Memory Pagination with a Result Cache.

Slices fully materialized sequences into pages with consistent metadata
and navigation links, and memoizes computed pages in a bounded TTL/LRU
cache keyed by a fingerprint of the data and the requested page.

Architecture:
    - Ports & Adapters: the paginator depends on the CacheService protocol
    - Dependency Injection for cache backends and settings
    - Configuration-driven wiring via YAML

Main Components:
    - domain: Config, result and metadata models; PaginationError
    - interfaces: CacheService protocol
    - caching: MemoryCache (TTL + LRU)
    - adapters: NullCache
    - validation: ConfigValidator
    - pagination: Paginator engine and page arithmetic
    - config: Settings models and YAML loader

Example:
    >>> from let_me_paginate import create_paginator
    >>> paginator = create_paginator(enable_cache=True)
    >>> result = await paginator.simple_paginate(items, page=2, page_size=20)
    >>> print(f"Page {result.meta.current_page} of {result.meta.total_pages}")

"""

import logging
from typing import Union

from let_me_paginate.adapters.null_cache import NullCache
from let_me_paginate.caching.memory_cache import CacheConfig, CacheStats, MemoryCache
from let_me_paginate.config.loader import load_config
from let_me_paginate.config.models import (
    CacheSettings,
    PaginationSettings,
    PaginatorConfig,
)
from let_me_paginate.domain.entities import (
    PaginatedResult,
    PaginatedResultWithLinks,
    PaginationConfig,
)
from let_me_paginate.domain.errors import PaginationError, PaginationErrorKind
from let_me_paginate.domain.value_objects import NavigationLinks, PaginationMeta
from let_me_paginate.factory import build_paginator, create_paginator, quick_paginate
from let_me_paginate.interfaces.cache_service import CacheService
from let_me_paginate.pagination.paginator import Paginator

__version__ = "1.0.0"


def configure_logging(
    level: Union[int, str] = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Send Let Me Paginate log records to a stderr handler.

    Swallowed cache failures are logged at WARNING, cache clears at INFO,
    and evictions, validation failures and cache hits/misses at DEBUG
    (per-key cache access only with CacheSettings.log_access).

    Args:
        level: Logging level, as a number or a name such as "debug"
        format: Log message format

    Example:
        >>> import let_me_paginate
        >>> let_me_paginate.configure_logging("DEBUG")
    """
    if isinstance(level, str):
        level = level.upper()

    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("let_me_paginate").setLevel(level)


__all__ = [
    "CacheConfig",
    "CacheService",
    "CacheSettings",
    "CacheStats",
    "MemoryCache",
    "NavigationLinks",
    "NullCache",
    "PaginatedResult",
    "PaginatedResultWithLinks",
    "PaginationConfig",
    "PaginationError",
    "PaginationErrorKind",
    "PaginationMeta",
    "PaginationSettings",
    "Paginator",
    "PaginatorConfig",
    "build_paginator",
    "configure_logging",
    "create_paginator",
    "load_config",
    "quick_paginate",
]
