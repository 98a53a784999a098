"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - PaginatorConfig: Root configuration object
    - PaginationSettings: Page size defaults and limits, default cache TTL
    - CacheSettings: In-memory cache size, TTL and logging

Settings are validated on load (fail fast).
"""

from let_me_paginate.config.loader import ConfigLoader, load_config, merge_settings
from let_me_paginate.config.models import (
    CacheSettings,
    PaginationSettings,
    PaginatorConfig,
)

__all__ = [
    "CacheSettings",
    "ConfigLoader",
    "PaginationSettings",
    "PaginatorConfig",
    "load_config",
    "merge_settings",
]
