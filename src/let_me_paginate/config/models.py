"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class PaginationSettings(BaseModel):
    """Defaults applied by the paginator."""

    default_page_size: int = Field(default=10, ge=1)
    max_page_size: int = Field(default=100, ge=1)
    default_cache_ttl_ms: int = Field(default=5 * 60 * 1000, ge=0)
    smart_threshold: int = Field(default=100, ge=0)

    @model_validator(mode="after")
    def _check_page_sizes(self) -> "PaginationSettings":
        if self.default_page_size > self.max_page_size:
            raise ValueError(
                f"default_page_size ({self.default_page_size}) exceeds "
                f"max_page_size ({self.max_page_size})"
            )
        return self


class CacheSettings(BaseModel):
    """Settings for the in-memory result cache (always LRU eviction)."""

    enabled: bool = True
    max_size: int = Field(default=1000, ge=1)
    default_ttl_ms: int = Field(default=5 * 60 * 1000, ge=0)
    log_access: bool = False


class PaginatorConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    pagination: PaginationSettings = Field(default_factory=PaginationSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
