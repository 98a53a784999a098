"""
Paginator - Cache-Augmented Pagination Engine.

Slices in-memory sequences into pages and memoizes computed pages in a
CacheService keyed by a fingerprint of the data and the page fields.

Modes:
    - Normal: validate, look up cache, slice, store in cache
    - Return-all (no_pagination=True): the whole sequence as one page

Design Notes:
    - Stateless per call; all state lives in the injected cache
    - Validation errors propagate before any cache or slicing work
    - Cache failures are logged and never fail a call
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Sequence, TypeVar, Union

from pydantic import ValidationError

from let_me_paginate.adapters.null_cache import NullCache
from let_me_paginate.config.models import PaginationSettings
from let_me_paginate.domain.entities import (
    PaginatedResult,
    PaginatedResultWithLinks,
    PaginationConfig,
)
from let_me_paginate.domain.errors import PaginationError, PaginationErrorKind
from let_me_paginate.domain.value_objects import FingerprintFields, PaginationMeta
from let_me_paginate.interfaces.cache_service import CacheService
from let_me_paginate.pagination import bounds
from let_me_paginate.validation.config_validator import ConfigValidator

logger = logging.getLogger(__name__)

T = TypeVar("T")

ConfigInput = Union[PaginationConfig, Mapping[str, Any], None]


class Paginator:
    """
    Paginates in-memory sequences with an optional result cache.

    Usage:
        paginator = Paginator(cache=MemoryCache())
        config = {"page": 2, "pageSize": 20, "enableCache": True}

        # First call: computed and stored
        page = await paginator.paginate(items, config)

        # Same data and page: served from cache, page.from_cache is True
        page = await paginator.paginate(items, config)
    """

    def __init__(
        self,
        cache: Optional[CacheService] = None,
        settings: Optional[PaginationSettings] = None,
        validator: Optional[ConfigValidator] = None,
    ) -> None:
        """
        Initialize paginator.

        Args:
            cache: Cache backend (a NullCache when None)
            settings: Page size and TTL defaults
            validator: Config validator (built from settings when None)
        """
        self.settings = settings or PaginationSettings()
        self.cache: CacheService = cache if cache is not None else NullCache()
        self.validator = validator or ConfigValidator(
            default_max_page_size=self.settings.max_page_size
        )

    async def paginate(
        self,
        data: Sequence[T],
        config: ConfigInput,
    ) -> PaginatedResult[T]:
        """
        Return one page of data.

        Args:
            data: The full, already sorted and filtered collection
            config: PaginationConfig or a mapping of its fields

        Returns:
            The requested page, or every item when no_pagination is set

        Raises:
            PaginationError: On invalid config or a page outside the range
        """
        config = self._coerce_config(config)

        if config.no_pagination:
            return await self._return_all_data(data, config)

        self.validator.validate_explicit(config)
        normalized = self._normalize_config(config)
        self.validator.validate(normalized)

        return await self._paginate_normal(data, normalized)

    async def paginate_with_links(
        self,
        data: Sequence[T],
        config: ConfigInput,
        base_url: str = "",
        query_params: Optional[Mapping[str, Any]] = None,
    ) -> PaginatedResultWithLinks[T]:
        """
        Paginate and attach first/previous/next/last links.

        Links carry query_params, the page size and the target page.
        Return-all mode never has links.
        """
        config = self._coerce_config(config)
        result = await self.paginate(data, config)

        links = None
        if not config.no_pagination:
            params = {**(query_params or {}), "pageSize": result.meta.page_size}
            links = bounds.build_navigation_links(
                result.meta.current_page,
                result.meta.total_pages,
                base_url,
                params,
            )

        return PaginatedResultWithLinks(
            data=result.data,
            meta=result.meta,
            from_cache=result.from_cache,
            links=links,
        )

    async def simple_paginate(
        self,
        data: Sequence[T],
        page: int = 1,
        page_size: Optional[int] = None,
        enable_cache: bool = False,
    ) -> PaginatedResult[T]:
        """Paginate with plain arguments instead of a config."""
        config = self._coerce_config(
            {
                "page": page,
                "page_size": page_size
                if page_size is not None
                else self.settings.default_page_size,
                "enable_cache": enable_cache,
            }
        )
        return await self.paginate(data, config)

    async def get_all_data(
        self,
        data: Sequence[T],
        enable_cache: bool = False,
        cache_ttl: Optional[int] = None,
    ) -> PaginatedResult[T]:
        """Return every item as a single page."""
        config = self._coerce_config(
            {"no_pagination": True, "enable_cache": enable_cache, "cache_ttl": cache_ttl}
        )
        return await self.paginate(data, config)

    def get_all_data_sync(self, data: Sequence[T]) -> PaginatedResult[T]:
        """Return every item as a single page, without the cache."""
        return self._build_all_data_result(data)

    async def smart_paginate(
        self,
        data: Sequence[T],
        max_items_before_pagination: Optional[int] = None,
        page_size: Optional[int] = None,
        page: int = 1,
    ) -> PaginatedResult[T]:
        """
        Paginate only when data is larger than a threshold.

        Collections of at most max_items_before_pagination items come back
        whole; larger ones are paginated normally. The cache is not used.
        """
        threshold = (
            max_items_before_pagination
            if max_items_before_pagination is not None
            else self.settings.smart_threshold
        )
        config = self._coerce_config(
            {
                "no_pagination": len(data) <= threshold,
                "page": page,
                "page_size": page_size
                if page_size is not None
                else self.settings.default_page_size,
                "enable_cache": False,
            }
        )
        return await self.paginate(data, config)

    async def get_all_pages(
        self,
        data: Sequence[T],
        page_size: Optional[int] = None,
    ) -> List[PaginatedResult[T]]:
        """
        Paginate data into every page, in order.

        Pages are computed one after another; the first failure propagates.
        A page size that yields no pages (zero or negative) returns an empty
        list, while an oversized one fails on the first page.
        """
        size = page_size if page_size is not None else self.settings.default_page_size

        pages: List[PaginatedResult[T]] = []
        for page in range(1, bounds.total_pages(len(data), size) + 1):
            config = self.create_config(page=page, page_size=size)
            pages.append(await self.paginate(data, config))

        return pages

    def create_config(self, **overrides: Any) -> PaginationConfig:
        """
        Create a config filled with the paginator defaults.

        Args:
            **overrides: Field values (snake_case) replacing the defaults
        """
        values = {
            "page": 1,
            "page_size": self.settings.default_page_size,
            "max_page_size": self.settings.max_page_size,
            "enable_cache": False,
            "cache_ttl": self.settings.default_cache_ttl_ms,
        }
        values.update(overrides)
        return self._coerce_config(values)

    def validate_config(self, config: ConfigInput) -> None:
        """Validate a complete config (page and page_size set)."""
        self.validator.validate(self._coerce_config(config))

    def generate_cache_key(self, data: Sequence[Any], config: ConfigInput) -> str:
        """Cache key under which the page for config is stored."""
        config = self._coerce_config(config)
        return bounds.fingerprint(data, self._fingerprint_fields(config))

    async def _paginate_normal(
        self,
        data: Sequence[T],
        config: PaginationConfig,
    ) -> PaginatedResult[T]:
        page = config.page
        page_size = config.page_size
        total_items = len(data)

        cache_key = None
        if config.enable_cache:
            cache_key = self._cache_key(data, self._fingerprint_fields(config))
            cached = await self._cache_lookup(cache_key)
            if cached is not None:
                return cached

        total_pages = bounds.total_pages(total_items, page_size)

        if total_pages > 0 and not bounds.is_valid_page(page, total_pages):
            raise PaginationError.page_not_found(page, total_pages)

        start = bounds.start_index(page, page_size)
        end = bounds.end_index(page, page_size, total_items)

        meta = PaginationMeta(
            current_page=page,
            page_size=page_size,
            total_items=total_items,
            total_pages=total_pages,
            has_previous=page > 1,
            has_next=page < total_pages,
            first_item_index=start + 1 if total_items > 0 else 0,
            last_item_index=end if total_items > 0 else 0,
        )
        result: PaginatedResult[T] = PaginatedResult(
            data=list(data[start:end]),
            meta=meta,
            from_cache=False,
        )

        await self._cache_store(cache_key, result, config.cache_ttl)
        return result

    async def _return_all_data(
        self,
        data: Sequence[T],
        config: PaginationConfig,
    ) -> PaginatedResult[T]:
        self.validator.validate_cache_ttl(config.cache_ttl)

        cache_key = None
        if config.enable_cache:
            cache_key = self._cache_key(data, FingerprintFields.for_all_data())
            cached = await self._cache_lookup(cache_key)
            if cached is not None:
                return cached

        result = self._build_all_data_result(data)

        await self._cache_store(cache_key, result, config.cache_ttl)
        return result

    def _build_all_data_result(self, data: Sequence[T]) -> PaginatedResult[T]:
        total_items = len(data)
        meta = PaginationMeta(
            current_page=1,
            page_size=total_items,
            total_items=total_items,
            total_pages=1,
            has_previous=False,
            has_next=False,
            first_item_index=1 if total_items > 0 else 0,
            last_item_index=total_items,
        )
        return PaginatedResult(data=list(data), meta=meta, from_cache=False)

    def _coerce_config(self, config: ConfigInput) -> PaginationConfig:
        if config is None:
            raise PaginationError.invalid_config("Pagination configuration is required")
        if isinstance(config, PaginationConfig):
            return config
        try:
            return PaginationConfig.model_validate(dict(config))
        except ValidationError as e:
            fields = ", ".join(".".join(map(str, err["loc"])) for err in e.errors())
            raise PaginationError(
                PaginationErrorKind.INVALID_CONFIG,
                f"Invalid pagination configuration: {fields}",
                cause=e,
            ) from e

    def _normalize_config(self, config: PaginationConfig) -> PaginationConfig:
        """Fill in a missing page or page_size with the defaults."""
        return config.model_copy(
            update={
                "page": config.page or 1,
                "page_size": config.page_size or self.settings.default_page_size,
            }
        )

    def _fingerprint_fields(self, config: PaginationConfig) -> FingerprintFields:
        if config.no_pagination:
            return FingerprintFields.for_all_data()
        return FingerprintFields.for_page(
            config.page or 1,
            config.page_size or self.settings.default_page_size,
        )

    def _cache_key(
        self, data: Sequence[Any], fields: FingerprintFields
    ) -> Optional[str]:
        """Fingerprint data, or None when it cannot be serialized."""
        try:
            return bounds.fingerprint(data, fields)
        except (TypeError, ValueError) as e:
            error = PaginationError.cache_error("Could not fingerprint data", e)
            logger.warning(f"{error.message}, skipping cache: {e}")
            return None

    async def _cache_lookup(self, cache_key: Optional[str]) -> Optional[PaginatedResult]:
        if cache_key is None:
            return None

        try:
            cached = await self.cache.get(cache_key)
            # Remote backends may hand back the serialized response shape
            if cached is not None and not isinstance(cached, PaginatedResult):
                cached = PaginatedResult.model_validate(cached)
        except Exception as e:
            error = PaginationError.cache_error(f"Cache lookup failed for {cache_key}", e)
            logger.warning(f"{error.message}: {e}")
            return None

        if cached is None:
            logger.debug(f"Cache MISS for {cache_key}")
            return None

        logger.debug(f"Cache HIT for {cache_key}")
        return cached.model_copy(update={"data": list(cached.data), "from_cache": True})

    async def _cache_store(
        self,
        cache_key: Optional[str],
        result: PaginatedResult,
        cache_ttl: Optional[int],
    ) -> None:
        if cache_key is None:
            return

        ttl = cache_ttl or self.settings.default_cache_ttl_ms
        # The caller owns result.data; the cache keeps its own list
        stored = result.model_copy(update={"data": list(result.data)})
        try:
            await self.cache.set(cache_key, stored, ttl)
        except Exception as e:
            error = PaginationError.cache_error(
                f"Failed to cache pagination result under {cache_key}", e
            )
            logger.warning(f"{error.message}: {e}")
