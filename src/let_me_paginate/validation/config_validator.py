"""
Config Validator - Validate Pagination Configs.

Validates a pagination config before any cache lookup or slicing:
    - Config present
    - Page is a positive integer
    - Page size is a positive integer within the maximum
    - Cache TTL is a non-negative integer

Design Notes:
    - Fail-fast principle: the first violation is raised
    - Each violation has its own error kind
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from let_me_paginate.domain.entities import PaginationConfig
from let_me_paginate.domain.errors import PaginationError

logger = logging.getLogger(__name__)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """
    Validates pagination configs.

    Validates:
        - page >= 1
        - 1 <= page_size <= max_page_size (or the default maximum)
        - cache_ttl >= 0 when given
    """

    def __init__(self, default_max_page_size: int = 100) -> None:
        """
        Initialize config validator.

        Args:
            default_max_page_size: Maximum page size used when a config
                                   does not set its own.
        """
        self.default_max_page_size = default_max_page_size

    def validate(self, config: Optional[PaginationConfig]) -> None:
        """
        Validate a normalized pagination config.

        Args:
            config: Config with page and page_size filled in

        Raises:
            PaginationError: On the first violation found
        """
        if config is None:
            raise PaginationError.invalid_config(
                "Pagination configuration is required"
            )

        page = config.page
        page_size = config.page_size

        if not _is_int(page) or page < 1:
            self._fail(
                PaginationError.invalid_config(
                    "Page number must be a positive integer", field="page"
                )
            )

        self.validate_page_size(page_size, config.max_page_size)
        self.validate_cache_ttl(config.cache_ttl)

        logger.debug(f"Config validated: page={page}, page_size={page_size}")

    def validate_explicit(self, config: PaginationConfig) -> None:
        """
        Validate the values a caller set explicitly, before defaults apply.

        An explicit page_size of 0 must fail even though the default that
        would replace it is valid.

        Raises:
            PaginationError: If an explicit page or page_size is not positive
        """
        if config.page_size is not None and config.page_size <= 0:
            self._fail(PaginationError.invalid_page_size(config.page_size))

        if config.page is not None and config.page <= 0:
            self._fail(
                PaginationError.invalid_config(
                    "Page number must be a positive integer", field="page"
                )
            )

    def validate_cache_ttl(self, cache_ttl: Optional[int]) -> None:
        """
        Validate a cache TTL in milliseconds.

        Raises:
            PaginationError: If the TTL is negative or not an integer
        """
        if cache_ttl is None:
            return
        if not _is_int(cache_ttl) or cache_ttl < 0:
            self._fail(
                PaginationError.invalid_config(
                    "Cache TTL must be a non-negative integer", field="cache_ttl"
                )
            )

    def validate_page_size(
        self,
        page_size: Optional[int],
        max_page_size: Optional[int] = None,
    ) -> None:
        """
        Validate just a page size (utility method).

        Raises:
            PaginationError: If page_size is not within 1..max
        """
        if not _is_int(page_size) or page_size < 1:
            self._fail(PaginationError.invalid_page_size(page_size))

        max_size = max_page_size or self.default_max_page_size
        if page_size > max_size:
            self._fail(PaginationError.invalid_page_size(page_size, max_size))

    def _fail(self, error: PaginationError) -> None:
        logger.debug(f"Config validation failed [{error.code}]: {error.message}")
        raise error
