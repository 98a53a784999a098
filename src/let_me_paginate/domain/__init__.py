"""
Domain Layer - Pagination Entities, Value Objects and Errors.

Entities:
    - PaginationConfig: What the caller asks for
    - PaginatedResult: One page of data plus metadata
    - PaginatedResultWithLinks: A page plus navigation links

Value Objects:
    - PaginationMeta: Page numbers, counts and item indices
    - NavigationLinks: first/previous/next/last URLs
    - FingerprintFields: Config fields that identify a page in the cache

Errors:
    - PaginationError tagged with a PaginationErrorKind

Design Principles:
    - Immutable (frozen pydantic models)
    - camelCase aliases for the wire format
    - No infrastructure dependencies
"""

from let_me_paginate.domain.entities import (
    PaginatedResult,
    PaginatedResultWithLinks,
    PaginationConfig,
)
from let_me_paginate.domain.errors import PaginationError, PaginationErrorKind
from let_me_paginate.domain.value_objects import (
    FingerprintFields,
    NavigationLinks,
    PaginationMeta,
)

__all__ = [
    "FingerprintFields",
    "NavigationLinks",
    "PaginatedResult",
    "PaginatedResultWithLinks",
    "PaginationConfig",
    "PaginationError",
    "PaginationErrorKind",
    "PaginationMeta",
]
