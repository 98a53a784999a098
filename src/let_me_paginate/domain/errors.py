"""
Pagination Errors.

A single exception type tagged with an error kind. Each kind carries a
machine-readable code, and the exception keeps the structured values that
caused it (requested page, valid range, page sizes) so callers can build
their own responses without parsing messages.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple


class PaginationErrorKind(str, Enum):
    """Kinds of pagination failure. Values are the error codes."""

    INVALID_CONFIG = "INVALID_PAGINATION_CONFIG"
    INVALID_PAGE_SIZE = "INVALID_PAGE_SIZE"
    PAGE_NOT_FOUND = "PAGE_NOT_FOUND"
    CACHE_ERROR = "CACHE_ERROR"


class PaginationError(Exception):
    """Raised when a pagination request cannot be served."""

    def __init__(
        self,
        kind: PaginationErrorKind,
        message: str,
        *,
        field: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        max_page_size: Optional[int] = None,
        total_pages: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.field = field
        self.page = page
        self.page_size = page_size
        self.max_page_size = max_page_size
        self.total_pages = total_pages
        self.cause = cause

    @property
    def code(self) -> str:
        """Machine-readable error code."""
        return self.kind.value

    @property
    def valid_range(self) -> Optional[Tuple[int, int]]:
        """Valid page range for PAGE_NOT_FOUND errors."""
        if self.total_pages is None:
            return None
        return (1, self.total_pages)

    @classmethod
    def invalid_config(
        cls, message: str, field: Optional[str] = None
    ) -> "PaginationError":
        return cls(PaginationErrorKind.INVALID_CONFIG, message, field=field)

    @classmethod
    def invalid_page_size(
        cls, page_size: object, max_page_size: Optional[int] = None
    ) -> "PaginationError":
        if max_page_size:
            message = (
                f"Page size {page_size} exceeds maximum allowed size of {max_page_size}"
            )
        else:
            message = f"Page size {page_size} must be greater than 0"
        return cls(
            PaginationErrorKind.INVALID_PAGE_SIZE,
            message,
            field="page_size",
            page_size=page_size if isinstance(page_size, int) else None,
            max_page_size=max_page_size,
        )

    @classmethod
    def page_not_found(cls, page: int, total_pages: int) -> "PaginationError":
        return cls(
            PaginationErrorKind.PAGE_NOT_FOUND,
            f"Page {page} not found. Valid pages are 1 to {total_pages}",
            field="page",
            page=page,
            total_pages=total_pages,
        )

    @classmethod
    def cache_error(cls, message: str, cause: BaseException) -> "PaginationError":
        return cls(PaginationErrorKind.CACHE_ERROR, message, cause=cause)

    def __repr__(self) -> str:
        return f"PaginationError(code={self.code!r}, message={self.message!r})"
