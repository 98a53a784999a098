"""
Value Objects for Domain Layer.

Immutable descriptions of a page: its metadata, its navigation links and
the fields that identify it in the cache.
"""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class PaginationMeta(BaseModel):
    """Metadata describing one page of a collection."""

    current_page: int = Field(ge=1)
    page_size: int = Field(ge=0)
    total_items: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    has_previous: bool
    has_next: bool
    first_item_index: int = Field(ge=0, description="1-based, 0 when empty")
    last_item_index: int = Field(ge=0, description="1-based inclusive, 0 when empty")

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class NavigationLinks(BaseModel):
    """Links to neighbouring pages. Absent links are None."""

    first: Optional[str] = None
    previous: Optional[str] = None
    next: Optional[str] = None
    last: Optional[str] = None

    model_config = {"frozen": True}


class FingerprintFields(BaseModel):
    """
    The config fields that take part in a cache fingerprint.

    Serialized positionally in declaration order, so the key never depends
    on how a caller happened to build its config.
    """

    page: Optional[int] = None
    page_size: Optional[int] = None
    no_pagination: bool = False

    model_config = {"frozen": True}

    @classmethod
    def for_page(cls, page: int, page_size: int) -> "FingerprintFields":
        return cls(page=page, page_size=page_size)

    @classmethod
    def for_all_data(cls) -> "FingerprintFields":
        return cls(no_pagination=True)

    def as_tuple(self) -> Tuple[Optional[int], Optional[int], bool]:
        return (self.page, self.page_size, self.no_pagination)
