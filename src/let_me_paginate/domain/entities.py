"""
Core Domain Entities.

Pagination requests and their results. Attribute names are snake_case;
every model also reads and writes the camelCase names used on the wire
(``pageSize``, ``fromCache`` ...).
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field, StrictInt
from pydantic.alias_generators import to_camel
from pydantic_core import to_jsonable_python

from let_me_paginate.domain.value_objects import NavigationLinks, PaginationMeta

T = TypeVar("T")


class PaginationConfig(BaseModel):
    """
    Input for a pagination call.

    Integer fields are strict: booleans, floats and numeric strings are
    rejected rather than coerced. Range checks live in ConfigValidator so
    that every violation maps to its own error kind.
    """

    page: Optional[StrictInt] = Field(default=None, description="1-based page number")
    page_size: Optional[StrictInt] = Field(default=None, description="Items per page")
    max_page_size: Optional[StrictInt] = Field(
        default=None, description="Upper bound for page_size"
    )
    enable_cache: bool = Field(default=False, description="Use the result cache")
    cache_ttl: Optional[StrictInt] = Field(
        default=None, description="Cache TTL in milliseconds"
    )
    no_pagination: bool = Field(
        default=False, description="Return the whole collection as one page"
    )

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class PaginatedResult(BaseModel, Generic[T]):
    """One page of data with its metadata."""

    data: List[T] = Field(default_factory=list)
    meta: PaginationMeta
    from_cache: bool = False

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    def to_response(self) -> Dict[str, Any]:
        """Serialize to the JSON response shape."""
        return {
            "data": to_jsonable_python(self.data),
            "meta": self.meta.model_dump(by_alias=True),
            "fromCache": self.from_cache,
        }


class PaginatedResultWithLinks(PaginatedResult[T], Generic[T]):
    """A page plus navigation links. Links are None in return-all mode."""

    links: Optional[NavigationLinks] = None

    def to_response(self) -> Dict[str, Any]:
        response = super().to_response()
        if self.links is not None:
            response["links"] = self.links.model_dump(exclude_none=True)
        return response
