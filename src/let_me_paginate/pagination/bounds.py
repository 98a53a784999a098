"""
Bounds Calculator - Page Arithmetic and Cache Fingerprints.

Pure functions, no state and no side effects. Page numbers are 1-based;
slice indices are 0-based with an exclusive end.
"""

from __future__ import annotations

import hashlib
import json
import math
from typing import Any, Mapping, Optional, Sequence
from urllib.parse import urlencode

from pydantic_core import to_jsonable_python

from let_me_paginate.domain.value_objects import FingerprintFields, NavigationLinks

FINGERPRINT_PREFIX = "pagination"


def total_pages(total_items: int, page_size: int) -> int:
    """Number of pages needed for total_items, 0 for empty input."""
    if total_items <= 0 or page_size <= 0:
        return 0
    return math.ceil(total_items / page_size)


def start_index(page: int, page_size: int) -> int:
    """Index of the first item on page."""
    if page <= 0 or page_size <= 0:
        return 0
    return (page - 1) * page_size


def end_index(page: int, page_size: int, total_items: int) -> int:
    """Exclusive end index of page, clamped to total_items."""
    return min(start_index(page, page_size) + page_size, total_items)


def is_valid_page(page: int, total_pages: int) -> bool:
    return 1 <= page <= total_pages


def _digest(payload: Any) -> str:
    """
    Hash a canonical JSON rendering of payload.

    Dict keys are sorted, so structurally equal inputs give equal digests.
    """
    serialized = json.dumps(
        to_jsonable_python(payload),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]


def fingerprint(data: Sequence[Any], fields: FingerprintFields) -> str:
    """
    Create a cache key for a page of data.

    Args:
        data: The full collection being paginated
        fields: Config fields that identify the page

    Returns:
        Key in format "pagination:<data_hash>:<fields_hash>"
    """
    data_hash = _digest(list(data))
    fields_hash = _digest(list(fields.as_tuple()))
    return f"{FINGERPRINT_PREFIX}:{data_hash}:{fields_hash}"


def build_navigation_links(
    current_page: int,
    total_pages: int,
    base_url: str = "",
    query_params: Optional[Mapping[str, Any]] = None,
) -> NavigationLinks:
    """
    Build first/previous/next/last links around current_page.

    first and previous exist only past page 1; next and last only before
    the final page. Every link carries query_params plus the target page.
    """
    params = dict(query_params or {})

    def url_for(page: int) -> str:
        return f"{base_url}?{urlencode({**params, 'page': page})}"

    links = {}
    if current_page > 1:
        links["first"] = url_for(1)
        links["previous"] = url_for(current_page - 1)
    if current_page < total_pages:
        links["next"] = url_for(current_page + 1)
        links["last"] = url_for(total_pages)

    return NavigationLinks(**links)
