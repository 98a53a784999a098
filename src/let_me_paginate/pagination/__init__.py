"""
Pagination Package - Engine and Page Arithmetic.

    - Paginator: Cache-augmented pagination engine
    - bounds: Pure page arithmetic, fingerprints and navigation links
"""

from let_me_paginate.pagination.bounds import (
    build_navigation_links,
    end_index,
    fingerprint,
    is_valid_page,
    start_index,
    total_pages,
)
from let_me_paginate.pagination.paginator import Paginator

__all__ = [
    "Paginator",
    "build_navigation_links",
    "end_index",
    "fingerprint",
    "is_valid_page",
    "start_index",
    "total_pages",
]
