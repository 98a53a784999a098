"""
Unit Tests for page arithmetic, fingerprints and navigation links.
"""

from __future__ import annotations

import pytest

from let_me_paginate.domain.value_objects import FingerprintFields, PaginationMeta
from let_me_paginate.pagination import bounds
from tests.fixtures import make_items


class TestPageArithmetic:
    """Tests for total_pages, start_index, end_index and is_valid_page."""

    @pytest.mark.parametrize(
        "total_items,page_size,expected",
        [
            (0, 10, 0),
            (1, 10, 1),
            (10, 10, 1),
            (11, 10, 2),
            (50, 9, 6),
            (100, 10, 10),
            (5, 0, 0),
        ],
    )
    def test_total_pages(self, total_items: int, page_size: int, expected: int) -> None:
        assert bounds.total_pages(total_items, page_size) == expected

    def test_start_index(self) -> None:
        assert bounds.start_index(1, 10) == 0
        assert bounds.start_index(3, 10) == 20
        assert bounds.start_index(0, 10) == 0

    def test_end_index_clamped_to_total(self) -> None:
        assert bounds.end_index(1, 10, 50) == 10
        assert bounds.end_index(6, 9, 50) == 50
        assert bounds.end_index(1, 10, 0) == 0

    def test_is_valid_page(self) -> None:
        assert bounds.is_valid_page(1, 10)
        assert bounds.is_valid_page(10, 10)
        assert not bounds.is_valid_page(0, 10)
        assert not bounds.is_valid_page(11, 10)
        assert not bounds.is_valid_page(1, 0)


class TestFingerprint:
    """Tests for cache key generation."""

    def test_deterministic(self) -> None:
        items = make_items(20)
        fields = FingerprintFields.for_page(1, 10)

        assert bounds.fingerprint(items, fields) == bounds.fingerprint(
            make_items(20), FingerprintFields.for_page(1, 10)
        )

    def test_format(self) -> None:
        key = bounds.fingerprint(make_items(3), FingerprintFields.for_page(1, 10))

        prefix, data_hash, fields_hash = key.split(":")
        assert prefix == "pagination"
        assert len(data_hash) == 16
        assert len(fields_hash) == 16

    def test_independent_of_dict_key_order(self) -> None:
        """
        SCENARIO: Same records built with different key insertion order
        EXPECTED: Same fingerprint
        """
        a = [{"id": 1, "name": "x"}]
        b = [{"name": "x", "id": 1}]
        fields = FingerprintFields.for_page(1, 10)

        assert bounds.fingerprint(a, fields) == bounds.fingerprint(b, fields)

    def test_different_data_different_key(self) -> None:
        fields = FingerprintFields.for_page(1, 10)

        assert bounds.fingerprint(make_items(10), fields) != bounds.fingerprint(
            make_items(11), fields
        )

    def test_different_page_different_key(self) -> None:
        items = make_items(30)

        assert bounds.fingerprint(
            items, FingerprintFields.for_page(1, 10)
        ) != bounds.fingerprint(items, FingerprintFields.for_page(2, 10))

    def test_all_data_key_differs_from_page_key(self) -> None:
        items = make_items(30)

        assert bounds.fingerprint(
            items, FingerprintFields.for_all_data()
        ) != bounds.fingerprint(items, FingerprintFields.for_page(1, 30))

    def test_element_order_matters(self) -> None:
        items = make_items(5)
        fields = FingerprintFields.for_page(1, 10)

        assert bounds.fingerprint(items, fields) != bounds.fingerprint(
            list(reversed(items)), fields
        )

    def test_accepts_pydantic_models(self) -> None:
        meta = PaginationMeta(
            current_page=1,
            page_size=1,
            total_items=1,
            total_pages=1,
            has_previous=False,
            has_next=False,
            first_item_index=1,
            last_item_index=1,
        )

        key = bounds.fingerprint([meta], FingerprintFields.for_page(1, 1))

        assert key.startswith("pagination:")

    def test_unserializable_data_raises(self) -> None:
        with pytest.raises(ValueError):
            bounds.fingerprint([object()], FingerprintFields.for_page(1, 1))


class TestNavigationLinks:
    """Tests for build_navigation_links."""

    def test_middle_page(self) -> None:
        links = bounds.build_navigation_links(
            2, 3, "http://example.com/api", {"pageSize": 20}
        )

        assert links.first == "http://example.com/api?pageSize=20&page=1"
        assert links.previous == "http://example.com/api?pageSize=20&page=1"
        assert links.next == "http://example.com/api?pageSize=20&page=3"
        assert links.last == "http://example.com/api?pageSize=20&page=3"

    def test_first_page(self) -> None:
        links = bounds.build_navigation_links(1, 3, "/items")

        assert links.first is None
        assert links.previous is None
        assert links.next == "/items?page=2"
        assert links.last == "/items?page=3"

    def test_last_page(self) -> None:
        links = bounds.build_navigation_links(3, 3, "/items")

        assert links.first == "/items?page=1"
        assert links.previous == "/items?page=2"
        assert links.next is None
        assert links.last is None

    def test_page_param_overrides_caller_page(self) -> None:
        links = bounds.build_navigation_links(1, 2, "/items", {"page": 7, "q": "x"})

        assert links.next == "/items?page=2&q=x"

    def test_empty_collection_has_no_links(self) -> None:
        links = bounds.build_navigation_links(1, 0, "/items")

        assert links.model_dump(exclude_none=True) == {}
