"""
Test Fixtures - Shared Test Data and Helpers.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample configuration for testing
    - FakeClock: Manually advanced millisecond clock for TTL tests
    - make_items: Sample record generator
"""

from __future__ import annotations

from typing import Any, Dict, List


class FakeClock:
    """Manually advanced clock returning epoch milliseconds."""

    def __init__(self, start_ms: float = 1_700_000_000_000.0) -> None:
        self.now = start_ms

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


def make_items(count: int) -> List[Dict[str, Any]]:
    """Helper to create a list of simple records."""
    return [{"id": i + 1, "name": f"Item {i + 1}"} for i in range(count)]
