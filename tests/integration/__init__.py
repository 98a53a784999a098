"""
Integration Tests - Components Working Together.

These tests wire a paginator from configuration and exercise it against
a real MemoryCache driven by a fake clock.

Test Files:
    - test_cached_pagination.py: Cached pagination end to end
"""
