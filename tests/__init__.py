"""
Test Suite for Let Me Paginate.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Paginator, cache and config wired together
    - fixtures/: Shared helpers and sample configuration

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest -m integration                   # Integration tests only
"""
