"""
Test Suite for Table Engine.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Pipeline and controller tests across components
    - performance/: Recomputation timing on large datasets
    - fixtures/: Shared test fixtures and sample data

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest -m "not slow"                    # Skip performance tests
    pytest --cov=src/table_engine           # With coverage
"""
