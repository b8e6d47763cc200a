"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with in-memory datasets.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_search_stage.py: Free-text search
    - test_predicate_filter.py: Exact-value filters
    - test_sorter.py: Stable single-key sort
    - test_paginator.py: Page slicing and page window
    - test_selection_tracker.py: Row selection
    - test_exporter.py: Delimited text export
    - test_config_loader.py: Configuration loading/validation
"""
