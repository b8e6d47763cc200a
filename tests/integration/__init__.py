"""
Integration Tests - Pipeline and Controller Tests.

These tests drive a full recomputation pass (search, filter, sort,
paginate) and the control events of a TableController over in-memory
datasets.

Test Files:
    - test_table_pipeline.py: Pipeline orchestration, audit trail, metrics
    - test_table_controller.py: Control events, selection, export
"""
