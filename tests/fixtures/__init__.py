"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample configuration for testing

Usage:
    Reference files via the ``sample_config_path`` pytest fixture.
"""
