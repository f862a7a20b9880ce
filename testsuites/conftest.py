"""
================================================================================
Test Suite Pytest Configuration
================================================================================

Registers the project's markers, sets up logging and tags collected tests
by directory.

================================================================================
"""

import pytest

from testfactory.common import init_logger


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for release"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "unit: Library tests run against fake pages"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end data object scenarios"
    )

    init_logger()


def pytest_collection_modifyitems(config, items):
    """Tag tests by the directory they live in."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "testfactory - page and data objects for Playwright",
        "=" * 60,
        "",
    ]
