"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers and tags tests by directory.

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
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
        "markers", "e2e: End-to-end tests against a live application"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "unit: Framework and page object tests without a browser"
    )
    config.addinivalue_line(
        "markers", "ui: Tests driving a real browser"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "booking: Tests related to the booking workflow"
    )


def pytest_collection_modifyitems(config, items):
    """
    Tag collected tests by location.

    Every test is part of the booking workflow; `unit` and `ui` follow the
    directory the test lives in.
    """
    for item in items:
        item.add_marker(pytest.mark.booking)

        if "ui_testing" in str(item.path):
            item.add_marker(pytest.mark.ui)

        if "unit" in item.path.parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Booking Workflow UI Automation",
        "=" * 60,
        "",
    ]
