"""
================================================================================
Suite Pytest Configuration
================================================================================

Registers project-wide markers, tags tests by directory and keeps UI tests
out of runs that did not ask for them (--run-ui).

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

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Playwright UI tests (need --run-ui)"
    )
    config.addinivalue_line(
        "markers", "unit: Offline unit tests"
    )


def pytest_collection_modifyitems(config, items):
    """
    Add 'ui' / 'unit' markers by directory and skip UI tests unless --run-ui.
    """
    run_ui = config.getoption("--run-ui")
    skip_ui = pytest.mark.skip(reason="UI test: pass --run-ui to run against the live site")

    for item in items:
        path = str(item.fspath)
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
            if not run_ui:
                item.add_marker(skip_ui)
        elif "unit" in path:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Sauce Demo Self-Healing UI Suite",
        "=" * 60,
        "",
    ]
