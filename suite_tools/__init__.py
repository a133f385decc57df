"""
================================================================================
Suite Tools
================================================================================

Support utilities for the Sauce Demo self-healing UI suite.

Modules:
    - common: Shared configuration and logging utilities
    - report_tools: Allure attachment and report helpers

Example:
    from suite_tools.common import get_config, init_logger
    from suite_tools.report_tools.allure_utils import attach_cache_metrics

    init_logger()
    base_url = get_config("ui.base_url")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
