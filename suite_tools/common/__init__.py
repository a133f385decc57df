"""
================================================================================
Suite Tools Common Utilities
================================================================================

Shared configuration management and logging setup.

Exports:
    - get_config: Get a configuration value by dot-notation path
    - set_config: Override a configuration value at runtime
    - reload_config: Reload configuration files and re-init logging
    - init_logger: Initialize loguru logger with standard settings
    - get_logger: Return the initialized loguru logger

Usage:
    from suite_tools.common import get_config, init_logger

    init_logger()
    base_url = get_config("ui.base_url", "https://www.saucedemo.com")

================================================================================
"""

from .global_config import (
    get_config,
    get_logger,
    init_logger,
    reload_config,
    set_config,
)

__all__ = [
    "get_config",
    "set_config",
    "reload_config",
    "init_logger",
    "get_logger",
]
