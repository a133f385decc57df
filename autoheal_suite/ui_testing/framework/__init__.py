"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework with self-healing element lookup.

Components:
    - autoheal_helper: Shared autoheal client access (construct once, reset)
    - page_base: Base page object for common operations
    - browser_manager: Browser lifecycle management

Author: Automation Team
License: MIT
================================================================================
"""

from .autoheal_helper import AutoHealHelper
from .page_base import BasePage
from .browser_manager import BrowserManager

__all__ = [
    "AutoHealHelper",
    "BasePage",
    "BrowserManager",
]
