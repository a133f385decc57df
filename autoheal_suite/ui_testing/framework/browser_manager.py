"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - Single browser instance per session
    - Isolated contexts per test
    - Browser type / headless / slow-mo from configuration
    - Base URL bound to every context so relative navigation works

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from suite_tools.common import get_config


SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


class BrowserManager:
    """
    Manages browser instances and contexts for UI testing.

    Usage:
        async with BrowserManager() as manager:
            page = await manager.new_page()
            await page.goto("/")
    """

    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
        "args": ["--ignore-certificate-errors"],
    }

    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        headless: Optional[bool] = None,
        browser_type: Optional[str] = None,
        base_url: Optional[str] = None,
        slow_mo: Optional[int] = None,
    ):
        """
        Initialize browser manager.

        Unset arguments fall back to the `ui.*` configuration section.

        Args:
            headless: Run browser in headless mode
            browser_type: Browser to use - 'chromium', 'firefox', 'webkit'
            base_url: Base URL for relative navigation
            slow_mo: Delay between operations in milliseconds
        """
        self.headless = get_config("ui.headless", True) if headless is None else headless
        self.browser_type = (browser_type or get_config("ui.browser", "chromium")).lower()
        self.base_url = base_url or get_config("ui.base_url", "https://www.saucedemo.com")
        self.slow_mo = get_config("ui.slow_mo", 0) if slow_mo is None else slow_mo

        if self.browser_type not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser '{self.browser_type}'. "
                f"Expected one of: {', '.join(SUPPORTED_BROWSERS)}"
            )

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    async def __aenter__(self) -> "BrowserManager":
        """Async context manager entry - start browser."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - close browser."""
        await self.close()

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        self._playwright = await async_playwright().start()
        browser_launcher = getattr(self._playwright, self.browser_type)

        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.headless,
            "slow_mo": self.slow_mo,
        }

        self._browser = await browser_launcher.launch(**launch_options)
        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless}, slow_mo={self.slow_mo})"
        )

    async def close(self) -> None:
        """Close all contexts and browser."""
        for context in self._contexts:
            try:
                await context.close()
            except PlaywrightError as e:
                logger.debug(f"Context already closed: {e}")
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    async def new_context(
        self,
        **options: Any,
    ) -> BrowserContext:
        """
        Create new browser context.

        Each context is isolated - separate cookies, localStorage, etc.

        Args:
            **options: Additional context options

        Returns:
            New BrowserContext
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = {
            **self.DEFAULT_CONTEXT_OPTIONS,
            "base_url": self.base_url,
            **options,
        }

        context = await self._browser.new_context(**context_options)
        self._contexts.append(context)
        return context

    async def close_context(self, context: BrowserContext) -> None:
        """Close a context created by this manager."""
        if context in self._contexts:
            self._contexts.remove(context)
        await context.close()

    async def new_page(
        self,
        context: Optional[BrowserContext] = None,
        **context_options: Any,
    ) -> Page:
        """
        Create new page in new or existing context.

        Args:
            context: Existing context to use (creates new if None)
            **context_options: Options for new context

        Returns:
            New Page
        """
        if context is None:
            context = await self.new_context(**context_options)

        return await context.new_page()

    @property
    def browser(self) -> Optional[Browser]:
        """Get browser instance."""
        return self._browser


__all__ = [
    "BrowserManager",
    "SUPPORTED_BROWSERS",
]
