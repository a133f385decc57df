"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation relative to the configured base URL
    - Self-healing element lookup through the autoheal client
    - Screenshot and failure capture (attached to Allure)
    - Wait utilities

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import allure
from autoheal.reporting import ReportingAutoHealLocator
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page

from suite_tools.common import get_config

from .autoheal_helper import AutoHealHelper


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/"

            async def login(self, username: str, password: str):
                await self.fill("#user-name", "Username input field", username)
                await self.fill("#password", "Password input field", password)
                await self.click("#login-button", "Login button")
    """

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = ""

    def __init__(
        self,
        page: Page,
        autoheal: Optional[ReportingAutoHealLocator] = None,
        base_url: str = "",
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            autoheal: Self-healing locator client (shared helper instance when None)
            base_url: Base URL for the application
        """
        self.page = page
        if not base_url:
            base_url = os.getenv("UI_BASE_URL") or get_config("ui.base_url", "https://www.saucedemo.com")
        self.base_url = base_url.rstrip("/")
        self.autoheal = autoheal or AutoHealHelper.get_autoheal(page)

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    async def navigate(self, wait_for: str = "load") -> None:
        """
        Navigate to this page.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
        """
        with allure.step(f"Navigate to {self.URL_PATH}"):
            await self.page.goto(self.url, wait_until=wait_for)
            logger.debug(f"Navigated to: {self.url}")

    async def wait_for_page_load(
        self,
        state: str = "load",
        timeout: int = 15000,
    ) -> None:
        """
        Wait for the page to reach a stable load state.

        Args:
            state: Playwright load state ('load', 'domcontentloaded', 'networkidle')
            timeout: Timeout in milliseconds
        """
        await self.page.wait_for_load_state(state, timeout=timeout)

    # =========================================================================
    # Self-healing Element Interactions
    # =========================================================================

    async def find(
        self,
        selector: str,
        description: str,
    ) -> Locator:
        """
        Locate element through AutoHeal.

        The selector is handed over as a native Playwright locator; when it
        does not resolve, the client heals it and returns a locator for the
        healed selector.

        Args:
            selector: Preferred CSS selector
            description: Human-readable description used when healing

        Returns:
            Playwright Locator

        Raises:
            autoheal.ElementNotFoundException: Neither the selector nor healing found the element
        """
        return await self.autoheal.find_async(self.page.locator(selector), description)

    async def click(
        self,
        selector: str,
        description: str,
        **kwargs: Any,
    ) -> None:
        with allure.step(f"Click: {description}"):
            locator = await self.find(selector, description)
            await locator.click(**kwargs)

    async def fill(
        self,
        selector: str,
        description: str,
        value: str,
        **kwargs: Any,
    ) -> None:
        """
        Fill input element.

        Password values are masked in the Allure step title.
        """
        shown = "*" * len(value) if "password" in description.lower() else value
        with allure.step(f"Fill {description}: {shown}"):
            locator = await self.find(selector, description)
            await locator.fill(value, **kwargs)

    async def get_text(
        self,
        selector: str,
        description: str,
    ) -> str:
        locator = await self.find(selector, description)
        return (await locator.text_content() or "").strip()

    async def is_visible(
        self,
        selector: str,
        timeout: int = 2000,
    ) -> bool:
        """
        Check visibility of a selector without healing.

        Used for negative checks where healing onto another element would
        hide a real absence.
        """
        locator = self.page.locator(selector).first
        try:
            await locator.wait_for(state="visible", timeout=timeout)
            return True
        except PlaywrightError:
            return False

    # =========================================================================
    # Wait Utilities
    # =========================================================================

    async def wait_for_url(
        self,
        url_pattern: str,
        timeout: int = 10000,
    ) -> None:
        """
        Wait for URL to match pattern.

        Args:
            url_pattern: URL pattern (supports wildcards)
            timeout: Timeout in milliseconds
        """
        with allure.step(f"Wait for URL: {url_pattern}"):
            await self.page.wait_for_url(url_pattern, timeout=timeout)

    async def pause(self, milliseconds: int) -> None:
        """Fixed wait, used after actions that trigger client-side re-render."""
        await self.page.wait_for_timeout(milliseconds)

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            allure.attach.file(
                str(filepath),
                name=name,
                attachment_type=allure.attachment_type.PNG,
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(self, test_name: str) -> None:
        """
        Capture debugging information on test failure.

        Saves:
            - Screenshot
            - Current URL
        """
        with allure.step("Capture failure details"):
            await self.screenshot(f"failure_{test_name}", full_page=True)
            allure.attach(
                self.page.url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )


__all__ = [
    "BasePage",
    "PageBase",
]

# Backward-compatible alias (many Page Objects prefer PageBase naming)
PageBase = BasePage
