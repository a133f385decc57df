"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Sauce Demo login form.

The username field and login button selectors below are outdated ids; the
client resolves them through healing (AI analysis of the DOM) and the
healing report lists the selectors that should be updated.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger
from playwright.async_api import Locator

from autoheal_suite.ui_testing.framework.page_base import PageBase


class LoginPage(PageBase):
    """Login page object (async)."""

    URL_PATH = "/"
    PAGE_TITLE = "Swag Labs"

    USERNAME_INPUT = "#user-name-Wrong"
    PASSWORD_INPUT = "#password"
    LOGIN_BUTTON = "#login-button-Wrong"
    ERROR_MESSAGE = "[data-test='error']"

    @allure.step("Open login page")
    async def goto(self) -> "LoginPage":
        """Navigate to the login page."""
        await self.navigate()
        return self

    async def get_username_input(self) -> Locator:
        return await self.find(self.USERNAME_INPUT, "Username input field")

    async def get_password_input(self) -> Locator:
        return await self.find(self.PASSWORD_INPUT, "Password input field")

    async def get_login_button(self) -> Locator:
        return await self.find(self.LOGIN_BUTTON, "Login button")

    @allure.step("Login (username={username})")
    async def login(self, username: str, password: str) -> None:
        """
        Fill the credentials and submit the form.

        All three elements are resolved before typing so a healing failure
        surfaces before any interaction.
        """
        username_input = await self.get_username_input()
        password_input = await self.get_password_input()
        login_button = await self.get_login_button()

        await username_input.fill(username)
        await password_input.fill(password)
        await login_button.click()
        logger.debug(f"Submitted login form for {username}")

    async def get_error_message(self) -> str:
        """Text of the login error banner."""
        return await self.get_text(self.ERROR_MESSAGE, "Login error message")
