"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for the Sauce Demo UI tests, providing fixtures
for browser management, the self-healing client and page objects.

Key Features:
- Session browser, isolated context + page per test
- Shared AutoHeal client, re-bound to each test page (reports generated at session end)
- Cache metrics logged and attached after every test
- Screenshot capture on failure

================================================================================
"""

import os
from typing import Any, AsyncGenerator, Dict, Generator

import allure
import pytest
import pytest_asyncio
from autoheal.reporting import ReportingAutoHealLocator
from loguru import logger
from playwright.async_api import BrowserContext, Page

from autoheal_suite.ui_testing.framework import AutoHealHelper, BrowserManager
from autoheal_suite.ui_testing.framework.autoheal_helper import reports_dir
from autoheal_suite.ui_testing.pages import InventoryPage, LoginPage
from suite_tools.common import get_config
from suite_tools.report_tools import attach_cache_metrics, attach_healing_reports


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser_manager() -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager fixture.

    One browser for the whole session; browser type, headless mode and base
    URL come from the `ui` configuration section.
    """
    async with BrowserManager(base_url=os.getenv("UI_BASE_URL")) as manager:
        yield manager


@pytest_asyncio.fixture(loop_scope="session")
async def context(browser_manager: BrowserManager) -> AsyncGenerator[BrowserContext, None]:
    """Function-scoped browser context: fresh cookies and storage per test."""
    context = await browser_manager.new_context()
    yield context
    await browser_manager.close_context(context)


@pytest_asyncio.fixture(loop_scope="session")
async def page(request, context: BrowserContext) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page fixture.

    Attaches a full-page screenshot to Allure when the test body failed.
    """
    page = await context.new_page()
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed and not page.is_closed():
        screenshot = await page.screenshot(full_page=True)
        allure.attach(
            screenshot,
            name="failure_screenshot",
            attachment_type=allure.attachment_type.PNG,
        )
        logger.info(f"📸 Failure screenshot attached for {request.node.name}")


# ================================================================================
# AutoHeal Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def autoheal_session() -> Generator[None, None, None]:
    """
    Owns the shared client's lifetime.

    After the last UI test the healing reports are written, attached to
    Allure and the client is reset.
    """
    yield

    paths = AutoHealHelper.generate_reports(reports_dir())
    for path in paths:
        logger.info(f"📄 AutoHeal report: {path}")
    attach_healing_reports(paths)
    AutoHealHelper.reset()


@pytest.fixture
def autoheal(page: Page, autoheal_session) -> ReportingAutoHealLocator:
    """
    Shared self-healing client bound to this test's page.

    Built on first use from the environment (get_autoheal_config) when
    `autoheal.use_env_config` is set, otherwise in simple mode.
    """
    if get_config("autoheal.use_env_config", True):
        return AutoHealHelper.get_autoheal_with_config(page)
    return AutoHealHelper.get_autoheal(page)


@pytest.fixture(autouse=True)
def log_cache_metrics(autoheal: ReportingAutoHealLocator) -> Generator[None, None, None]:
    """Log and attach selector cache metrics after every UI test."""
    yield
    snapshot = AutoHealHelper.metrics_snapshot()
    logger.info(
        f"📊 Cache Metrics: hit rate {snapshot['hit_rate'] * 100:.1f}%, "
        f"entries {snapshot['total_entries']}"
    )
    attach_cache_metrics(snapshot)


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(page: Page, autoheal: ReportingAutoHealLocator) -> LoginPage:
    return LoginPage(page, autoheal=autoheal)


@pytest.fixture
def inventory_page(page: Page, autoheal: ReportingAutoHealLocator) -> InventoryPage:
    return InventoryPage(page, autoheal=autoheal)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase report on the item (read by the `page` fixture)."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


# ================================================================================
# Utility Fixtures
# ================================================================================

@pytest.fixture
def test_data() -> Dict[str, Any]:
    """
    Users and products from the `test_data` configuration section.

    UI_USERNAME / UI_PASSWORD override the standard user.
    """
    data = get_config("test_data", {}) or {}
    standard = dict(data.get("standard_user", {}))
    standard["username"] = os.getenv("UI_USERNAME") or standard.get("username", "standard_user")
    standard["password"] = os.getenv("UI_PASSWORD") or standard.get("password", "secret_sauce")
    return {
        "standard_user": standard,
        "locked_out_user": dict(data.get("locked_out_user", {
            "username": "locked_out_user",
            "password": "secret_sauce",
        })),
        "products": dict(data.get("products", {"backpack": "sauce-labs-backpack"})),
    }
