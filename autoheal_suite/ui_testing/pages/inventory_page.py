"""
================================================================================
Inventory Page Object (Async / Playwright)
================================================================================

Sauce Demo product list shown after a successful login.

================================================================================
"""

from __future__ import annotations

import allure
from playwright.async_api import Locator

from autoheal_suite.ui_testing.framework.page_base import PageBase


class InventoryPage(PageBase):
    """Inventory (products) page object (async)."""

    URL_PATH = "/inventory.html"
    PAGE_TITLE = "Products"

    TITLE = ".title"
    CART_BADGE = ".shopping_cart_badge"

    @staticmethod
    def add_to_cart_selector(product_name: str) -> str:
        return f'[data-test="add-to-cart-{product_name}"]'

    @staticmethod
    def remove_selector(product_name: str) -> str:
        return f'[data-test="remove-{product_name}"]'

    async def get_page_title(self) -> Locator:
        return await self.find(self.TITLE, "Products page title")

    @allure.step("Add {product_name} to cart")
    async def add_product_to_cart(self, product_name: str) -> None:
        """
        Click the product's add-to-cart button.

        Args:
            product_name: Product slug, e.g. "sauce-labs-backpack"
        """
        button = await self.find(
            self.add_to_cart_selector(product_name),
            f"Add to cart button for {product_name}",
        )
        await button.click()

    @allure.step("Remove {product_name} from cart")
    async def remove_product_from_cart(self, product_name: str) -> None:
        button = await self.find(
            self.remove_selector(product_name),
            f"Remove button for {product_name}",
        )
        await button.click()

    async def get_cart_item_count(self) -> int:
        """
        Number shown on the cart badge.

        The badge is resolved through healing like every other element, so
        an outdated badge selector still yields the real count. An empty cart
        has no badge; check that with is_visible(CART_BADGE).

        Returns:
            Badge count (0 when the badge text is empty)
        """
        badge = await self.find(self.CART_BADGE, "Shopping cart badge")
        text = (await badge.text_content() or "").strip()
        return int(text or "0")
