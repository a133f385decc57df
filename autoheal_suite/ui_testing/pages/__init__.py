"""Sauce Demo page objects."""

from .inventory_page import InventoryPage
from .login_page import LoginPage

__all__ = [
    "InventoryPage",
    "LoginPage",
]
