"""
Repository-level pytest configuration.

  - Loads `.env` (AUTOHEAL_* provider settings, demo credentials) before collection
  - Registers the --run-ui option (UI tests need a browser and network access)
  - Provides demo-safe defaults for the Sauce Demo application

Values below are the public Sauce Demo credentials; AI provider keys are never
defaulted and must come from `.env` or CI secrets.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest
from dotenv import load_dotenv

from suite_tools.common import init_logger


load_dotenv(Path(__file__).parent / ".env")


def pytest_addoption(parser):
    parser.addoption(
        "--run-ui",
        action="store_true",
        default=False,
        help="Run Playwright UI tests against the configured base URL",
    )


def pytest_sessionstart(session):
    init_logger()


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _demo_safe_env_defaults() -> Generator[None, None, None]:
    """Set Sauce Demo defaults if not already provided by the user/CI."""
    defaults = {
        "UI_BASE_URL": "https://www.saucedemo.com",
        "UI_USERNAME": "standard_user",
        "UI_PASSWORD": "secret_sauce",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield
