"""
================================================================================
AutoHeal Helper
================================================================================

Process-wide access point for the autoheal-locator client.

Lifecycle:
    - get_autoheal() / get_autoheal_with_config() construct the client once
    - every later call returns the same instance, re-bound to the caller's page
    - generate_reports() flushes the healing reports (instance is kept)
    - reset() shuts the client down and drops the instance

The client is autoheal's ReportingAutoHealLocator: an AutoHealLocator built
through AutoHealLocator.builder() that also records every lookup and writes
HTML / JSON / text reports on shutdown.

The session-scoped ``autoheal_session`` fixture (ui_testing/tests/conftest.py)
owns this lifecycle during pytest runs; page objects receive the client
explicitly and only fall back to the helper when constructed without one.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from autoheal import (
    AIProvider,
    AutoHealConfiguration,
    ConfigurationException,
    ExecutionStrategy,
    get_autoheal_config,
)
from autoheal.config import AIConfig, PerformanceConfig, ReportingConfig
from autoheal.impl.adapter import PlaywrightWebAutomationAdapter
from autoheal.metrics import CacheMetrics
from autoheal.reporting import ReportingAutoHealLocator
from loguru import logger
from playwright.async_api import Page

from suite_tools.common import get_config


DEFAULT_REPORTS_DIR = "./autoheal-reports"
REPORT_SUFFIXES = ("html", "json", "txt")


def reports_dir() -> str:
    """AUTOHEAL_REPORT_DIR, else `autoheal.reports_dir` from config."""
    return os.getenv("AUTOHEAL_REPORT_DIR") or get_config("autoheal.reports_dir", DEFAULT_REPORTS_DIR)


def simple_config() -> AutoHealConfiguration:
    """Gemini (GEMINI_API_KEY) with SMART_SEQUENTIAL healing and reporting on."""
    return (
        AutoHealConfiguration.builder()
        .ai(AIConfig.builder().provider(AIProvider.GOOGLE_GEMINI).build())
        .performance(
            PerformanceConfig.builder()
            .execution_strategy(ExecutionStrategy.SMART_SEQUENTIAL)
            .build()
        )
        .reporting(
            ReportingConfig.builder()
            .enabled(True)
            .output_directory(reports_dir())
            .build()
        )
        .build()
    )


class AutoHealHelper:
    """
    Singleton holder for the autoheal client.

    Usage:
        >>> autoheal = AutoHealHelper.get_autoheal(page)
        >>> title = await autoheal.find_async(page.locator(".title"), "Products page title")
        >>> AutoHealHelper.get_metrics().get_hit_rate()
        0.0
        >>> AutoHealHelper.reset()
    """

    _instance: Optional[ReportingAutoHealLocator] = None
    _flushed: bool = False

    @classmethod
    def get_autoheal(cls, page: Optional[Page] = None) -> ReportingAutoHealLocator:
        """
        Simple mode: Gemini with SMART_SEQUENTIAL.

        Args:
            page: Page healing runs against (required for the first call)

        Returns:
            The shared client

        Raises:
            ConfigurationException: No page on first use, or GEMINI_API_KEY missing
        """
        if cls._instance is None:
            cls._build(page, simple_config)
            logger.info("✅ AutoHeal initialized (simple mode - Gemini with SMART_SEQUENTIAL)")
        else:
            cls._bind_page(page)
        return cls._instance

    @classmethod
    def get_autoheal_with_config(cls, page: Optional[Page] = None) -> ReportingAutoHealLocator:
        """
        Config mode: autoheal's get_autoheal_config().

        The provider is picked from whichever *_API_KEY (or AUTOHEAL_API_URL for
        a local model) is set; AUTOHEAL_EXECUTION_STRATEGY and AUTOHEAL_REPORT_DIR
        are read as well.
        """
        if cls._instance is None:
            cls._build(page, get_autoheal_config)
            config = cls._instance.get_autoheal().configuration
            logger.info(
                f"✅ AutoHeal initialized with config from .env file "
                f"({config.ai_config.provider.name} with "
                f"{config.performance_config.execution_strategy.name})"
            )
        else:
            cls._bind_page(page)
        return cls._instance

    @classmethod
    def _build(cls, page: Optional[Page], config_factory: Callable[[], AutoHealConfiguration]) -> None:
        if page is None:
            raise ConfigurationException("A Playwright page is required to initialize AutoHeal")
        try:
            config = config_factory()
        except ValueError as e:
            # pydantic validation (e.g. missing API key) surfaces as ValueError
            raise ConfigurationException(f"Invalid AutoHeal configuration: {e}", cause=e) from e

        cls._instance = ReportingAutoHealLocator(PlaywrightWebAutomationAdapter(page), config)
        cls._flushed = False

    @classmethod
    def _bind_page(cls, page: Optional[Page]) -> None:
        # Each test gets a fresh page; healing must query the current one
        if page is not None:
            cls._instance.get_autoheal().adapter.page = page

    @classmethod
    def has_instance(cls) -> bool:
        return cls._instance is not None

    @classmethod
    def reset(cls) -> None:
        """Shut down (writing reports unless already flushed) and drop the client."""
        if cls._instance is not None:
            if not cls._flushed:
                cls._instance.shutdown()
            cls._instance = None
            cls._flushed = False
            logger.debug("AutoHeal instance reset")

    @classmethod
    def clear_cache(cls) -> None:
        if cls._instance is not None:
            cls._instance.clear_cache()

    @classmethod
    def get_metrics(cls) -> Optional[CacheMetrics]:
        """Cache metrics of the shared client, None when not initialized."""
        if cls._instance is None:
            return None
        return cls._instance.get_cache_metrics()

    @classmethod
    def get_cache_size(cls) -> int:
        if cls._instance is None:
            return 0
        return cls._instance.get_autoheal().get_cache_size()

    @classmethod
    def metrics_snapshot(cls) -> Optional[Dict[str, Any]]:
        """
        Plain-dict view of the cache metrics plus the entry count.

        Built from the individual counters; CacheMetrics.to_dict() takes its
        own lock twice.
        """
        metrics = cls.get_metrics()
        if metrics is None:
            return None
        return {
            "hits": metrics.hits,
            "misses": metrics.misses,
            "evictions": metrics.evictions,
            "hit_rate": metrics.get_hit_rate(),
            "total_entries": cls.get_cache_size(),
        }

    @classmethod
    def generate_reports(
        cls,
        output_dir: Union[str, Path] = DEFAULT_REPORTS_DIR,
    ) -> List[Path]:
        """
        Shut the client down with its reports written to output_dir.

        Returns:
            Written report paths (empty when there is no client)
        """
        if cls._instance is None:
            return []

        client = cls._instance
        client.output_directory = str(output_dir)
        client.shutdown()
        cls._flushed = True

        run_id = client.reporter.test_run_id
        paths = [Path(output_dir) / f"{run_id}_AutoHeal_Report.{suffix}" for suffix in REPORT_SUFFIXES]
        return [path for path in paths if path.exists()]


__all__ = [
    "AutoHealHelper",
    "DEFAULT_REPORTS_DIR",
    "reports_dir",
    "simple_config",
]
