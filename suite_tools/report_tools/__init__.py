"""Allure reporting helpers."""

from .allure_utils import (
    allure_step,
    attach_cache_metrics,
    attach_healing_reports,
    attach_html,
    attach_json,
    attach_text,
    generate_allure_report,
)

__all__ = [
    "allure_step",
    "attach_cache_metrics",
    "attach_healing_reports",
    "attach_html",
    "attach_json",
    "attach_text",
    "generate_allure_report",
]
