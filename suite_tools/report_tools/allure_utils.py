"""
================================================================================
Allure Report Utilities
================================================================================

Allure attachment helpers for self-healing runs and Allure HTML generation.

Features:
- JSON / text / HTML attachments
- Cache metrics attachments
- Healing report files attached at session end
- allure-results -> HTML report generation

================================================================================
"""

import json
import subprocess
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import allure
from loguru import logger


REPORT_ATTACHMENT_TYPES = {
    ".html": allure.attachment_type.HTML,
    ".json": allure.attachment_type.JSON,
    ".txt": allure.attachment_type.TEXT,
}


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_json(data: Any, name: str = "Data"):
    """
    Attach JSON data to Allure report.

    Args:
        data: Data to attach (will be JSON serialized)
        name: Attachment name
    """
    allure.attach(
        json.dumps(data, indent=2, default=str),
        name=name,
        attachment_type=allure.attachment_type.JSON,
    )


def attach_text(text: str, name: str = "Text"):
    allure.attach(text, name=name, attachment_type=allure.attachment_type.TEXT)


def attach_html(html: str, name: str = "HTML"):
    allure.attach(html, name=name, attachment_type=allure.attachment_type.HTML)


def attach_cache_metrics(metrics: Dict[str, Any], name: str = "📊 Cache Metrics"):
    """
    Attach selector cache metrics with a readable hit rate.

    Args:
        metrics: AutoHealHelper.metrics_snapshot() output
        name: Attachment name
    """
    data = dict(metrics)
    data["hit_rate_percent"] = f"{data.get('hit_rate', 0.0) * 100:.1f}%"
    attach_json(data, name=name)


def attach_healing_reports(paths: Iterable[Path]):
    """
    Attach written healing report files (HTML, JSON and text).

    Args:
        paths: Report paths returned by AutoHealHelper.generate_reports()
    """
    for path in paths:
        path = Path(path)
        if not path.exists():
            logger.warning(f"Healing report missing: {path}")
            continue
        attachment_type = REPORT_ATTACHMENT_TYPES.get(path.suffix, allure.attachment_type.TEXT)
        allure.attach.file(str(path), name=path.name, attachment_type=attachment_type)


# ================================================================================
# Decorators
# ================================================================================

def allure_step(step_name: str):
    """
    Decorator to wrap function as Allure step.

    Args:
        step_name: Step name for report
    """
    def decorator(func):
        async def async_wrapper(*args, **kwargs):
            with allure.step(step_name):
                return await func(*args, **kwargs)

        def sync_wrapper(*args, **kwargs):
            with allure.step(step_name):
                return func(*args, **kwargs)

        import asyncio
        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


# ================================================================================
# Report Generation
# ================================================================================

def generate_allure_report(
    results_dir: str,
    output_dir: Optional[str] = None,
) -> bool:
    """
    Generate Allure HTML report from results.

    Args:
        results_dir: Path to allure-results directory
        output_dir: Report directory (sibling 'allure-report' when None)

    Returns:
        True if successful
    """
    results_path = Path(results_dir)
    report_path = Path(output_dir) if output_dir else results_path.parent / "allure-report"

    cmd = ["allure", "generate", str(results_path), "-o", str(report_path), "--clean"]
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except FileNotFoundError:
        logger.error("Allure command not found. Install allure-commandline.")
        return False

    if result.returncode != 0:
        logger.error(f"Report generation failed: {result.stderr}")
        return False

    logger.info(f"Report generated at {report_path}")
    return True


__all__ = [
    "attach_json",
    "attach_text",
    "attach_html",
    "attach_cache_metrics",
    "attach_healing_reports",
    "allure_step",
    "generate_allure_report",
]
