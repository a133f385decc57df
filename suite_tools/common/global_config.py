"""
================================================================================
Global Configuration for the Sauce Demo Suite
================================================================================

Centralized configuration and logging setup shared by the runner, the pytest
configuration and the UI framework.

Features:
    - YAML-based configuration loading (config/config.yaml + config/{ENV}.yaml)
    - Environment variable overrides (UI__BASE_URL overrides ui.base_url)
    - Centralized Loguru logging configuration

Author: Automation Team
License: MIT
================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import yaml
from loguru import logger

# Global configuration storage
_config: Dict[str, Any] = {}
_logger_initialized: bool = False

PROJECT_ROOT = Path(__file__).parent.parent.parent


def init_logger(level: str = None, format_str: str = None) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_str: Custom log format string. Defaults to config value.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    _ensure_config_loaded()

    log_level = level or get_config("logging.level", "INFO")
    log_format = format_str or get_config(
        "logging.format",
        "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    )

    logger.remove()
    logger.add(
        sys.stderr,
        level=str(log_level).upper(),
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    log_file = get_config("logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=str(log_level).upper(),
            format=log_format.replace("{level: <8}", "{level}"),
            rotation=get_config("logging.rotation", "10 MB"),
            retention=get_config("logging.retention", "7 days"),
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def get_logger():
    """
    Returns the configured Loguru logger instance.

    Ensures the logger is initialized before returning.
    """
    if not _logger_initialized:
        init_logger()
    return logger


def _ensure_config_loaded() -> None:
    global _config
    if not _config:
        _load_config()


def _load_config() -> None:
    """
    Loads configuration from YAML files and environment variables.

    Configuration loading order:
        1. Built-in defaults
        2. Default configuration file (config/config.yaml)
        3. Environment-specific configuration (config/{ENV}.yaml)
        4. Environment variables (override YAML settings)
    """
    global _config

    possible_config_dirs = [
        Path("config"),
        PROJECT_ROOT / "config",
    ]

    config_dir = None
    for dir_path in possible_config_dirs:
        if dir_path.exists():
            config_dir = dir_path
            break

    _config = _get_defaults()

    if not config_dir:
        logger.warning("No configuration directory found. Using defaults.")
        _apply_env_overrides()
        return

    default_config_path = config_dir / "config.yaml"
    if default_config_path.exists():
        with open(default_config_path, "r", encoding="utf-8") as f:
            _config = _deep_merge(_config, yaml.safe_load(f) or {})
        logger.debug(f"Loaded configuration from {default_config_path}")

    env = os.getenv("ENVIRONMENT", os.getenv("ENV", "dev"))
    env_config_path = config_dir / f"{env}.yaml"
    if env_config_path.exists():
        with open(env_config_path, "r", encoding="utf-8") as f:
            env_config = yaml.safe_load(f) or {}
        _config = _deep_merge(_config, env_config)
        logger.debug(f"Merged environment config: {env_config_path}")

    _apply_env_overrides()


def _get_defaults() -> Dict[str, Any]:
    """
    Returns default configuration values.
    """
    return {
        "logging": {
            "level": "INFO",
            "format": "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
        },
        "ui": {
            "base_url": "https://www.saucedemo.com",
            "browser": "chromium",
            "headless": True,
            "slow_mo": 0,
        },
        "autoheal": {
            "reports_dir": "autoheal-reports",
            "use_env_config": True,
        },
    }


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merges two dictionaries, with override taking precedence.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _apply_env_overrides() -> None:
    """
    Applies environment variable overrides to the configuration.

    Environment variable naming convention:
        - Use double underscore to separate nested keys
        - Example: LOGGING__LEVEL=DEBUG overrides logging.level
    """
    for key, value in os.environ.items():
        if "__" in key and not key.startswith("_"):
            parts = [p.lower() for p in key.split("__")]
            _set_nested(_config, parts, _parse_scalar(value))


def _parse_scalar(value: str) -> Any:
    """Convert common string literals from the environment."""
    lowered = value.lower()
    if lowered in ("true", "yes", "on"):
        return True
    if lowered in ("false", "no", "off"):
        return False
    try:
        return int(value)
    except ValueError:
        return value


def _set_nested(d: Dict, keys: list, value: Any) -> None:
    """
    Sets a nested dictionary value using a list of keys.
    """
    for key in keys[:-1]:
        existing = d.get(key)
        if not isinstance(existing, dict):
            existing = {}
            d[key] = existing
        d = existing
    d[keys[-1]] = value


def get_config(key: str, default: Any = None) -> Any:
    """
    Retrieves a configuration value using a dot-separated key path.

    Args:
        key: Dot-separated key path (e.g., "logging.level", "ui.base_url").
        default: Default value to return if key is not found.

    Returns:
        The configuration value, or the default if not found.

    Examples:
        >>> get_config("ui.base_url")
        'https://www.saucedemo.com'
        >>> get_config("ui.slow_mo", 0)
        0
    """
    _ensure_config_loaded()

    value = _config
    for k in key.split("."):
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default

    return value


def set_config(key: str, value: Any) -> None:
    """
    Sets a configuration value at runtime.

    Args:
        key: Dot-separated key path.
        value: Value to set.
    """
    _ensure_config_loaded()
    _set_nested(_config, key.split("."), value)


def reload_config() -> None:
    """
    Reloads the configuration from files.
    """
    global _config, _logger_initialized
    _config = {}
    _logger_initialized = False
    _load_config()
    init_logger()
    logger.info("Configuration reloaded.")
