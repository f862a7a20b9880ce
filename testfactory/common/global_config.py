"""
================================================================================
Global Configuration
================================================================================

Configuration and logging setup shared by every testfactory module.

Features:
    - Singleton configuration loaded once per process
    - YAML configuration file (config/testfactory.yaml)
    - Environment variable overrides
    - Centralized Loguru logging configuration

Author: Automation Team
License: MIT
================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


CONFIG_FILE_NAME = "testfactory.yaml"

# Searched in order; the first existing file wins
CONFIG_SEARCH_PATHS = [
    Path("config") / CONFIG_FILE_NAME,
    Path(__file__).parent.parent.parent / "config" / CONFIG_FILE_NAME,
]

# Environment variable -> dot-notation config key
ENV_MAPPING: Dict[str, str] = {
    "UI_BASE_URL": "ui.base_url",
    "UI_TIMEOUT": "ui.wait_timeout",
    "LOG_LEVEL": "logging.level",
    "LOG_FILE": "logging.file",
}

DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def _defaults() -> Dict[str, Any]:
    return {
        "logging": {
            "level": "INFO",
        },
        "ui": {
            "base_url": "http://localhost:3000",
            "expected_element_timeout": 30,
            "wait_timeout": 30,
            "wait_interval": 0.5,
        },
    }


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """Deep merges two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class GlobalConfig:
    """
    Singleton holding the testfactory configuration.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables listed in ENV_MAPPING
        2. YAML configuration file
        3. Built-in defaults
    """

    _instance: Optional["GlobalConfig"] = None

    def __new__(cls, config_path: Optional[Path] = None) -> "GlobalConfig":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None):
        if self._initialized:
            return
        self._config_path = config_path
        self._config: Dict[str, Any] = {}
        self._load_config()
        self._initialized = True

    def _find_config_file(self) -> Optional[Path]:
        if self._config_path is not None:
            return Path(self._config_path)
        for path in CONFIG_SEARCH_PATHS:
            if path.exists():
                return path
        return None

    def _load_config(self) -> None:
        self._config = _defaults()

        path = self._find_config_file()
        if path is None or not path.exists():
            logger.debug("No testfactory configuration file found. Using defaults.")
        else:
            with open(path, "r", encoding="utf-8") as f:
                file_config = yaml.safe_load(f) or {}
            self._config = _deep_merge(self._config, file_config)
            logger.debug(f"Loaded configuration from {path}")

        for env_key, config_key in ENV_MAPPING.items():
            if env_key in os.environ:
                self.set(config_key, os.environ[env_key])

    def get(self, key: str, default: Any = None) -> Any:
        """
        Retrieves a configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "ui.base_url")
            default: Default value if key is not found

        Returns:
            Configuration value or default
        """
        value = self._config
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        """Sets a configuration value using dot notation."""
        keys = key.split(".")
        current = self._config
        for k in keys[:-1]:
            current = current.setdefault(k, {})
        current[keys[-1]] = value

    def reload(self) -> None:
        """Reload configuration from file and environment."""
        self._load_config()
        logger.info("testfactory configuration reloaded")

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton so the next access reloads everything."""
        cls._instance = None


def get_config(key: str, default: Any = None) -> Any:
    """
    Convenience function to get a configuration value.

    Example:
        base_url = get_config("ui.base_url", "http://localhost:3000")
    """
    return GlobalConfig().get(key, default)


def set_config(key: str, value: Any) -> None:
    """Convenience function to set a configuration value."""
    GlobalConfig().set(key, value)


# ============================================================
# Logging Setup
# ============================================================

_logger_initialized = False


def init_logger(
    level: str = None,
    format_string: str = None,
    log_file: str = None
) -> None:
    """
    Initializes the loguru logger with standard settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_string: Log format string. Uses default if not provided.
        log_file: Optional file path to write logs to.

    Example:
        init_logger()
        init_logger(level="DEBUG", log_file="logs/testfactory.log")
    """
    global _logger_initialized

    if _logger_initialized:
        return

    logger.remove()

    level = (level or get_config("logging.level", "INFO")).upper()
    format_string = format_string or get_config("logging.format", DEFAULT_LOG_FORMAT)

    logger.add(
        sys.stderr,
        format=format_string,
        level=level,
        colorize=True,
    )

    log_file = log_file or get_config("logging.file")
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format=format_string,
            level=level,
            rotation=get_config("logging.rotation", "10 MB"),
            retention=get_config("logging.retention", "7 days"),
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {level}")


def get_logger():
    """Returns the loguru logger, initializing it on first use."""
    if not _logger_initialized:
        init_logger()
    return logger
