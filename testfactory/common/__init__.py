"""
================================================================================
testfactory Common Utilities
================================================================================

Shared configuration management and logging setup.

Usage:
    from testfactory.common import get_config, init_logger

    init_logger()
    base_url = get_config("ui.base_url", "http://localhost:3000")

================================================================================
"""

from .global_config import (
    GlobalConfig,
    get_config,
    get_logger,
    init_logger,
    set_config,
)

__all__ = [
    "GlobalConfig",
    "get_config",
    "set_config",
    "init_logger",
    "get_logger",
]
