"""
Core utilities.

This module provides:
- Shared constants (wrap widths, fuzzy threshold, ANSI codes)
- Configuration and logging
"""

from pertable.core import constants
from pertable.core import config
from pertable.core import logging_config
from pertable.core.config import DisplayConfig, load_config, load_display_config

__all__ = [
    # Modules
    "constants",
    "config",
    "logging_config",
    # Configuration
    "DisplayConfig",
    "load_config",
    "load_display_config",
]
