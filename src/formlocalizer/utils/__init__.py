"""
Utilities submodule for FormLocalizer.

Provides helper functions and settings management.
"""

from .config import ConfigManager, ConfigError
from .helpers import setup_logging, get_app_data_path, get_i18n_path, is_windows_platform

__all__ = ["ConfigManager", "ConfigError", "setup_logging", "get_app_data_path", "get_i18n_path", "is_windows_platform"]
