"""
Settings management for FormLocalizer.

This module provides a ConfigManager for loading, validating, and saving the small
set of persisted settings the localizer consumes (selected UI language, pack
directory override, log level). Writes are atomic and invalid values are reset
to their defaults with a warning.
"""

import json
import logging
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .helpers import get_app_data_path
from formlocalizer import constants


class ConfigError(Exception):
    """Custom exception for configuration-related errors, such as I/O or permission issues."""


class ConfigManager:
    """
    Manages loading, saving, and validation of FormLocalizer's settings file.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None) -> None:
        """
        Initializes the ConfigManager. The app data directory is only touched
        when no explicit path is given.
        """
        if config_path is None:
            config_path = get_app_data_path() / constants.config.defaults.CONFIG_FILENAME
        self.config_path = Path(config_path)
        self.logger = logging.getLogger("FormLocalizer.Config")
        self._last_config: Optional[Dict[str, Any]] = None


    def _validate_optional_string(self, key: str, value: Any) -> Optional[str]:
        """Accepts None or a non-empty string."""
        if value is None or (isinstance(value, str) and value.strip()):
            return value.strip() if isinstance(value, str) else None
        self.logger.warning(constants.config.messages.INVALID_STRING.format(key=key, value=value, default=None))
        return None


    def _validate_choice(self, key: str, value: Any, default: str, choices: List[str]) -> str:
        """Validates a value is one of the allowed choices (case-insensitive)."""
        if isinstance(value, str):
            for choice in choices:
                if choice.lower() == value.lower():
                    return choice
        self.logger.warning(constants.config.messages.INVALID_CHOICE.format(key=key, value=value, default=default, choices=choices))
        return default


    def _validate_config(self, loaded_config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validates the configuration, merges it with defaults for missing keys,
        and sanitizes all values.
        """
        default_ref = constants.config.defaults.DEFAULT_CONFIG
        validated = default_ref.copy()
        validated.update(loaded_config)

        unknown_keys = set(loaded_config.keys()) - set(default_ref.keys())
        if unknown_keys:
            self.logger.warning("Ignoring unknown config fields: %s", ", ".join(sorted(unknown_keys)))

        validated["ui_language"] = self._validate_optional_string("ui_language", validated.get("ui_language"))
        validated["i18n_dir"] = self._validate_optional_string("i18n_dir", validated.get("i18n_dir"))
        validated["log_level"] = self._validate_choice(
            "log_level", validated.get("log_level"), default_ref["log_level"],
            constants.config.defaults.VALID_LOG_LEVELS,
        )

        return {key: validated[key] for key in default_ref}


    def load(self) -> Dict[str, Any]:
        """Loads and validates the configuration from the file."""
        if not self.config_path.exists():
            self.logger.info("Configuration file not found. Creating with default settings.")
            return self.reset_to_defaults()
        try:
            with self.config_path.open("r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError:
            self.logger.error("Configuration file is corrupt. Backing it up and using defaults.")
            try:
                corrupt_path = self.config_path.with_name(f"{self.config_path.name}.corrupt")
                shutil.move(self.config_path, corrupt_path)
            except OSError:
                self.logger.exception("Failed to back up corrupt config file.")
            return self.reset_to_defaults()
        except OSError as e:
            msg = f"OS error reading config file {self.config_path}: {e}"
            self.logger.critical(msg)
            raise ConfigError(msg) from e

        if not isinstance(config, dict):
            self.logger.error("Configuration root is not an object. Using defaults.")
            return self.reset_to_defaults()

        validated_config = self._validate_config(config)
        self._last_config = validated_config.copy()
        return validated_config


    def save(self, config: Dict[str, Any]) -> None:
        """Atomically saves the provided configuration to the file."""
        validated_config = self._validate_config(config)

        if self._last_config == validated_config and self.config_path.exists():
            self.logger.debug("Skipping save, configuration is unchanged.")
            return

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", delete=False, dir=self.config_path.parent, encoding="utf-8"
            ) as temp_f:
                json.dump(validated_config, temp_f, indent=4)
                temp_path = temp_f.name
            shutil.move(temp_path, self.config_path)
            self._last_config = validated_config.copy()
            self.logger.debug("Configuration saved successfully to %s", self.config_path)
        except OSError as e:
            msg = f"Failed to save configuration to {self.config_path}: {e}"
            self.logger.error(msg)
            raise ConfigError(msg) from e


    def reset_to_defaults(self) -> Dict[str, Any]:
        """Resets the configuration to factory defaults and saves it."""
        self.logger.info("Resetting configuration to default values.")
        defaults = constants.config.defaults.DEFAULT_CONFIG.copy()
        self.save(defaults)
        return defaults
