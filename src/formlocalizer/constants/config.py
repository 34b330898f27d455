"""
Constants for application settings defaults and constraints.
"""
from typing import Final, Dict, Any, List

class ConfigMessages:
    """Log message templates for settings validation."""
    INVALID_STRING: Final[str] = "Invalid {key} '{value}', resetting to default '{default}'"
    INVALID_CHOICE: Final[str] = "Invalid {key} '{value}', resetting to default '{default}'. Valid choices: {choices}"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for attr_name in dir(self):
            if not attr_name.startswith('_') and attr_name.isupper():
                value = getattr(self, attr_name)
                if not isinstance(value, str) or not value:
                    raise ValueError(f"ConfigMessages.{attr_name} must be a non-empty string.")


class ConfigConstants:
    """Defines default values and constraints for all persisted settings."""
    DEFAULT_LOG_LEVEL: Final[str] = "INFO"
    VALID_LOG_LEVELS: Final[List[str]] = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    CONFIG_FILENAME: Final[str] = "FormLocalizer_Config.json"

    DEFAULT_CONFIG: Final[Dict[str, Any]] = {
        "ui_language": None,
        "i18n_dir": None,
        "log_level": DEFAULT_LOG_LEVEL,
    }

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not self.CONFIG_FILENAME:
            raise ValueError("CONFIG_FILENAME must not be empty")
        if self.DEFAULT_LOG_LEVEL not in self.VALID_LOG_LEVELS:
            raise ValueError(f"DEFAULT_LOG_LEVEL must be one of {self.VALID_LOG_LEVELS}")

        actual_keys = set(self.DEFAULT_CONFIG.keys())
        expected_keys = {"ui_language", "i18n_dir", "log_level"}
        if actual_keys != expected_keys:
            missing = expected_keys - actual_keys
            extra = actual_keys - expected_keys
            raise ValueError(f"DEFAULT_CONFIG key mismatch. Missing: {missing or 'None'}. Extra: {extra or 'None'}.")


class ConfigurationConstants:
    """Container for configuration-related constant groups."""
    def __init__(self) -> None:
        self.defaults = ConfigConstants()
        self.messages = ConfigMessages()

# Singleton instance for easy access
config = ConfigurationConstants()
