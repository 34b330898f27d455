"""
Exception hierarchy for the localization engine.

Only `PackWriteError` ever reaches the host application; every other error is
recovered inside the engine (fallback pack, placeholder text, or a no-op).
"""

from pathlib import Path
from typing import Union


class LocalizationError(Exception):
    """Base class for all localization errors."""


class CultureNotFoundError(LocalizationError):
    """The identifier is not a locale known to the host's locale database."""

    def __init__(self, language_id: str) -> None:
        super().__init__(f"Culture '{language_id}' is not a recognized locale.")
        self.language_id = language_id


class PackMissingError(LocalizationError):
    """A language pack file does not exist."""

    def __init__(self, path: Union[str, Path]) -> None:
        super().__init__(f"Language pack not found: {path}")
        self.path = Path(path)


class PackMalformedError(LocalizationError):
    """A language pack file could not be read or parsed."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        super().__init__(f"Language pack {path} is malformed: {reason}")
        self.path = Path(path)
        self.reason = reason


class PackWriteError(LocalizationError):
    """A language pack file could not be written."""
