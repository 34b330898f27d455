"""
Core submodule for FormLocalizer.

Contains the localization engine: pack discovery, the pack model and store,
the widget-tree walker and the apply/extract algorithms.
"""

from formlocalizer.core.document import FontSpec, ResourceDocument
from formlocalizer.core.engine import LocalizationContext, LocalizationEngine
from formlocalizer.core.errors import (
    CultureNotFoundError, LocalizationError, PackMalformedError, PackMissingError, PackWriteError,
)
from formlocalizer.core.localizer import Localizer
from formlocalizer.core.registry import LanguageEntry, LanguageRegistry, get_registry
from formlocalizer.core.store import ResourceStore

__all__ = [
    "CultureNotFoundError",
    "FontSpec",
    "LanguageEntry",
    "LanguageRegistry",
    "LocalizationContext",
    "LocalizationEngine",
    "LocalizationError",
    "Localizer",
    "PackMalformedError",
    "PackMissingError",
    "PackWriteError",
    "ResourceDocument",
    "ResourceStore",
    "get_registry",
]
