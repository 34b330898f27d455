"""
Host-facing entry point of the localization engine.

Typical use from the application's startup code:

    localizer = Localizer()
    language = localizer.start(ConfigManager())
    ...
    localizer.apply(main_window, "frmMain", language)
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from PyQt6.QtCore import QLocale
from PyQt6.QtWidgets import QWidget

from formlocalizer import constants
from formlocalizer.utils.config import ConfigManager
from .coverage import CoverageReport, compare_documents
from .culture import normalize_language_id
from .engine import LocalizationContext, LocalizationEngine
from .registry import LanguageEntry, LanguageRegistry, get_registry
from .store import ResourceStore

logger = logging.getLogger("FormLocalizer.Localizer")


class Localizer:
    """
    Discovers language packs and translates windows with them.

    Without an explicit directory the process-wide registry and the shipped
    `i18n` directory are used.
    """

    def __init__(
        self,
        i18n_dir: Optional[Union[str, Path]] = None,
        windows: Optional[bool] = None,
    ) -> None:
        self.store = ResourceStore()
        if i18n_dir is None:
            self.registry = get_registry()
        else:
            self.registry = LanguageRegistry(i18n_dir, self.store)
        self.engine = LocalizationEngine(self.registry.i18n_dir, self.store, windows=windows)

    @property
    def i18n_dir(self) -> Path:
        return self.registry.i18n_dir

    def discover(self) -> List[LanguageEntry]:
        """Scans the pack directory and returns the installed languages."""
        return self.registry.scan()

    def resolve_active(self, saved_preference: Optional[str], system_locale: Optional[str] = None) -> str:
        """
        The language to activate. `system_locale` defaults to Qt's system locale.
        """
        if system_locale is None:
            system_locale = normalize_language_id(QLocale.system().name())
        return self.registry.resolve_active(saved_preference, system_locale)

    def apply(self, window: QWidget, form_id: str, language_id: str) -> Optional[LocalizationContext]:
        """Translates `window` as form `form_id`. Never raises for missing translations."""
        return self.engine.apply(window, form_id, language_id)

    def extract(self, window: QWidget, form_id: str, language_id: str) -> Path:
        """
        Writes the current text of `window` into the pack of `language_id` as form
        `form_id`, replacing any strings previously recorded for that form.

        Raises:
            PackWriteError: If the pack cannot be written.
        """
        return self.engine.save_form(window, form_id, language_id)

    def get_author(self, language_id: str) -> List[str]:
        return self.registry.get_author(language_id)

    def audit(self, language_id: str) -> CoverageReport:
        """Compares the pack of `language_id` with the base pack."""
        base = self.store.load(self.engine.pack_path(constants.i18n.DEFAULT_LANGUAGE))
        pack = self.store.load(self.engine.pack_path(language_id))
        return compare_documents(language_id, base, pack)

    def start(self, config_manager: ConfigManager, system_locale: Optional[str] = None) -> str:
        """
        Startup sequence: discover packs, pick the active language from the saved
        preference and the system locale, and persist the choice.
        """
        self.discover()
        config: Dict[str, Any] = config_manager.load()
        language_id = self.resolve_active(config.get("ui_language"), system_locale)
        if config.get("ui_language") != language_id:
            config["ui_language"] = language_id
            config_manager.save(config)
        return language_id
