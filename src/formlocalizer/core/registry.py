"""
Discovery of installed language packs and selection of the active language.

The registry is process-wide: it is filled once at startup by `scan` and only
read afterwards. Use `get_registry()` to obtain the shared instance.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

from formlocalizer import constants
from formlocalizer.utils.helpers import get_i18n_path
from .culture import normalize_language_id, resolve_culture
from .errors import CultureNotFoundError, PackMalformedError, PackMissingError
from .store import ResourceStore

logger = logging.getLogger("FormLocalizer.Registry")
_registry: Optional["LanguageRegistry"] = None


@dataclass(frozen=True)
class LanguageEntry:
    """One installed language pack."""
    id: str
    display_name: str


def get_registry(i18n_dir: Optional[Union[str, Path]] = None) -> "LanguageRegistry":
    """
    Initializes (if needed) and returns the global registry singleton.
    """
    global _registry
    if _registry is None:
        if i18n_dir is None:
            i18n_dir = get_i18n_path()
        logger.debug("First call; initializing language registry for %s.", i18n_dir)
        _registry = LanguageRegistry(i18n_dir)
    elif i18n_dir is not None and Path(i18n_dir) != _registry.i18n_dir:
        logger.warning("Language registry already uses %s; ignoring %s.", _registry.i18n_dir, i18n_dir)
    return _registry


class LanguageRegistry:
    """
    Installed languages, keyed by the pack's file name.
    """

    def __init__(self, i18n_dir: Union[str, Path], store: Optional[ResourceStore] = None) -> None:
        self.i18n_dir = Path(i18n_dir)
        self.store = store or ResourceStore()
        self.installed: Dict[str, LanguageEntry] = {}
        # casefolded, '-'-separated id -> canonical id
        self._lookup: Dict[str, str] = {}

    def scan(self) -> List[LanguageEntry]:
        """
        Registers every pack file directly inside the pack directory.

        A file whose name is not a known locale is still registered, under an
        "Unknown Language (...)" display name.
        """
        self.installed.clear()
        self._lookup.clear()
        if not self.i18n_dir.is_dir():
            logger.error("Language pack directory not found: %s", self.i18n_dir)
            return []

        pack_files = sorted(
            p for p in self.i18n_dir.glob(f"*{constants.i18n.PACK_EXTENSION}") if p.is_file()
        )
        for pack in pack_files:
            language_id = pack.stem
            lookup_key = self._lookup_key(language_id)
            if lookup_key in self._lookup:
                logger.warning("Skipping %s: language '%s' is already registered.", pack.name, self._lookup[lookup_key])
                continue

            try:
                display_name = resolve_culture(language_id)
            except CultureNotFoundError:
                display_name = constants.i18n.UNKNOWN_LANGUAGE_TEMPLATE.format(language_id=language_id)
                logger.warning("Pack %s is not named after a known locale.", pack.name)
            else:
                logger.info("i18n %s by %s", display_name, self.get_author(language_id)[0])

            self.installed[language_id] = LanguageEntry(language_id, display_name)
            self._lookup[lookup_key] = language_id

        logger.info("Discovered %d language pack(s) in %s", len(self.installed), self.i18n_dir)
        return list(self.installed.values())

    @staticmethod
    def _lookup_key(language_id: str) -> str:
        return normalize_language_id(language_id).casefold()

    def find(self, language_id: Optional[str]) -> Optional[str]:
        """Canonical id of an installed language, matched case-insensitively."""
        if not language_id or not language_id.strip():
            return None
        return self._lookup.get(self._lookup_key(language_id))

    def __contains__(self, language_id: object) -> bool:
        return isinstance(language_id, str) and self.find(language_id) is not None

    def display_name(self, language_id: str) -> Optional[str]:
        canonical = self.find(language_id)
        return self.installed[canonical].display_name if canonical else None

    def resolve_active(self, saved_preference: Optional[str], system_locale: Optional[str]) -> str:
        """
        Picks the language to activate: the saved preference if installed, else the
        system locale if installed, else the base language.
        """
        for source, candidate in (("saved preference", saved_preference), ("system locale", system_locale)):
            canonical = self.find(candidate)
            if canonical:
                logger.info("Active language '%s' (from %s).", canonical, source)
                return canonical
        logger.info("Neither '%s' nor '%s' is installed; using '%s'.",
                    saved_preference, system_locale, constants.i18n.DEFAULT_LANGUAGE)
        return constants.i18n.DEFAULT_LANGUAGE

    def get_author(self, language_id: str) -> List[str]:
        """
        `[name, profile, email]` of the pack's author, or a three-line placeholder
        describing why the pack could not be read.
        """
        path = self.i18n_dir / constants.i18n.pack_filename(Path(language_id).stem)
        try:
            document = self.store.load_strict(path)
        except PackMissingError:
            return constants.i18n.author_placeholder(broken=False)
        except PackMalformedError as e:
            logger.warning("%s", e)
            return constants.i18n.author_placeholder(broken=True)

        if not document.has_forms:
            return constants.i18n.author_placeholder(broken=True)
        return document.author()
