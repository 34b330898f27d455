"""
Validates language pack identifiers against Qt's locale database.
"""

import logging
import re

from PyQt6.QtCore import QLocale

from .errors import CultureNotFoundError

logger = logging.getLogger("FormLocalizer.Culture")

# language[-Script][-REGION][-variant...], with '_' accepted as separator
_TAG_RE = re.compile(r"^[A-Za-z]{2,3}(?:[-_][A-Za-z0-9]{2,8})*$")
_REGION_RE = re.compile(r"^(?:[A-Za-z]{2}|[0-9]{3})$")


def normalize_language_id(language_id: str) -> str:
    """Qt spells locales 'en_US'; packs are named 'en-US'."""
    return language_id.strip().replace("_", "-")


def resolve_culture(language_id: str) -> str:
    """
    Returns a human-readable display name for `language_id`, e.g. "English (United States)".

    The primary subtag must be a language code Qt knows, and a region subtag, when
    present, must be a territory Qt knows. Script and variant subtags are accepted
    but do not appear in the display name.

    Raises:
        CultureNotFoundError: If the identifier is malformed or unknown to QLocale.
    """
    if not isinstance(language_id, str) or not _TAG_RE.match(language_id.strip()):
        raise CultureNotFoundError(str(language_id))

    subtags = normalize_language_id(language_id).split("-")
    language = QLocale.codeToLanguage(subtags[0].lower())
    if language in (QLocale.Language.AnyLanguage, QLocale.Language.C):
        raise CultureNotFoundError(language_id)

    display_name = QLocale.languageToString(language)

    region = next((s for s in subtags[1:] if _REGION_RE.match(s)), None)
    if region is not None:
        territory = QLocale.codeToTerritory(region.upper())
        if territory == QLocale.Country.AnyTerritory:
            raise CultureNotFoundError(language_id)
        display_name = f"{display_name} ({QLocale.territoryToString(territory)})"

    logger.debug("Resolved culture '%s' -> '%s'", language_id, display_name)
    return display_name
