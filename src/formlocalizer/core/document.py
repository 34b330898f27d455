"""
In-memory model of a language pack.

A pack carries author metadata, two UI fonts (one for the Windows family, one for
every other platform) and, per form, a mapping from element identifier to the
display string for that element.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from PyQt6.QtGui import QFont

from formlocalizer import constants

logger = logging.getLogger("FormLocalizer.Document")

FormStrings = Dict[str, str]

_FONT_RE = re.compile(
    r"^\s*(?P<family>[^,]+?)\s*,\s*(?P<size>\d+(?:\.\d+)?)\s*(?P<unit>pt|px)?\s*"
    r"(?:,\s*style\s*=\s*(?P<style>.+?))?\s*$",
    re.IGNORECASE,
)
_FONT_STYLES = ("Bold", "Italic", "Underline", "Strikeout")


@dataclass(frozen=True)
class FontSpec:
    """A UI font as stored in a pack, e.g. "Segoe UI, 9pt, style=Bold"."""
    family: str
    size: float
    unit: str = "pt"
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikeout: bool = False

    @classmethod
    def parse(cls, value: Any) -> Optional["FontSpec"]:
        """Parses the pack representation. Returns None for anything unparsable."""
        if not isinstance(value, str):
            return None
        match = _FONT_RE.match(value)
        if not match:
            logger.warning("Ignoring unparsable font specification '%s'", value)
            return None
        styles = {s.strip().lower() for s in (match.group("style") or "").split(",") if s.strip()}
        size = float(match.group("size"))
        if size <= 0:
            logger.warning("Ignoring font specification with non-positive size '%s'", value)
            return None
        return cls(
            family=match.group("family"),
            size=size,
            unit=(match.group("unit") or "pt").lower(),
            bold="bold" in styles,
            italic="italic" in styles,
            underline="underline" in styles,
            strikeout="strikeout" in styles,
        )

    def format(self) -> str:
        size = f"{self.size:g}"
        text = f"{self.family}, {size}{self.unit}"
        flags = [name for name, on in zip(_FONT_STYLES, (self.bold, self.italic, self.underline, self.strikeout)) if on]
        if flags:
            text += ", style=" + ", ".join(flags)
        return text

    def to_qfont(self) -> QFont:
        font = QFont(self.family)
        if self.unit == "px":
            font.setPixelSize(max(1, round(self.size)))
        else:
            font.setPointSizeF(self.size)
        font.setBold(self.bold)
        font.setItalic(self.italic)
        font.setUnderline(self.underline)
        font.setStrikeOut(self.strikeout)
        return font


@dataclass
class ResourceDocument:
    """A language pack: author metadata, UI fonts and per-form strings."""
    author_name: str = ""
    author_profile: str = ""
    author_email: str = ""
    font_primary: Optional[FontSpec] = None
    font_secondary: Optional[FontSpec] = None
    forms: Dict[str, FormStrings] = field(default_factory=dict)
    # False when the source object carried no "Forms" field at all.
    has_forms: bool = True

    def form(self, form_id: str) -> Optional[FormStrings]:
        """Returns the strings recorded for `form_id`, or None."""
        return self.forms.get(form_id)

    def font_for_platform(self, windows: bool) -> Optional[FontSpec]:
        return self.font_primary if windows else self.font_secondary

    def author(self) -> List[str]:
        return [self.author_name, self.author_profile, self.author_email]

    def merge_form(self, form_id: str, strings: FormStrings) -> None:
        """Inserts or wholesale-replaces the strings of one form."""
        if form_id in self.forms:
            logger.debug("Replacing %d existing strings of form '%s'", len(self.forms[form_id]), form_id)
        self.forms[form_id] = dict(sorted(strings.items()))
        self.has_forms = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResourceDocument":
        """
        Builds a document from a decoded pack object.

        Schema checking is deliberately loose: missing metadata becomes an empty
        string, a missing forms field means "no translations", and entries of the
        wrong shape are dropped with a warning.
        """
        keys = constants.i18n.keys
        raw_forms = data.get(keys.FORMS)
        forms: Dict[str, FormStrings] = {}
        if isinstance(raw_forms, dict):
            for form_id, raw_strings in raw_forms.items():
                if not isinstance(raw_strings, dict):
                    logger.warning("Dropping form '%s': expected an object, got %s", form_id, type(raw_strings).__name__)
                    continue
                strings: FormStrings = {}
                for element_id, text in raw_strings.items():
                    if isinstance(text, str):
                        strings[element_id] = text
                    else:
                        logger.warning("Dropping non-string value for '%s.%s'", form_id, element_id)
                forms[form_id] = strings
        elif raw_forms is not None:
            logger.warning("Ignoring '%s' field of type %s", keys.FORMS, type(raw_forms).__name__)

        return cls(
            author_name=_as_text(data.get(keys.AUTHOR_NAME)),
            author_profile=_as_text(data.get(keys.AUTHOR_PROFILE)),
            author_email=_as_text(data.get(keys.AUTHOR_EMAIL)),
            font_primary=FontSpec.parse(data.get(keys.FONT_PRIMARY)),
            font_secondary=FontSpec.parse(data.get(keys.FONT_SECONDARY)),
            forms=forms,
            has_forms=isinstance(raw_forms, dict),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Pack representation with forms and element ids in ordinal order."""
        keys = constants.i18n.keys
        return {
            keys.AUTHOR_NAME: self.author_name,
            keys.AUTHOR_PROFILE: self.author_profile,
            keys.AUTHOR_EMAIL: self.author_email,
            keys.FONT_PRIMARY: self.font_primary.format() if self.font_primary else None,
            keys.FONT_SECONDARY: self.font_secondary.format() if self.font_secondary else None,
            keys.FORMS: {
                form_id: dict(sorted(self.forms[form_id].items()))
                for form_id in sorted(self.forms)
            },
        }


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""
