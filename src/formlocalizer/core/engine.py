"""
Applies language packs to widget trees and extracts widget text back into packs.

Failures on the apply path are never surfaced: a missing base pack disables
translation, a missing or broken requested pack falls back to the base pack, and
any element without a translation simply keeps its current text. Translators ship
partially translated packs on purpose.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from PyQt6.QtCore import QObject, Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QWidget

from formlocalizer import constants
from formlocalizer.utils.helpers import is_windows_platform
from .document import FontSpec, FormStrings, ResourceDocument
from .errors import PackMalformedError, PackMissingError
from .store import ResourceStore
from .walker import Localizable, iter_targets, widget_targets

logger = logging.getLogger("FormLocalizer.Engine")


class LocalizationContext(QObject):
    """
    The pack last applied to one window, kept so widgets created or shown after
    the main pass can still be translated.

    The context is a child of the window and is destroyed with it. Each `apply`
    on the same window overwrites it; there is no locking, all access happens on
    the GUI thread.
    """
    OBJECT_NAME = "formlocalizer_context"

    def __init__(self, window: QWidget) -> None:
        super().__init__(window)
        self.setObjectName(self.OBJECT_NAME)
        self.language_id: Optional[str] = None
        self.form_id: Optional[str] = None
        self.document: Optional[ResourceDocument] = None
        self.font: Optional[FontSpec] = None

    @classmethod
    def of(cls, window: QWidget) -> Optional["LocalizationContext"]:
        """Returns the context attached to `window`, if any pack was applied to it."""
        child = window.findChild(QObject, cls.OBJECT_NAME, Qt.FindChildOption.FindDirectChildrenOnly)
        return child if isinstance(child, cls) else None

    @classmethod
    def attach(cls, window: QWidget) -> "LocalizationContext":
        return cls.of(window) or cls(window)

    def activate(self, language_id: str, form_id: str, document: ResourceDocument, font: Optional[FontSpec]) -> None:
        self.language_id = language_id
        self.form_id = form_id
        self.document = document
        self.font = font

    def strings(self) -> FormStrings:
        if self.document is None or self.form_id is None:
            return {}
        return self.document.form(self.form_id) or {}

    def localize(self, widget: QWidget) -> int:
        """
        Translates `widget` and everything below it with the active strings.
        Returns the number of texts changed.
        """
        strings = self.strings()
        # The subtree root is not part of its own walk.
        count = _write_targets(widget_targets(widget), strings, self.font)
        return count + apply_strings(widget, strings, self.font)


def _write_targets(targets: Iterable[Localizable], strings: FormStrings, font: Optional[FontSpec]) -> int:
    qfont: Optional[QFont] = font.to_qfont() if font else None
    applied = 0
    for target in targets:
        text = strings.get(target.key)
        if text is None:
            continue
        target.write(text)
        if qfont is not None and target.widget is not None:
            target.widget.setFont(qfont)
        applied += 1
    return applied


def apply_strings(root: QWidget, strings: FormStrings, font: Optional[FontSpec]) -> int:
    """
    Sets the text of every target below `root` whose key is present in `strings`,
    and the given font on the owning widget. Returns the number of texts changed.
    """
    return _write_targets(iter_targets(root), strings, font)


def extract_strings(root: QWidget) -> FormStrings:
    """
    Reads the current text of every target below `root` into a dict sorted by key.
    If two targets share a key, the first one in walk order wins.
    """
    strings: Dict[str, str] = {}
    for target in iter_targets(root):
        if target.key in strings:
            logger.warning("Duplicate element id '%s' under %s; keeping the first occurrence.",
                           target.key, root.objectName() or type(root).__name__)
            continue
        strings[target.key] = target.read()
    return dict(sorted(strings.items()))


class LocalizationEngine:
    """
    Binds the apply and extract algorithms to a pack directory.
    """

    def __init__(
        self,
        i18n_dir: Union[str, Path],
        store: Optional[ResourceStore] = None,
        default_language: str = constants.i18n.DEFAULT_LANGUAGE,
        windows: Optional[bool] = None,
    ) -> None:
        self.i18n_dir = Path(i18n_dir)
        self.store = store or ResourceStore()
        self.default_language = default_language
        self.windows = is_windows_platform() if windows is None else windows

    def pack_path(self, language_id: str) -> Path:
        return self.i18n_dir / constants.i18n.pack_filename(language_id)

    def load_for_apply(self, language_id: str) -> Optional[ResourceDocument]:
        """
        The document to apply for `language_id`: the requested pack, else the base
        pack, else None when the base pack is missing or broken.
        """
        default_path = self.pack_path(self.default_language)
        if not default_path.is_file():
            logger.info("Base language pack %s not found; keeping design-time text.", default_path)
            return None

        if language_id and language_id != self.default_language:
            try:
                return self.store.load_strict(self.pack_path(language_id))
            except PackMissingError:
                logger.info("Language pack '%s' not found; using '%s'.", language_id, self.default_language)
            except PackMalformedError as e:
                logger.warning("%s. Using '%s'.", e, self.default_language)

        try:
            return self.store.load_strict(default_path)
        except (PackMissingError, PackMalformedError) as e:
            logger.warning("Cannot use base language pack: %s", e)
            return None

    def apply(self, root: QWidget, form_id: str, language_id: str) -> Optional[LocalizationContext]:
        """
        Translates the widget tree of `root` as form `form_id` in `language_id`.

        Returns the window's LocalizationContext, or None when nothing could be
        applied (no base pack, or no strings recorded for the form).
        """
        document = self.load_for_apply(language_id)
        if document is None:
            return None

        strings = document.form(form_id)
        if strings is None:
            logger.debug("No strings recorded for form '%s' in '%s'.", form_id, language_id)
            return None

        font = document.font_for_platform(self.windows)
        context = LocalizationContext.attach(root)
        context.activate(language_id, form_id, document, font)

        applied = apply_strings(root, strings, font)
        logger.debug("Applied %d of %d strings to form '%s' (%s).", applied, len(strings), form_id, language_id)
        return context

    def extract(self, root: QWidget, form_id: str, document: ResourceDocument) -> FormStrings:
        """Reads the current text of `root` and merges it into `document` as form `form_id`."""
        strings = extract_strings(root)
        document.merge_form(form_id, strings)
        return strings

    def save_form(self, root: QWidget, form_id: str, language_id: str) -> Path:
        """
        Extracts `root` into the pack of `language_id`, creating the pack if needed,
        and writes it back. Returns the path written.

        Raises:
            PackWriteError: If the pack cannot be written.
        """
        path = self.pack_path(language_id)
        document = self.store.load(path)
        strings = self.extract(root, form_id, document)
        self.store.save(path, document)
        logger.info("Extracted %d strings of form '%s' into %s.", len(strings), form_id, path)
        return path
