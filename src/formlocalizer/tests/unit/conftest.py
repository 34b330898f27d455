import logging
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import (
    QApplication, QCheckBox, QGroupBox, QLabel, QLineEdit, QMenu, QPushButton,
    QRadioButton, QTabWidget, QTreeWidget, QVBoxLayout, QWidget,
)

from formlocalizer import constants
from formlocalizer.core.document import FontSpec, ResourceDocument
from formlocalizer.core.store import ResourceStore


@pytest.fixture(scope="session")
def q_app():
    """Provides a QApplication instance for the test session."""
    return QApplication.instance() or QApplication([])


class SampleWindow(QWidget):
    """A window covering every localizable widget kind plus a few that are not."""

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("frmMain")
        layout = QVBoxLayout(self)

        self.btnStart = self._named(QPushButton("Start", self), "btnStart")
        self.chkAutoStart = self._named(QCheckBox("Start automatically", self), "chkAutoStart")
        self.rdoFast = self._named(QRadioButton("Fast", self), "rdoFast")
        self.lblStatus = self._named(QLabel("Idle", self), "lblStatus")
        self.txtPath = self._named(QLineEdit("C:/Videos", self), "txtPath")
        self.lblNoName = QLabel("unnamed", self)

        self.grpOptions = self._named(QGroupBox("Options", self), "grpOptions")
        group_layout = QVBoxLayout(self.grpOptions)
        self.btnAdd = self._named(QPushButton("Add", self.grpOptions), "btnAdd")
        group_layout.addWidget(self.btnAdd)

        self.tabMain = self._named(QTabWidget(self), "tabMain")
        self.tabGeneral = self._named(QWidget(), "tabGeneral")
        self.lblHint = self._named(QLabel("Drop files here", self.tabGeneral), "lblHint")
        self.tabAdvanced = self._named(QWidget(), "tabAdvanced")
        self.tabMain.addTab(self.tabGeneral, "General")
        self.tabMain.addTab(self.tabAdvanced, "Advanced")

        self.lvFiles = self._named(QTreeWidget(self), "lvFiles")
        self.lvFiles.setColumnCount(3)
        self.lvFiles.setHeaderLabels(["File name", "Size", "Status"])

        # Parentless: only reachable through auxiliary_menus().
        self.cmsFiles = self._named(QMenu(), "cmsFiles")
        self.tsmiOpenFolder = self.cmsFiles.addAction("Open containing folder")
        self.tsmiOpenFolder.setObjectName("tsmiOpenFolder")
        self.cmsFiles.addSeparator()
        self.tsmiRemoveItem = self.cmsFiles.addAction("Remove from list")
        self.tsmiRemoveItem.setObjectName("tsmiRemoveItem")
        self.cmsFiles.addAction("unnamed action")

        # Parented to the window: found without the capability.
        self.cmsTray = self._named(QMenu(self), "cmsTray")
        self.tsmiExit = self.cmsTray.addAction("Exit")
        self.tsmiExit.setObjectName("tsmiExit")

        for widget in (self.btnStart, self.chkAutoStart, self.rdoFast, self.lblStatus,
                       self.txtPath, self.lblNoName, self.grpOptions, self.tabMain, self.lvFiles):
            layout.addWidget(widget)

    @staticmethod
    def _named(widget, name):
        widget.setObjectName(name)
        return widget

    def auxiliary_menus(self):
        return [self.cmsFiles]


SAMPLE_TEXTS = {
    "btnAdd": "Add",
    "btnStart": "Start",
    "chkAutoStart": "Start automatically",
    "grpOptions": "Options",
    "lblHint": "Drop files here",
    "lblStatus": "Idle",
    "lvFiles0": "File name",
    "lvFiles1": "Size",
    "lvFiles2": "Status",
    "rdoFast": "Fast",
    "tabAdvanced": "Advanced",
    "tabGeneral": "General",
    "tsmiExit": "Exit",
    "tsmiOpenFolder": "Open containing folder",
    "tsmiRemoveItem": "Remove from list",
}


@pytest.fixture
def sample_window(q_app):
    window = SampleWindow()
    yield window
    window.deleteLater()


@pytest.fixture
def make_window(q_app):
    """Factory for additional, structurally identical windows."""
    windows = []

    def _make():
        window = SampleWindow()
        windows.append(window)
        return window

    yield _make
    for window in windows:
        window.deleteLater()


@pytest.fixture
def pack_dir(tmp_path):
    """An i18n directory holding an English base pack and a partial French pack."""
    i18n_dir = tmp_path / "i18n"
    store = ResourceStore()
    base = ResourceDocument(
        author_name="Base Author",
        author_profile="https://example.org/base",
        author_email="base@example.org",
        font_primary=FontSpec("Segoe UI", 9),
        font_secondary=FontSpec("Noto Sans", 10),
        forms={"frmMain": dict(SAMPLE_TEXTS)},
    )
    store.save(i18n_dir / "en-US.json", base)

    french = ResourceDocument(
        author_name="Auteur",
        font_primary=FontSpec("Tahoma", 8.25),
        font_secondary=FontSpec("DejaVu Sans", 9),
        forms={"frmMain": {
            "btnStart": "Démarrer",
            "grpOptions": "Préférences",
            "lvFiles1": "Taille",
            "tabAdvanced": "Avancé",
            "tsmiOpenFolder": "Ouvrir le dossier",
        }},
    )
    store.save(i18n_dir / "fr-FR.json", french)
    return i18n_dir


@pytest.fixture
def sample_texts():
    """Design-time text of every localizable element of SampleWindow, keyed by element id."""
    return dict(SAMPLE_TEXTS)


@pytest.fixture
def clean_app_logger():
    """Detaches the application logger's handlers for the duration of a test."""
    logger = logging.getLogger(constants.app.APP_NAME)
    saved_handlers, saved_level = logger.handlers[:], logger.level
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
