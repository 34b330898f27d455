"""
Enumerates the localizable text of a live widget tree.

The walk covers two sources:
- Every widget below the root window, visited post-order (descendants first).
- Pop-up menus the window owns but which are not part of its visible tree. A window
  exposes parentless menus by defining an `auxiliary_menus()` method returning
  them; menus parented directly to the window are found without help.

Each localizable widget is turned into one or more targets. The set of target
types is closed (`Localizable`); the engine only ever reads and writes text
through them, so adding a widget kind means adding a target type here.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Union

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QCheckBox, QGroupBox, QLabel, QMenu, QPushButton, QRadioButton,
    QStackedWidget, QTabWidget, QTreeWidget, QWidget,
)

logger = logging.getLogger("FormLocalizer.Walker")

_TEXT_WIDGETS = (QLabel, QPushButton, QCheckBox, QRadioButton)


@dataclass(frozen=True)
class TextTarget:
    """Label, button, checkbox or radio button."""
    key: str
    widget: QWidget

    def read(self) -> str:
        return self.widget.text()

    def write(self, text: str) -> None:
        self.widget.setText(text)


@dataclass(frozen=True)
class GroupBoxTarget:
    key: str
    widget: QGroupBox

    def read(self) -> str:
        return self.widget.title()

    def write(self, text: str) -> None:
        self.widget.setTitle(text)


@dataclass(frozen=True)
class TabPageTarget:
    """A page of a QTabWidget; its text lives on the owning tab bar."""
    key: str
    widget: QWidget
    tabs: QTabWidget

    def read(self) -> str:
        return self.tabs.tabText(self.tabs.indexOf(self.widget))

    def write(self, text: str) -> None:
        self.tabs.setTabText(self.tabs.indexOf(self.widget), text)


@dataclass(frozen=True)
class ColumnTarget:
    """One header column of a multi-column list."""
    key: str
    widget: QTreeWidget
    column: int

    def read(self) -> str:
        return self.widget.headerItem().text(self.column)

    def write(self, text: str) -> None:
        self.widget.headerItem().setText(self.column, text)


@dataclass(frozen=True)
class MenuItemTarget:
    """An item of a pop-up menu. Menu items keep their own font."""
    key: str
    action: QAction

    @property
    def widget(self) -> None:
        return None

    def read(self) -> str:
        return self.action.text()

    def write(self, text: str) -> None:
        self.action.setText(text)


Localizable = Union[TextTarget, GroupBoxTarget, TabPageTarget, ColumnTarget, MenuItemTarget]


def walk(root: QWidget) -> Iterator[QWidget]:
    """
    Yields every widget below `root`, each child's descendants before the child.
    The root itself is not yielded.
    """
    for child in root.children():
        if isinstance(child, QWidget):
            yield from walk(child)
            yield child


def owning_tab_widget(widget: QWidget) -> Optional[QTabWidget]:
    """Returns the QTabWidget `widget` is a page of, if any."""
    stack = widget.parentWidget()
    if not isinstance(stack, QStackedWidget):
        return None
    tabs = stack.parentWidget()
    if isinstance(tabs, QTabWidget) and tabs.indexOf(widget) >= 0:
        return tabs
    return None


def is_localizable(widget: QWidget) -> bool:
    """True only for the widget kinds whose text is translated."""
    if isinstance(widget, (_TEXT_WIDGETS, QTreeWidget, QGroupBox)):
        return True
    return owning_tab_widget(widget) is not None


def widget_targets(widget: QWidget) -> List[Localizable]:
    """Targets for one widget. Unnamed or non-localizable widgets have none."""
    name = widget.objectName()
    if not name or not is_localizable(widget):
        return []
    if isinstance(widget, QTreeWidget):
        return [ColumnTarget(f"{name}{column}", widget, column) for column in range(widget.columnCount())]
    if isinstance(widget, QGroupBox):
        return [GroupBoxTarget(name, widget)]
    if isinstance(widget, _TEXT_WIDGETS):
        return [TextTarget(name, widget)]
    tabs = owning_tab_widget(widget)
    return [TabPageTarget(name, widget, tabs)]


def auxiliary_menus(root: QWidget) -> List[QMenu]:
    """
    Pop-up menus owned by `root` outside its visible tree. Recomputed on every call.
    """
    menus: List[QMenu] = []
    provider = getattr(root, "auxiliary_menus", None)
    if callable(provider):
        for menu in provider() or ():
            if isinstance(menu, QMenu):
                menus.append(menu)
            else:
                logger.warning("Ignoring non-menu auxiliary component %r on %s", menu, root.objectName())
    # Direct children only, named or not.
    menus.extend(child for child in root.children() if isinstance(child, QMenu))

    unique: List[QMenu] = []
    for menu in menus:
        if not any(menu is seen for seen in unique):
            unique.append(menu)
    return unique


def menu_targets(menu: QMenu) -> List[MenuItemTarget]:
    return [
        MenuItemTarget(action.objectName(), action)
        for action in menu.actions()
        if not action.isSeparator() and action.objectName()
    ]


def iter_targets(root: QWidget) -> Iterator[Localizable]:
    """All targets below `root`: widgets in walk order, then auxiliary menu items."""
    for widget in walk(root):
        yield from widget_targets(widget)
    for menu in auxiliary_menus(root):
        yield from menu_targets(menu)
