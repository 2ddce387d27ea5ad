"""
------------------------------------------------------------------------------
Project:        ForestMini
File:           gui/workspace.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Dock based panel framework for the main window. Panels are
                registered by type id and live in QDockWidget leaves.
------------------------------------------------------------------------------
"""

import asyncio
from typing import Callable, Dict, List, Optional, Set

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QDockWidget, QMainWindow

from core.host import ViewState
from core.logger import get_logger

logger = get_logger("gui.workspace")


class PanelLeaf(QDockWidget):
    """A dock slot; holds at most one panel view."""

    def __init__(self, parent: Optional[QMainWindow] = None):
        super().__init__(parent)
        self.view = None
        self.view_type: Optional[str] = None
        self.setAllowedAreas(Qt.DockWidgetArea.LeftDockWidgetArea | Qt.DockWidgetArea.RightDockWidgetArea)


class DockWorkspace:
    """
    Host workspace backed by the dock areas of a QMainWindow.
    """

    def __init__(self, window: QMainWindow):
        self.window = window
        self._factories: Dict[str, Callable] = {}
        self._leaves: List[PanelLeaf] = []
        self._closing: Set[asyncio.Task] = set()

    def register_panel_type(self, view_type: str, factory: Callable) -> None:
        if view_type in self._factories:
            logger.warning(f"Panel type '{view_type}' registered twice, replacing factory")
        self._factories[view_type] = factory

    def get_panels_of_type(self, view_type: str) -> List[PanelLeaf]:
        return [leaf for leaf in self._leaves if leaf.view_type == view_type]

    def create_right_panel(self) -> Optional[PanelLeaf]:
        leaf = PanelLeaf(self.window)
        self.window.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, leaf)
        leaf.hide()
        self._leaves.append(leaf)
        return leaf

    async def set_panel_state(self, leaf: PanelLeaf, state: ViewState) -> None:
        """Instantiates the registered view of `state['type']` inside the leaf."""
        view_type = state["type"]
        factory = self._factories.get(view_type)
        if factory is None:
            logger.error(f"No panel registered for type '{view_type}'")
            if leaf in self._leaves and leaf.view is None:
                self._leaves.remove(leaf)
                self.window.removeDockWidget(leaf)
                leaf.deleteLater()
            return

        if leaf.view is not None:
            await leaf.view.on_close()

        view = factory(leaf)
        leaf.view = view
        leaf.view_type = view_type
        leaf.setObjectName(view_type)
        leaf.setWindowTitle(view.get_display_text())
        leaf.setWidget(view)
        await view.on_open()

        if state.get("active"):
            leaf.show()
            leaf.raise_()

    def reveal_panel(self, leaf: PanelLeaf) -> None:
        leaf.show()
        leaf.raise_()
        if leaf.view is not None:
            leaf.view.setFocus()

    def detach_panels_of_type(self, view_type: str) -> None:
        for leaf in self.get_panels_of_type(view_type):
            self._leaves.remove(leaf)
            self.window.removeDockWidget(leaf)
            view = leaf.view
            leaf.view = None
            leaf.view_type = None
            if view is None:
                leaf.deleteLater()
            else:
                self._close_and_delete(leaf, view)
        logger.debug(f"Detached panels of type '{view_type}'")

    def _close_and_delete(self, leaf: PanelLeaf, view) -> None:
        """Runs the view's close hook, then deletes its leaf."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(view.on_close())
            leaf.deleteLater()
            return

        task = loop.create_task(view.on_close())
        self._closing.add(task)
        task.add_done_callback(self._closing.discard)
        task.add_done_callback(lambda _: leaf.deleteLater())
