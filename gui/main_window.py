"""
------------------------------------------------------------------------------
Project:        ForestMini
File:           gui/main_window.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Main application window. Hosts the note editor, the dock
                workspace for plugin panels, the ribbon toolbar and the
                command menu. Commands run as asyncio tasks.
------------------------------------------------------------------------------
"""

import asyncio
from pathlib import Path
from typing import Any, Awaitable, Callable, Coroutine, Dict, List, Optional, Set

from PyQt6.QtWidgets import QMainWindow, QPlainTextEdit, QFileDialog, QToolBar, QStatusBar, QMessageBox
from PyQt6.QtGui import QAction, QIcon, QCloseEvent, QFont
from PyQt6.QtCore import QSize

from core.config import AppConfig
from core.logger import get_logger
from gui.notice import StatusBarNotifier
from gui.workspace import DockWorkspace

logger = get_logger("gui.main_window")


class EditorAdapter:
    """Exposes the central QPlainTextEdit as the active note."""

    def __init__(self, widget: QPlainTextEdit):
        self.widget = widget

    def get_value(self) -> str:
        return self.widget.toPlainText()


class MainWindow(QMainWindow):
    def __init__(self, app_config: Optional[AppConfig] = None):
        super().__init__()
        self.app_config = app_config
        self.setWindowTitle(self.tr("Forest Mini"))
        self.resize(1100, 750)

        self.current_path: Optional[Path] = None
        self.commands: Dict[str, QAction] = {}
        self.ribbon_actions: List[QAction] = []
        self._setting_tab_factories: List[Callable[[Any], Any]] = []
        self._tasks: Set[asyncio.Task] = set()

        self.editor_widget = QPlainTextEdit()
        self.editor_widget.setFont(QFont("monospace", 11))
        self.editor_widget.setPlaceholderText(self.tr("Write or open a note..."))
        self.setCentralWidget(self.editor_widget)
        self.note_editor = EditorAdapter(self.editor_widget)

        self.setStatusBar(QStatusBar())
        self.workspace = DockWorkspace(self)
        self.notifier = StatusBarNotifier(self)

        self.create_menu_bar()
        self.create_tool_bar()
        self.read_settings()

    def create_menu_bar(self):
        menubar = self.menuBar()

        # -- File Menu --
        file_menu = menubar.addMenu(self.tr("&File"))

        action_open = QAction(self.tr("&Open Note..."), self)
        action_open.setShortcut("Ctrl+O")
        action_open.triggered.connect(lambda: self.open_note_slot())
        file_menu.addAction(action_open)

        action_save = QAction(self.tr("&Save Note"), self)
        action_save.setShortcut("Ctrl+S")
        action_save.triggered.connect(self.save_note_slot)
        file_menu.addAction(action_save)

        file_menu.addSeparator()

        self.action_settings = QAction(self.tr("Se&ttings..."), self)
        self.action_settings.triggered.connect(self.open_settings_slot)
        self.action_settings.setEnabled(False)
        file_menu.addAction(self.action_settings)

        file_menu.addSeparator()

        action_quit = QAction(self.tr("&Quit"), self)
        action_quit.setShortcut("Ctrl+Q")
        action_quit.triggered.connect(self.close)
        file_menu.addAction(action_quit)

        # -- Tools Menu (plugin commands) --
        self.tools_menu = menubar.addMenu(self.tr("&Tools"))

    def create_tool_bar(self):
        self.ribbon = QToolBar(self.tr("Ribbon"))
        self.ribbon.setObjectName("ribbon")
        self.ribbon.setIconSize(QSize(20, 20))
        self.ribbon.setMovable(False)
        self.addToolBar(self.ribbon)

    # --- Command registry -------------------------------------------------

    def add_command(self, command_id: str, name: str,
                    callback: Callable[[Any], Awaitable[None]], shortcut: str = "") -> None:
        action = QAction(self.tr(name), self)
        action.setObjectName(command_id)
        if shortcut:
            action.setShortcut(shortcut)
        action.triggered.connect(lambda: self.run_coroutine(callback(self.note_editor)))
        self.tools_menu.addAction(action)
        self.commands[command_id] = action

    def add_ribbon_icon(self, icon: str, title: str, callback: Callable[[], Awaitable[None]]) -> None:
        action = QAction(QIcon.fromTheme(icon), title, self)
        action.setToolTip(title)
        action.triggered.connect(lambda: self.run_coroutine(callback()))
        self.ribbon.addAction(action)
        self.ribbon_actions.append(action)

    def add_setting_tab(self, factory: Callable[[Any], Any]) -> None:
        self._setting_tab_factories.append(factory)
        self.action_settings.setEnabled(True)

    def open_settings_slot(self):
        for factory in self._setting_tab_factories:
            dialog = factory(self)
            dialog.exec()

    # --- Async plumbing ---------------------------------------------------

    def run_coroutine(self, coro: Coroutine[Any, Any, None]) -> Optional[asyncio.Task]:
        """
        Schedules one task per invocation on the running loop.
        Without a running loop (tests, headless use) the coroutine runs to completion.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(coro)
            return None

        task = loop.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_finished)
        return task

    def _on_task_finished(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(f"Command task failed: {exc}", exc_info=exc)

    # --- Notes ------------------------------------------------------------

    def open_note_slot(self, path: Optional[str] = None):
        if path is None:
            path, _ = QFileDialog.getOpenFileName(
                self, self.tr("Open Note"), "", self.tr("Notes (*.md *.txt);;All Files (*)")
            )
        if not path:
            return
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to open note {path}: {e}")
            QMessageBox.warning(self, self.tr("Open Note"), self.tr(f"Could not open note:\n{e}"))
            return

        self.editor_widget.setPlainText(text)
        self.current_path = Path(path)
        self.setWindowTitle(f"{self.current_path.name} - Forest Mini")
        logger.info(f"Opened note {path}")

    def save_note_slot(self):
        if self.current_path is None:
            path, _ = QFileDialog.getSaveFileName(
                self, self.tr("Save Note"), "", self.tr("Notes (*.md *.txt);;All Files (*)")
            )
            if not path:
                return
            self.current_path = Path(path)
        try:
            self.current_path.write_text(self.editor_widget.toPlainText(), encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to save note {self.current_path}: {e}")
            QMessageBox.warning(self, self.tr("Save Note"), self.tr(f"Could not save note:\n{e}"))
            return
        self.notifier.notify(self.tr(f"Saved {self.current_path.name}"))

    # --- Window state -----------------------------------------------------

    def closeEvent(self, event: QCloseEvent):
        """Handle window close."""
        self.write_settings()
        super().closeEvent(event)

    def write_settings(self):
        if self.app_config is None:
            return
        self.app_config.set_window_geometry(self.saveGeometry())
        self.app_config.set_window_state(self.saveState())

    def read_settings(self):
        if self.app_config is None:
            return
        geometry = self.app_config.get_window_geometry()
        if geometry:
            self.restoreGeometry(geometry)
        state = self.app_config.get_window_state()
        if state:
            self.restoreState(state)
