"""
------------------------------------------------------------------------------
Project:        ForestMini
File:           main.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Application entry point. Initializes the Qt environment and
                the asyncio loop, sets up logging and configuration, loads the
                Forest Mini plugin and launches the main window.
------------------------------------------------------------------------------
"""

import sys
import asyncio
import argparse
from functools import partial

from PyQt6.QtWidgets import QApplication
from PyQt6.QtCore import QCoreApplication
import qasync

from core.config import AppConfig
from core.logger import setup_logging, get_logger
from core.plugin import ForestMiniPlugin, PluginContext
from core.settings import SettingsStore
from gui.lens_view import LensView
from gui.main_window import MainWindow
from gui.markdown_renderer import QtMarkdownRenderer
from gui.settings_dialog import SettingsDialog


def build_plugin(window: MainWindow, app_config: AppConfig) -> ForestMiniPlugin:
    """
    Wires the plugin to the window's host services.
    """
    renderer = QtMarkdownRenderer()
    context = PluginContext(
        store=SettingsStore(app_config),
        workspace=window.workspace,
        notifier=window.notifier,
        commands=window,
        view_factory=partial(LensView, renderer=renderer),
        settings_tab_factory=lambda plugin, parent: SettingsDialog(plugin, parent),
    )
    return ForestMiniPlugin(context)


def main() -> None:
    """
    Forest Mini Entry Point.
    """
    parser = argparse.ArgumentParser(description="Forest Mini - Mephisto lens for your notes")
    parser.add_argument("-P", "--profile", type=str, help="Application profile for isolation (e.g. 'dev')")
    parser.add_argument("note", nargs="?", help="Note file to open on startup")
    args, unknown = parser.parse_known_args()

    app = QApplication(sys.argv)

    app_id = "forestmini"
    if args.profile:
        app_id = f"forestmini-{args.profile}"
    QCoreApplication.setApplicationName(app_id)

    app_config = AppConfig(profile=args.profile)

    setup_logging(
        level=app_config.get_log_level(),
        log_file=str(app_config.get_log_file_path()),
        component_levels=app_config.get_log_components()
    )
    logger = get_logger("core")
    logger.info(f"Forest Mini started (Profile: {args.profile or 'default'})")

    loop = qasync.QEventLoop(app)
    asyncio.set_event_loop(loop)

    window = MainWindow(app_config=app_config)
    if args.profile:
        window.setWindowTitle(f"{window.windowTitle()} [PROFILE: {args.profile.upper()}]")

    plugin = build_plugin(window, app_config)
    plugin.on_load()
    app.aboutToQuit.connect(plugin.on_unload)

    if args.note:
        window.open_note_slot(args.note)

    window.show()

    app_close_event = asyncio.Event()
    app.aboutToQuit.connect(app_close_event.set)

    with loop:
        loop.run_until_complete(app_close_event.wait())


if __name__ == "__main__":
    main()
