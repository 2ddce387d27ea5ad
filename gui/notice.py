from PyQt6.QtWidgets import QMainWindow

from core.logger import get_logger

logger = get_logger("gui.notice")


class StatusBarNotifier:
    """
    Transient notices in the main window's status bar.
    """

    TIMEOUT_MS = 5000

    def __init__(self, window: QMainWindow):
        self.window = window

    def notify(self, message: str) -> None:
        logger.info(f"Notice: {message}")
        self.window.statusBar().showMessage(message, self.TIMEOUT_MS)
