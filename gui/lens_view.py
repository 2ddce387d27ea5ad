"""
------------------------------------------------------------------------------
Project:        ForestMini
File:           gui/lens_view.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Side panel showing the Mephisto lens analysis. Renders one of
                welcome, loading, result (markdown) or error at a time.
------------------------------------------------------------------------------
"""

from datetime import datetime
from typing import Any, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget, QFrame

from core.host import MarkdownRenderer
from core.panel_state import PanelState
from core.plugin import LENS_VIEW_TYPE

WELCOME_TEXT = 'Select a note and use "Analyze with Mephisto" command to see analysis results here.'
LOADING_TEXT = "🤔 Mephisto is analyzing..."
ERROR_LABEL = "⚠️ Error"


class LensView(QWidget):
    """
    Mephisto lens result panel.
    Every show_* call replaces the whole content area.
    """

    def __init__(self, leaf: Any, renderer: MarkdownRenderer, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.leaf = leaf
        self.renderer = renderer
        self.state: Optional[PanelState] = None

        self.setObjectName("forest-mini-lens-view")
        self._init_ui()

    def _init_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        self.header = QLabel("🔥 Mephisto Analysis")
        self.header.setObjectName("forest-mini-header")
        self.header.setStyleSheet("font-size: 15px; font-weight: bold;")
        layout.addWidget(self.header)

        self.content = QFrame()
        self.content.setObjectName("forest-mini-content")
        self.content_layout = QVBoxLayout(self.content)
        self.content_layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.content, 1)

    def get_view_type(self) -> str:
        return LENS_VIEW_TYPE

    def get_display_text(self) -> str:
        return "Mephisto Lens"

    def get_icon(self) -> str:
        return "flame"

    async def on_open(self) -> None:
        self.show_welcome()

    async def on_close(self) -> None:
        self._clear()

    def _clear(self) -> None:
        while self.content_layout.count():
            item = self.content_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.setParent(None)
                widget.deleteLater()

    def _add_label(self, text: str, object_name: str, parent_layout=None) -> QLabel:
        label = QLabel(text)
        label.setObjectName(object_name)
        label.setWordWrap(True)
        label.setTextFormat(Qt.TextFormat.PlainText)
        label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        (parent_layout or self.content_layout).addWidget(label)
        return label

    def show_welcome(self) -> None:
        self._clear()
        self._add_label(WELCOME_TEXT, "forest-mini-welcome")
        self.content_layout.addStretch()
        self.state = PanelState.welcome()

    def show_loading(self) -> None:
        self._clear()
        loading_el = QFrame()
        loading_el.setObjectName("forest-mini-loading")
        loading_layout = QVBoxLayout(loading_el)
        self._add_label(LOADING_TEXT, "forest-mini-loading-text", loading_layout)
        self.content_layout.addWidget(loading_el)
        self.content_layout.addStretch()
        self.state = PanelState.loading()

    async def show_result(self, analysis_text: str) -> None:
        """
        Shows the display time followed by the rendered markdown.
        Completes once the renderer has finished.
        """
        self._clear()

        timestamp = self._add_label(
            f"Analysis: {datetime.now().strftime('%x %X')}", "forest-mini-timestamp"
        )
        timestamp.setStyleSheet("color: gray; font-size: 11px;")

        result_el = QFrame()
        result_el.setObjectName("forest-mini-result")
        result_el.setLayout(QVBoxLayout())
        result_el.layout().setContentsMargins(0, 0, 0, 0)
        self.content_layout.addWidget(result_el, 1)

        self.state = PanelState.result(analysis_text)
        await self.renderer.render(analysis_text, result_el, "", self)

    def show_error(self, error_message: str) -> None:
        self._clear()
        error_el = QFrame()
        error_el.setObjectName("forest-mini-error")
        error_layout = QVBoxLayout(error_el)
        title = self._add_label(ERROR_LABEL, "forest-mini-error-title", error_layout)
        title.setStyleSheet("color: #c0392b; font-weight: bold;")
        self._add_label(error_message, "forest-mini-error-message", error_layout)
        self.content_layout.addWidget(error_el)
        self.content_layout.addStretch()
        self.state = PanelState.error(error_message)
