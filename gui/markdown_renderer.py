from typing import Any

from PyQt6.QtWidgets import QTextBrowser, QVBoxLayout, QWidget

from core.logger import get_logger

logger = get_logger("gui.markdown")


class QtMarkdownRenderer:
    """
    Renders markdown into a read-only QTextBrowser placed inside the
    target container.
    """

    STYLE = """
        QTextBrowser {
            background-color: transparent;
            border: none;
            font-size: 13px;
        }
    """

    async def render(self, markdown: str, container: QWidget, source_path: str, owner: Any) -> None:
        layout = container.layout()
        if layout is None:
            layout = QVBoxLayout(container)

        browser = QTextBrowser(container)
        browser.setObjectName("forest-mini-markdown")
        browser.setOpenExternalLinks(True)
        browser.setStyleSheet(self.STYLE)
        if source_path:
            browser.setSearchPaths([source_path])
        browser.setMarkdown(markdown)
        layout.addWidget(browser)
        logger.debug(f"Rendered {len(markdown)} chars of markdown")
