from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QFormLayout, QLineEdit, QPushButton,
    QHBoxLayout, QLabel, QPlainTextEdit
)
from PyQt6.QtCore import pyqtSignal


class SettingsDialog(QDialog):

    """
    Forest Mini settings. Every edit is saved immediately.
    """
    settings_changed = pyqtSignal()

    PROMPT_ROWS = 10

    def __init__(self, plugin, parent=None):
        super().__init__(parent)
        self.plugin = plugin
        self.setWindowTitle(self.tr("Forest Mini Settings"))
        self.resize(640, 420)

        self._setup_ui()
        self._load_settings()
        self._connect_signals()

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        header = QLabel(self.tr("Forest Mini Settings"))
        header.setStyleSheet("font-size: 16px; font-weight: bold;")
        layout.addWidget(header)

        form = QFormLayout()

        # Gemini API Key
        self.lbl_api_key = QLabel(self.tr("Gemini API Key"))
        self.edit_api_key = QLineEdit()
        self.edit_api_key.setEchoMode(QLineEdit.EchoMode.Password)
        self.edit_api_key.setPlaceholderText(self.tr("Enter your API key"))
        self.edit_api_key.setToolTip(
            self.tr("Enter your Google Gemini API key. Get it from https://aistudio.google.com/app/apikey")
        )
        form.addRow(self.lbl_api_key, self.edit_api_key)

        # Mephisto Prompt
        self.lbl_prompt = QLabel(self.tr("Mephisto System Prompt"))
        self.lbl_prompt.setToolTip(self.tr("Customize the Mephisto analysis prompt (advanced)"))
        self.edit_prompt = QPlainTextEdit()
        self.edit_prompt.setPlaceholderText(self.tr("Enter system prompt"))
        line_height = self.edit_prompt.fontMetrics().lineSpacing()
        self.edit_prompt.setMinimumHeight(line_height * self.PROMPT_ROWS)
        form.addRow(self.lbl_prompt, self.edit_prompt)

        layout.addLayout(form)

        btn_layout = QHBoxLayout()
        btn_layout.addStretch()
        self.btn_close = QPushButton(self.tr("Close"))
        self.btn_close.clicked.connect(self.accept)
        btn_layout.addWidget(self.btn_close)
        layout.addLayout(btn_layout)

    def _load_settings(self):
        settings = self.plugin.settings
        self.edit_api_key.setText(settings.api_key)
        self.edit_prompt.setPlainText(settings.prompt)

    def _connect_signals(self):
        # Connected after loading so the initial fill does not write back
        self.edit_api_key.textChanged.connect(self._on_api_key_changed)
        self.edit_prompt.textChanged.connect(self._on_prompt_changed)

    def _on_api_key_changed(self, text: str):
        self.plugin.set_api_key(text)
        self.settings_changed.emit()

    def _on_prompt_changed(self):
        self.plugin.set_prompt(self.edit_prompt.toPlainText())
        self.settings_changed.emit()
