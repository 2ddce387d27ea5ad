import pytest
from unittest.mock import patch
from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLineEdit

from core.plugin import ForestMiniPlugin, PluginContext
from core.settings import DEFAULT_PROMPT, SettingsStore
from gui.settings_dialog import SettingsDialog


@pytest.fixture
def mock_genai():
    with patch("core.ai.client.genai") as mock:
        yield mock


@pytest.fixture
def plugin(data_store, workspace, notifier, commands, panel_factory, mock_genai):
    context = PluginContext(
        store=SettingsStore(data_store),
        workspace=workspace,
        notifier=notifier,
        commands=commands,
        view_factory=panel_factory,
        settings_tab_factory=lambda p, parent: SettingsDialog(p, parent),
    )
    p = ForestMiniPlugin(context)
    p.on_load()
    return p


@pytest.fixture
def dialog(qtbot, plugin):
    dlg = SettingsDialog(plugin)
    qtbot.addWidget(dlg)
    return dlg


def test_dialog_loads_current_settings(dialog, data_store):
    assert dialog.edit_api_key.text() == ""
    assert dialog.edit_api_key.echoMode() == QLineEdit.EchoMode.Password
    assert dialog.edit_prompt.toPlainText() == DEFAULT_PROMPT
    # Opening the dialog must not write anything back
    assert data_store.saves == 0


def test_api_key_saved_on_every_change(qtbot, dialog, plugin, data_store, notifier):
    qtbot.keyClicks(dialog.edit_api_key, "abc")

    assert data_store.saves == 3
    assert data_store.data["api_key"] == "abc"
    assert plugin.client.is_initialized()
    assert notifier.messages[-1] == "API key saved and client initialized"


def test_prompt_saved_on_change(qtbot, dialog, data_store):
    with qtbot.waitSignal(dialog.settings_changed):
        dialog.edit_prompt.setPlainText("Be ruthless about dates.")

    assert data_store.data["prompt"] == "Be ruthless about dates."


def test_settings_tab_registered(plugin, commands):
    assert len(commands.setting_tabs) == 1
    dlg = commands.setting_tabs[0](None)
    assert isinstance(dlg, SettingsDialog)
    dlg.deleteLater()


def test_close_button(qtbot, dialog):
    dialog.show()
    qtbot.mouseClick(dialog.btn_close, Qt.MouseButton.LeftButton)
    assert not dialog.isVisible()
