import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from core.panel_state import PanelState, PanelStateKind
from core.plugin import COMMAND_ANALYZE_ID, LENS_VIEW_TYPE
from gui.lens_view import LensView
from gui.main_window import MainWindow
from main import build_plugin


@pytest.fixture
def mock_genai():
    with patch("core.ai.client.genai") as mock:
        mock.Client.return_value.aio.models.generate_content = AsyncMock()
        yield mock


@pytest.fixture
def generate(mock_genai):
    return mock_genai.Client.return_value.aio.models.generate_content


@pytest.fixture
def window(qtbot, clean_config, mock_genai):
    win = MainWindow(app_config=clean_config)
    qtbot.addWidget(win)
    return win


@pytest.fixture
def plugin(window, clean_config):
    p = build_plugin(window, clean_config)
    p.on_load()
    return p


def lens_view(window):
    leaves = window.workspace.get_panels_of_type(LENS_VIEW_TYPE)
    return leaves[0].view if leaves else None


def test_plugin_hooks_into_window(window, plugin):
    assert COMMAND_ANALYZE_ID in window.commands
    assert window.commands[COMMAND_ANALYZE_ID].text() == "Analyze with Mephisto"
    assert [a.text() for a in window.ribbon_actions] == ["Forest Mini"]
    assert window.action_settings.isEnabled()


def test_ribbon_opens_lens_view(window, plugin):
    window.ribbon_actions[0].trigger()

    view = lens_view(window)
    assert isinstance(view, LensView)
    assert view.state == PanelState.welcome()


def test_analyze_without_key(window, plugin, generate):
    window.editor_widget.setPlainText("hello")
    window.commands[COMMAND_ANALYZE_ID].trigger()

    assert window.statusBar().currentMessage() == "Please set your Gemini API key in settings first."
    assert lens_view(window) is None
    generate.assert_not_called()


def test_analyze_end_to_end(window, clean_config, generate):
    clean_config.save_data({"api_key": "key"})
    plugin = build_plugin(window, clean_config)
    plugin.on_load()

    response = MagicMock()
    response.text = "Critique: the argument is circular."
    generate.return_value = response

    window.editor_widget.setPlainText("hello")
    window.commands[COMMAND_ANALYZE_ID].trigger()

    view = lens_view(window)
    assert view.state == PanelState.result("Critique: the argument is circular.")
    assert window.statusBar().currentMessage() == "Analysis complete!"


def test_analyze_empty_note(window, clean_config, generate):
    clean_config.save_data({"api_key": "key"})
    plugin = build_plugin(window, clean_config)
    plugin.on_load()

    window.editor_widget.setPlainText("  \n  ")
    window.commands[COMMAND_ANALYZE_ID].trigger()

    view = lens_view(window)
    assert view.state.kind == PanelStateKind.ERROR
    assert view.state.text == "Current note is empty"
    generate.assert_not_called()


def test_open_note(window, tmp_path):
    note = tmp_path / "idea.md"
    note.write_text("# Idea\n\nEverything is fine.", encoding="utf-8")

    window.open_note_slot(str(note))

    assert window.note_editor.get_value() == "# Idea\n\nEverything is fine."
    assert window.current_path == note
    assert "idea.md" in window.windowTitle()


def test_save_note(window, tmp_path):
    note = tmp_path / "draft.md"
    note.write_text("old", encoding="utf-8")
    window.open_note_slot(str(note))

    window.editor_widget.setPlainText("new text")
    window.save_note_slot()

    assert note.read_text(encoding="utf-8") == "new text"


def test_unload_removes_panel(window, plugin):
    window.ribbon_actions[0].trigger()
    assert lens_view(window) is not None

    plugin.on_unload()
    assert lens_view(window) is None
