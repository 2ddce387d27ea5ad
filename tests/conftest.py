import pytest
from PyQt6.QtCore import QSettings

from core.config import AppConfig
from core.panel_state import PanelState


class FakeNotifier:
    def __init__(self):
        self.messages = []

    def notify(self, message):
        self.messages.append(message)


class FakeEditor:
    def __init__(self, text=""):
        self.text = text

    def get_value(self):
        return self.text


class FakePanel:
    """Records every state the lens panel is driven through."""

    def __init__(self, leaf=None):
        self.leaf = leaf
        self.history = []
        self.opened = False

    @property
    def state(self):
        return self.history[-1] if self.history else None

    def get_view_type(self):
        return "forest-mini-lens-view"

    def get_display_text(self):
        return "Mephisto Lens"

    def get_icon(self):
        return "flame"

    async def on_open(self):
        self.opened = True
        self.show_welcome()

    async def on_close(self):
        pass

    def show_welcome(self):
        self.history.append(PanelState.welcome())

    def show_loading(self):
        self.history.append(PanelState.loading())

    async def show_result(self, text):
        self.history.append(PanelState.result(text))

    def show_error(self, message):
        self.history.append(PanelState.error(message))


class FakeLeaf:
    def __init__(self):
        self.view = None
        self.view_type = None
        self.revealed = 0


class FakeWorkspace:
    def __init__(self):
        self.factories = {}
        self.leaves = []
        self.created = 0

    def register_panel_type(self, view_type, factory):
        self.factories[view_type] = factory

    def get_panels_of_type(self, view_type):
        return [leaf for leaf in self.leaves if leaf.view_type == view_type]

    def create_right_panel(self):
        self.created += 1
        leaf = FakeLeaf()
        self.leaves.append(leaf)
        return leaf

    async def set_panel_state(self, leaf, state):
        leaf.view = self.factories[state["type"]](leaf)
        leaf.view_type = state["type"]
        await leaf.view.on_open()

    def reveal_panel(self, leaf):
        leaf.revealed += 1

    def detach_panels_of_type(self, view_type):
        self.leaves = [leaf for leaf in self.leaves if leaf.view_type != view_type]


class FakeCommands:
    def __init__(self):
        self.commands = {}
        self.ribbon = []
        self.setting_tabs = []

    def add_command(self, command_id, name, callback, shortcut=""):
        self.commands[command_id] = (name, callback, shortcut)

    def add_ribbon_icon(self, icon, title, callback):
        self.ribbon.append((icon, title, callback))

    def add_setting_tab(self, factory):
        self.setting_tabs.append(factory)


class MemoryDataStore:
    def __init__(self, data=None):
        self.data = data
        self.saves = 0

    def load_data(self):
        return None if self.data is None else dict(self.data)

    def save_data(self, data):
        self.data = dict(data)
        self.saves += 1


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def workspace():
    return FakeWorkspace()


@pytest.fixture
def commands():
    return FakeCommands()


@pytest.fixture
def data_store():
    return MemoryDataStore()


@pytest.fixture
def make_editor():
    return FakeEditor


@pytest.fixture
def panel_factory():
    return FakePanel


@pytest.fixture
def clean_config(tmp_path):
    """AppConfig backed by a temporary ini file instead of the user's settings."""
    settings_path = str(tmp_path / "test_config.ini")
    config = AppConfig()
    config.settings = QSettings(settings_path, QSettings.Format.IniFormat)
    return config
