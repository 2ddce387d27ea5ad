"""
------------------------------------------------------------------------------
Project:        ForestMini
File:           core/host.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Narrow interfaces to the host application. The plugin only
                talks to the editor, workspace, renderer, notifier, data
                store and command registry through these protocols; the Qt
                implementations live in the gui package.
------------------------------------------------------------------------------
"""

from typing import Any, Awaitable, Callable, List, Optional, Protocol, TypedDict


class NoteEditor(Protocol):
    """The active editor surface."""

    def get_value(self) -> str:
        """Full text of the current note."""
        ...


class PanelView(Protocol):
    """Capability interface every dockable panel provides."""

    def get_view_type(self) -> str:
        ...

    def get_display_text(self) -> str:
        ...

    def get_icon(self) -> str:
        ...

    async def on_open(self) -> None:
        ...

    async def on_close(self) -> None:
        ...


class ResultPanel(PanelView, Protocol):
    """The lens panel as driven by the analyze command."""

    def show_welcome(self) -> None:
        ...

    def show_loading(self) -> None:
        ...

    async def show_result(self, text: str) -> None:
        ...

    def show_error(self, message: str) -> None:
        ...


class PanelLeaf(Protocol):
    """A slot in the workspace that may hold a panel view."""

    view: Optional[PanelView]


class ViewState(TypedDict):
    type: str
    active: bool


PanelFactory = Callable[[PanelLeaf], PanelView]


class Workspace(Protocol):
    """Panel/layout framework of the host."""

    def register_panel_type(self, view_type: str, factory: PanelFactory) -> None:
        ...

    def get_panels_of_type(self, view_type: str) -> List[PanelLeaf]:
        ...

    def create_right_panel(self) -> Optional[PanelLeaf]:
        ...

    async def set_panel_state(self, leaf: PanelLeaf, state: ViewState) -> None:
        ...

    def reveal_panel(self, leaf: PanelLeaf) -> None:
        ...

    def detach_panels_of_type(self, view_type: str) -> None:
        ...


class MarkdownRenderer(Protocol):
    """Rich-text renderer of the host."""

    def render(self, markdown: str, container: Any, source_path: str, owner: Any) -> Awaitable[None]:
        ...


class Notifier(Protocol):
    """Transient, fire-and-forget user notices."""

    def notify(self, message: str) -> None:
        ...


class DataStore(Protocol):
    """Plugin data persistence."""

    def load_data(self) -> Optional[dict]:
        ...

    def save_data(self, data: dict) -> None:
        ...


class CommandRegistry(Protocol):
    """Where the plugin hooks its commands, ribbon action and settings tab."""

    def add_command(self, command_id: str, name: str,
                    callback: Callable[[NoteEditor], Awaitable[None]],
                    shortcut: str = "") -> None:
        ...

    def add_ribbon_icon(self, icon: str, title: str, callback: Callable[[], Awaitable[None]]) -> None:
        ...

    def add_setting_tab(self, factory: Callable[[Any], Any]) -> None:
        ...
