"""
------------------------------------------------------------------------------
Project:        ForestMini
File:           core/plugin.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    The Forest Mini plugin. Wires settings, the Gemini client and
                the Mephisto lens panel into the host and runs the
                "Analyze with Mephisto" command.
------------------------------------------------------------------------------
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from core.ai.client import GeminiClient
from core.errors import ConfigurationError
from core.host import CommandRegistry, NoteEditor, Notifier, PanelFactory, ResultPanel, Workspace
from core.logger import get_logger
from core.settings import LensSettings, SettingsStore

logger = get_logger("plugin")

LENS_VIEW_TYPE = "forest-mini-lens-view"

COMMAND_ANALYZE_ID = "analyze-with-mephisto"
COMMAND_ANALYZE_NAME = "Analyze with Mephisto"

MSG_MISSING_KEY = "Please set your Gemini API key in settings first."
MSG_INIT_FAILED = "Failed to initialize Gemini client. Check your API key."
MSG_NO_VIEW = "Failed to open Lens View"
MSG_ANALYZING = "Analyzing with Mephisto..."
MSG_EMPTY_NOTE = "Current note is empty"
MSG_COMPLETE = "Analysis complete!"


@dataclass
class PluginContext:
    """
    Everything the plugin needs from the application.
    Created on startup and handed to the plugin and the settings surface.
    """
    store: SettingsStore
    workspace: Workspace
    notifier: Notifier
    commands: CommandRegistry
    view_factory: PanelFactory
    settings_tab_factory: Optional[Callable[["ForestMiniPlugin", Any], Any]] = None
    client: GeminiClient = field(default_factory=GeminiClient)
    settings: LensSettings = field(default_factory=LensSettings)


class ForestMiniPlugin:
    """
    Analyzes the current note through the Mephisto lens.
    """

    def __init__(self, context: PluginContext) -> None:
        self.context = context

    @property
    def settings(self) -> LensSettings:
        return self.context.settings

    @property
    def client(self) -> GeminiClient:
        return self.context.client

    def on_load(self) -> None:
        logger.info("Loading Forest Mini plugin")
        self.load_settings()

        if self.settings.api_key:
            try:
                self.client.initialize(self.settings.api_key)
            except ConfigurationError as e:
                logger.error(f"Failed to initialize Gemini client: {e}")

        ctx = self.context
        ctx.workspace.register_panel_type(LENS_VIEW_TYPE, ctx.view_factory)
        ctx.commands.add_ribbon_icon("tree-deciduous", "Forest Mini", self.activate_lens_view)
        ctx.commands.add_command(COMMAND_ANALYZE_ID, COMMAND_ANALYZE_NAME,
                                 self.analyze_current_note, shortcut="Ctrl+Shift+M")
        if ctx.settings_tab_factory is not None:
            ctx.commands.add_setting_tab(lambda parent=None: ctx.settings_tab_factory(self, parent))

    def on_unload(self) -> None:
        logger.info("Unloading Forest Mini plugin")
        self.context.workspace.detach_panels_of_type(LENS_VIEW_TYPE)

    def load_settings(self) -> None:
        self.context.settings = self.context.store.load()

    def save_settings(self) -> None:
        self.context.store.save(self.context.settings)

    def set_api_key(self, value: str) -> None:
        """Settings surface: persist the key and re-initialize the client."""
        self.context.settings.api_key = value
        self.save_settings()

        if value:
            try:
                self.client.initialize(value)
                self.context.notifier.notify("API key saved and client initialized")
            except ConfigurationError:
                self.context.notifier.notify("Invalid API key")

    def set_prompt(self, value: str) -> None:
        """Settings surface: persist the Mephisto prompt as typed."""
        self.context.settings.prompt = value
        self.save_settings()

    async def activate_lens_view(self) -> None:
        """Opens the lens panel in the right dock, reusing an existing one."""
        workspace = self.context.workspace

        leaves = workspace.get_panels_of_type(LENS_VIEW_TYPE)
        leaf = leaves[0] if leaves else None

        if leaf is None:
            right_leaf = workspace.create_right_panel()
            if right_leaf is not None:
                await workspace.set_panel_state(right_leaf, {"type": LENS_VIEW_TYPE, "active": True})
                leaves = workspace.get_panels_of_type(LENS_VIEW_TYPE)
                leaf = leaves[0] if leaves else None

        if leaf is not None:
            workspace.reveal_panel(leaf)

    def get_lens_view(self) -> Optional[ResultPanel]:
        leaves = self.context.workspace.get_panels_of_type(LENS_VIEW_TYPE)
        if not leaves:
            return None
        return leaves[0].view

    async def analyze_current_note(self, editor: NoteEditor) -> None:
        """
        The "Analyze with Mephisto" command.
        Every failure ends up as a notice and in the panel's error state.
        """
        notifier = self.context.notifier

        if not self.settings.api_key:
            notifier.notify(MSG_MISSING_KEY)
            return

        if not self.client.is_initialized():
            try:
                self.client.initialize(self.settings.api_key)
            except ConfigurationError:
                notifier.notify(MSG_INIT_FAILED)
                return

        try:
            await self.activate_lens_view()
        except Exception as e:
            logger.error(f"Lens view activation failed: {e}", exc_info=True)
            notifier.notify(MSG_NO_VIEW)
            return

        lens_view = self.get_lens_view()
        if lens_view is None:
            notifier.notify(MSG_NO_VIEW)
            return

        lens_view.show_loading()
        notifier.notify(MSG_ANALYZING)

        try:
            note_content = editor.get_value()

            if not note_content or note_content.strip() == "":
                lens_view.show_error(MSG_EMPTY_NOTE)
                notifier.notify(MSG_EMPTY_NOTE)
                return

            analysis = await self.client.analyze(self.settings.prompt, note_content)

            await lens_view.show_result(analysis)
            notifier.notify(MSG_COMPLETE)

        except Exception as e:
            logger.error(f"Analysis error: {e}", exc_info=True)
            error_message = str(e) or "Unknown error"
            lens_view.show_error(error_message)
            notifier.notify(f"Analysis failed: {error_message}")
