"""
------------------------------------------------------------------------------
Project:        ForestMini
File:           core/config.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Manages application configuration using QSettings. Standardizes
                the data path across different platforms
                (XDG standards on Linux) and stores the plugin data blob.
------------------------------------------------------------------------------
"""

import json
from pathlib import Path
from typing import Any, Optional

from PyQt6.QtCore import QSettings, QStandardPaths


class AppConfig:
    """
    Manages application configuration using QSettings.
    Also acts as the persistence backend for plugin data
    (load_data/save_data).
    """

    KEY_LOG_LEVEL: str = "log_level"
    KEY_LOG_COMPONENTS: str = "log_components"
    KEY_WINDOW_GEOMETRY: str = "geometry"
    KEY_WINDOW_STATE: str = "state"

    # Plugin data lives below this group, one key per field
    PLUGIN_GROUP: str = "Plugins/forest-mini"

    DEFAULT_LOG_LEVEL: str = "WARNING"

    APP_ID: str = "forestmini"
    _active_profile: Optional[str] = None

    def __init__(self, profile: Optional[str] = None) -> None:
        """
        Initializes the configuration manager.

        Args:
            profile: Optional profile name (e.g. 'dev', 'test').
                    If provided, all paths and settings will be isolated (e.g. forestmini-dev).
        """
        # If no profile provided, use the last active one
        if profile is None:
            profile = AppConfig._active_profile
        else:
            AppConfig._active_profile = profile

        self.profile = profile
        self.active_id = self.APP_ID
        if profile:
            self.active_id = f"{self.APP_ID}-{profile}"

        self.settings = QSettings(self.active_id, self.active_id)

    def get_data_dir(self) -> Path:
        """
        Returns the path to the application data directory.
        Forces a flat structure: ~/.local/share/forestmini[-profile]/
        """
        base_path = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.GenericDataLocation)
        data_dir = Path(base_path) / self.active_id
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def _get_setting(self, group: str, key: str, default: Any = None) -> Any:
        """
        Helper to retrieve a setting value from a specific group.

        Args:
            group: The configuration group name.
            key: The setting key.
            default: The default value if not found.

        Returns:
            The retrieved value or default.
        """
        if group:
            self.settings.beginGroup(group)
        val = self.settings.value(key, default)
        if group:
            self.settings.endGroup()
        return val

    def _set_setting(self, group: str, key: str, value: Any) -> None:
        """
        Helper to save a setting value into a specific group.

        Args:
            group: The configuration group name.
            key: The setting key.
            value: The value to save.
        """
        if isinstance(value, str):
            value = value.strip()

        if group:
            self.settings.beginGroup(group)
        self.settings.setValue(key, value)
        if group:
            self.settings.endGroup()

    def load_data(self) -> dict:
        """
        Returns the persisted plugin data as a flat dict.
        Only keys that were saved at least once are present.
        """
        self.settings.beginGroup(self.PLUGIN_GROUP)
        try:
            data = {}
            for key in self.settings.childKeys():
                val = self.settings.value(key)
                data[key] = "" if val is None else str(val)
            return data
        finally:
            self.settings.endGroup()

    def save_data(self, data: dict) -> None:
        """
        Persists the plugin data blob. Values are stored verbatim;
        user prompts keep their surrounding whitespace.
        """
        self.settings.beginGroup(self.PLUGIN_GROUP)
        for key, value in data.items():
            self.settings.setValue(key, value)
        self.settings.endGroup()
        self.settings.sync()

    def get_window_geometry(self) -> Any:
        """Returns the saved main window geometry (QByteArray) or None."""
        return self._get_setting("Window", self.KEY_WINDOW_GEOMETRY)

    def set_window_geometry(self, geometry: Any) -> None:
        self._set_setting("Window", self.KEY_WINDOW_GEOMETRY, geometry)

    def get_window_state(self) -> Any:
        """Returns the saved dock/toolbar layout (QByteArray) or None."""
        return self._get_setting("Window", self.KEY_WINDOW_STATE)

    def set_window_state(self, state: Any) -> None:
        self._set_setting("Window", self.KEY_WINDOW_STATE, state)

    def get_log_level(self) -> str:
        """Retrieves the global log level."""
        return str(self._get_setting("Logging", self.KEY_LOG_LEVEL, self.DEFAULT_LOG_LEVEL))

    def set_log_level(self, level: str) -> None:
        """Saves the global log level."""
        self._set_setting("Logging", self.KEY_LOG_LEVEL, level.upper())

    def get_log_components(self) -> dict:
        """Retrieves a dictionary of component-specific log levels."""
        raw = str(self._get_setting("Logging", self.KEY_LOG_COMPONENTS, "{}"))
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            return {}

    def set_log_components(self, components: dict) -> None:
        """Saves a dictionary of component-specific log levels."""
        self._set_setting("Logging", self.KEY_LOG_COMPONENTS, json.dumps(components))

    def get_log_file_path(self) -> Path:
        """Returns the absolute path to the log file."""
        return self.get_data_dir() / "app.log"
