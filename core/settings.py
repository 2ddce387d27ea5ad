"""
------------------------------------------------------------------------------
Project:        ForestMini
File:           core/settings.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Plugin settings model (Gemini API key and Mephisto prompt)
                and the store that merges persisted values over defaults.
------------------------------------------------------------------------------
"""

from typing import Optional

from pydantic import BaseModel

from core.host import DataStore
from core.logger import get_logger

logger = get_logger("settings")

DEFAULT_PROMPT = """You are Mephisto, a ruthlessly honest critic and meta-cognitive analyst.
Your role is to analyze the user's note with brutal honesty and provide insights on:
- Logic flaws and weak reasoning
- Unexamined assumptions
- Missing perspectives
- Cognitive biases
- Areas requiring deeper thinking

Be direct, critical, and constructive. Focus on improving the quality of thinking."""


class LensSettings(BaseModel):
    """
    Persisted plugin configuration.
    """

    # Google Gemini API key, validated lazily by the client
    api_key: str = ""

    # System prompt sent ahead of every note
    prompt: str = DEFAULT_PROMPT


DEFAULT_SETTINGS = LensSettings()


class SettingsStore:
    """
    Loads and saves LensSettings through the host's DataStore.
    Persisted fields override defaults one by one.
    """

    def __init__(self, data_store: DataStore) -> None:
        self.data_store = data_store

    def load(self) -> LensSettings:
        raw: Optional[dict] = self.data_store.load_data() or {}
        merged = DEFAULT_SETTINGS.model_dump()
        for key, value in raw.items():
            if key in LensSettings.model_fields:
                merged[key] = value
            else:
                logger.debug(f"Ignoring unknown settings key '{key}'")
        return LensSettings(**merged)

    def save(self, settings: LensSettings) -> None:
        self.data_store.save_data(settings.model_dump())
