"""
------------------------------------------------------------------------------
Project:        ForestMini
File:           core/panel_state.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    What the lens panel currently shows.
------------------------------------------------------------------------------
"""

from dataclasses import dataclass
from enum import Enum


class PanelStateKind(Enum):
    WELCOME = "welcome"
    LOADING = "loading"
    RESULT = "result"
    ERROR = "error"


@dataclass(frozen=True)
class PanelState:
    """
    Exactly one state is active at a time.
    `text` carries the critique for RESULT and the message for ERROR.
    """
    kind: PanelStateKind
    text: str = ""

    @classmethod
    def welcome(cls) -> "PanelState":
        return cls(PanelStateKind.WELCOME)

    @classmethod
    def loading(cls) -> "PanelState":
        return cls(PanelStateKind.LOADING)

    @classmethod
    def result(cls, text: str) -> "PanelState":
        return cls(PanelStateKind.RESULT, text)

    @classmethod
    def error(cls, message: str) -> "PanelState":
        return cls(PanelStateKind.ERROR, message)
