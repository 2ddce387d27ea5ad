"""
------------------------------------------------------------------------------
Project:        ForestMini
File:           core/ai/prompts.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Prompt template for the Mephisto lens. Combines the configured
                system prompt with the note content.
------------------------------------------------------------------------------
"""

from pydantic import BaseModel

PROMPT_SEPARATOR = "\n\n---\n\n"
PROMPT_NOTE_HEADER = "Analyze the following note:"

PROMPT_LENS_ANALYSIS = "{system_prompt}" + PROMPT_SEPARATOR + PROMPT_NOTE_HEADER + "\n\n{note_content}"


class AnalysisRequest(BaseModel):
    """One analysis invocation. Never persisted."""

    system_prompt: str
    note_content: str

    def to_prompt(self) -> str:
        return PROMPT_LENS_ANALYSIS.format(
            system_prompt=self.system_prompt,
            note_content=self.note_content,
        )


class AnalysisResult(BaseModel):
    """Critique text returned for one request."""

    text: str
