import pytest
from pydantic import ValidationError

from core.ai.prompts import AnalysisRequest, AnalysisResult, PROMPT_NOTE_HEADER, PROMPT_SEPARATOR


def test_prompt_layout():
    request = AnalysisRequest(system_prompt="SYSTEM", note_content="NOTE")
    assert request.to_prompt() == f"SYSTEM{PROMPT_SEPARATOR}{PROMPT_NOTE_HEADER}\n\nNOTE"


def test_braces_in_user_text_are_kept():
    """Notes containing template-like text must pass through unchanged."""
    request = AnalysisRequest(system_prompt="Use {note_content} wisely", note_content="dict = {'a': 1}")
    prompt = request.to_prompt()
    assert prompt.startswith("Use {note_content} wisely")
    assert prompt.endswith("dict = {'a': 1}")


def test_empty_system_prompt_is_allowed():
    request = AnalysisRequest(system_prompt="", note_content="NOTE")
    assert request.to_prompt() == f"{PROMPT_SEPARATOR}{PROMPT_NOTE_HEADER}\n\nNOTE"


def test_analysis_result_holds_text():
    result = AnalysisResult(text="Critique: weak premise")
    assert result.text == "Critique: weak premise"


def test_analysis_result_requires_text():
    with pytest.raises(ValidationError):
        AnalysisResult()
