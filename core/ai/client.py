"""
------------------------------------------------------------------------------
Project:        ForestMini
File:           core/ai/client.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Technical client for Google Gemini API interaction.
                Sends a note through the Mephisto lens and maps provider
                failures onto the user-facing error taxonomy.
------------------------------------------------------------------------------
"""

from typing import Optional

from google import genai
from google.genai import errors

from core.ai.prompts import AnalysisRequest, AnalysisResult
from core.errors import (
    AnalysisFailedError,
    ConfigurationError,
    EmptyInputError,
    EmptyResponseError,
    InvalidApiKeyError,
    NotInitializedError,
    QuotaExceededError,
    UnknownError,
)
from core.logger import get_logger, log_ai_interaction

logger = get_logger("ai.gemini")


class GeminiClient:
    """
    Gemini API client for the Mephisto lens.
    One request per analyze() call, no retries.
    """

    MODEL_NAME: str = "gemini-2.0-flash"

    def __init__(self) -> None:
        self.client: Optional[genai.Client] = None
        self.model_name: Optional[str] = None

    def initialize(self, api_key: str) -> None:
        """
        Creates the provider handle. Calling it again replaces the handle.

        Args:
            api_key: The Google GenAI API key.

        Raises:
            ConfigurationError: If the key is empty or whitespace.
        """
        if not api_key or api_key.strip() == "":
            raise ConfigurationError("API key is required")

        self.client = genai.Client(api_key=api_key)
        self.model_name = self.MODEL_NAME
        logger.info(f"Gemini client initialized (model: {self.model_name})")

    def is_initialized(self) -> bool:
        return self.client is not None

    async def analyze(self, system_prompt: str, note_content: str) -> str:
        """
        Runs the note through the Mephisto lens.

        Args:
            system_prompt: The configured critique prompt.
            note_content: Full text of the note.

        Returns:
            The critique text as returned by Gemini.
        """
        if not self.is_initialized():
            raise NotInitializedError()

        if not note_content or note_content.strip() == "":
            raise EmptyInputError()

        request = AnalysisRequest(system_prompt=system_prompt, note_content=note_content)
        full_prompt = request.to_prompt()

        try:
            response = await self.client.aio.models.generate_content(
                model=self.model_name,
                contents=full_prompt,
            )
        except errors.APIError as e:
            logger.error(f"Gemini API error: {e}")
            raise self._map_api_error(e) from e
        except Exception as e:
            logger.error(f"Gemini request failed: {e}")
            if not str(e):
                raise UnknownError() from e
            raise AnalysisFailedError(str(e)) from e

        result = AnalysisResult(text=response.text or "")
        if not result.text:
            raise EmptyResponseError()

        log_ai_interaction(full_prompt, result.text)
        return result.text

    def _map_api_error(self, e: errors.APIError) -> Exception:
        """Translates a provider error into the user-facing taxonomy."""
        raw = str(e)
        if "API_KEY_INVALID" in raw:
            return InvalidApiKeyError()
        if self._is_quota_error(e):
            return QuotaExceededError()
        return AnalysisFailedError(e.message or raw)

    def _is_quota_error(self, e: errors.APIError) -> bool:
        """Checks if the exception is a quota/rate limit (429) error."""
        if getattr(e, "code", None) == 429:
            return True
        raw = str(e)
        return "RESOURCE_EXHAUSTED" in raw or "QUOTA_EXCEEDED" in raw
