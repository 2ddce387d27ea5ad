"""
------------------------------------------------------------------------------
Project:        ForestMini
File:           core/errors.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    User-facing error taxonomy for the Mephisto lens. The message
                of every error is shown verbatim in the lens panel and in
                the status notice.
------------------------------------------------------------------------------
"""


class ForestMiniError(Exception):
    """Base class for all errors surfaced to the user."""

    default_message: str = "Unknown error occurred during analysis"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class ConfigurationError(ForestMiniError):
    """Missing or malformed API key."""
    default_message = "API key is required"


class NotInitializedError(ForestMiniError):
    default_message = "Gemini client not initialized. Please set your API key in settings."


class EmptyInputError(ForestMiniError):
    default_message = "Note content is empty"


class EmptyResponseError(ForestMiniError):
    default_message = "Empty response from Gemini API"


class InvalidApiKeyError(ForestMiniError):
    default_message = "Invalid API key. Please check your settings."


class QuotaExceededError(ForestMiniError):
    default_message = "API quota exceeded. Please try again later."


class AnalysisFailedError(ForestMiniError):
    """Catch-all for provider failures; wraps the provider's message."""

    def __init__(self, provider_message: str = "") -> None:
        self.provider_message = provider_message
        super().__init__(f"Analysis failed: {provider_message}")


class UnknownError(ForestMiniError):
    """Provider layer failed without a usable message."""
