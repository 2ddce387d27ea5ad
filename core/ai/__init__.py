"""
------------------------------------------------------------------------------
Project:        ForestMini
File:           core/ai/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Package for AI-related components: the Gemini client and
                the lens prompt template.
------------------------------------------------------------------------------
"""

from .client import GeminiClient
