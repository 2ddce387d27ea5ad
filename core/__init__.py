"""
------------------------------------------------------------------------------
Project:        ForestMini
File:           core/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Core logic package for ForestMini. Contains settings,
                the Gemini client, host interfaces and the lens plugin.
------------------------------------------------------------------------------
"""
