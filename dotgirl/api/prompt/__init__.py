"""Prompt API module."""

from .ScriptedPrompt import ScriptedPrompt
from .TerminalPrompt import TerminalPrompt

__all__ = ["ScriptedPrompt", "TerminalPrompt"]
