"""Prompt that replays canned answers, for tests and non-interactive runs."""

from collections import deque

from ..DotgirlError import PromptUnavailableError
from ._AbstractPrompt import _AbstractPrompt


class ScriptedPrompt(_AbstractPrompt):
    """Answer prompts from queues and record every question asked.

    Running out of answers behaves like having no terminal.
    """

    def __init__(self, confirms: list[bool] | None = None, selections: list[int] | None = None):
        self._confirms = deque(confirms or [])
        self._selections = deque(selections or [])
        self.calls: list[tuple[str, str]] = []

    def confirm(self, message: str) -> bool:
        self.calls.append(("confirm", message))
        if not self._confirms:
            raise PromptUnavailableError(f"No scripted answer for: {message}")
        return self._confirms.popleft()

    def select(self, message: str, choices: list[str]) -> int:
        self.calls.append(("select", message))
        if not self._selections:
            raise PromptUnavailableError(f"No scripted answer for: {message}")
        selection = self._selections.popleft()
        if not 0 <= selection < len(choices):
            raise ValueError(f"Scripted selection {selection} out of range for {choices}")
        return selection
