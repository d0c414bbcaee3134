"""Interactive prompt on the controlling terminal using Rich."""

import sys

from rich.console import Console
from rich.prompt import Confirm, Prompt

from ..DotgirlError import PromptUnavailableError
from ._AbstractPrompt import _AbstractPrompt


class TerminalPrompt(_AbstractPrompt):
    """Prompt on stderr, read answers from stdin."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(file=sys.stderr)

    def _require_terminal(self, message: str) -> None:
        if not sys.stdin.isatty():
            raise PromptUnavailableError(f"No interactive terminal to answer: {message}")

    def confirm(self, message: str) -> bool:
        self._require_terminal(message)
        try:
            return Confirm.ask(message, default=False, console=self.console)
        except EOFError as e:
            raise PromptUnavailableError(f"Input closed while asking: {message}") from e

    def select(self, message: str, choices: list[str]) -> int:
        self._require_terminal(message)
        try:
            answer = Prompt.ask(message, choices=choices, default=choices[0], console=self.console)
        except EOFError as e:
            raise PromptUnavailableError(f"Input closed while asking: {message}") from e
        return choices.index(answer)
