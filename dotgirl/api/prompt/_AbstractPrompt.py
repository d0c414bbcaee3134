"""Abstract base class for interactive prompt implementations."""

from abc import ABC, abstractmethod


class _AbstractPrompt(ABC):
    @abstractmethod
    def confirm(self, message: str) -> bool:
        """Ask a yes/no question. Defaults to no.

        Raises:
            PromptUnavailableError: If no answer can be obtained
        """
        pass

    @abstractmethod
    def select(self, message: str, choices: list[str]) -> int:
        """Ask the user to pick one of choices. Defaults to the first.

        Returns:
            Index of the chosen item in choices

        Raises:
            PromptUnavailableError: If no answer can be obtained
        """
        pass
