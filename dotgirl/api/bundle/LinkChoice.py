"""Answers offered when a link target already exists."""

from enum import IntEnum


class LinkChoice(IntEnum):
    SKIP = 0
    OVERWRITE = 1
    OVERWRITE_ALL = 2

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", " ")

    @classmethod
    def labels(cls) -> list[str]:
        return [choice.label for choice in cls]
