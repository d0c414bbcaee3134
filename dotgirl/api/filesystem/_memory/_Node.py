"""Tree node for the in-memory filesystem."""

from dataclasses import dataclass, field
from enum import Enum


class _NodeKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"


@dataclass
class _Node:
    kind: _NodeKind
    content: str = ""
    target: str = ""
    children: dict[str, "_Node"] = field(default_factory=dict)
