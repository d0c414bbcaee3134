"""Outcome of an add or link pass."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple

from .Bundle import Bundle
from .Entry import Entry


class Skipped(NamedTuple):
    path: Path
    reason: str


@dataclass
class BundleOutcome:
    bundle: Bundle
    linked: list[Entry] = field(default_factory=list)
    skipped: list[Skipped] = field(default_factory=list)
