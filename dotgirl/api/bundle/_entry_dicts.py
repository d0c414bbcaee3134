"""Render entries and skipped inputs for command output."""

from .BundleOutcome import Skipped
from .Entry import Entry


def _entry_dicts(entries: list[Entry]) -> list[dict[str, str]]:
    return [{"local": str(entry.local), "remote": str(entry.remote)} for entry in entries]


def _skipped_dicts(skipped: list[Skipped]) -> list[dict[str, str]]:
    return [{"path": str(item.path), "reason": item.reason} for item in skipped]
