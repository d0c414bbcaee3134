"""Read the lock file."""

from pathlib import Path

from ...constants import LOCK_FILE
from ..filesystem.Filesystem import Filesystem
from .Lock import Lock


def load_lock(filesystem: Filesystem, storage: Path) -> Lock:
    """Load the lock from storage; an absent lock file is an empty Lock."""
    path = storage / LOCK_FILE
    if not filesystem.is_file(path):
        return Lock()
    return Lock.from_json(filesystem.read(path), source=str(path))
