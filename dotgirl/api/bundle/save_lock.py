"""Write the lock file."""

from pathlib import Path

from ...constants import LOCK_FILE
from ..filesystem.Filesystem import Filesystem
from .Lock import Lock


def save_lock(filesystem: Filesystem, storage: Path, lock: Lock) -> None:
    """Overwrite the lock file in full, creating the storage root if needed."""
    filesystem.make_directory_tree(storage)
    filesystem.write(storage / LOCK_FILE, lock.to_json())
