"""Normalize a path for dotgirl.

Expands user home directory (~) and returns an absolute path with ``.``
and ``..`` segments collapsed, WITHOUT resolving symlinks. Inputs that are
symlinks must stay recognizable as symlinks.
"""

import os
from pathlib import Path


def normalize_path(path: str | Path) -> Path:
    """Expand user and return absolute path (no symlink resolution)."""
    return Path(os.path.normpath(Path(path).expanduser().absolute()))
