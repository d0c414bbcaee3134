"""Derive the storage name for an ingested path."""

from pathlib import Path

from ..DotgirlError import PathComponentInvalidError


def get_name(path: Path) -> str:
    """Final path component with a single leading dot stripped.

    Examples:
        >>> get_name(Path("/home/u/.bashrc"))
        'bashrc'
        >>> get_name(Path("/home/u/.config/nvim"))
        'nvim'

    Raises:
        PathComponentInvalidError: If the path has no nameable final component (e.g. ``/``)
    """
    name = path.name
    if name in ("", ".", ".."):
        raise PathComponentInvalidError(f"Path has no usable final component: {path}", path=path)
    stripped = name[1:] if name.startswith(".") else name
    if not stripped:
        raise PathComponentInvalidError(f"Path has no usable final component: {path}", path=path)
    return stripped
