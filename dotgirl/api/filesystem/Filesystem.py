"""Filesystem public API."""

import importlib
from pathlib import Path

from ._AbstractImpl import _AbstractImpl
from .FilesystemConfig import _BACKEND_REGISTRY, FilesystemConfig


class Filesystem:
    """Public API for filesystem operations.

    Every operation the rest of dotgirl performs on persistent storage goes
    through an instance of this class. Failures surface as DotgirlError
    subclasses; the queries (is_dir, is_file, is_symlink, exists) never raise.
    """

    def __init__(self, filesystem_config: FilesystemConfig):
        self.filesystem_config = filesystem_config
        backend_type = filesystem_config.type

        # Validate backend type using FilesystemConfig registry (single source of truth)
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        # Import implementation class directly from backend _Impl module
        module = importlib.import_module(f"dotgirl.api.filesystem._{backend_type}._Impl")
        self._impl: _AbstractImpl = module._Impl(filesystem_config)

    @classmethod
    def memory(cls) -> "Filesystem":
        """Build an isolated in-memory filesystem."""
        return cls(FilesystemConfig(type="memory", data={}))

    @classmethod
    def os(cls) -> "Filesystem":
        """Build a filesystem backed by the real operating system."""
        return cls(FilesystemConfig(type="os", data={}))

    def read(self, path: str | Path) -> str:
        return self._impl.read(Path(path))

    def write(self, path: str | Path, content: str) -> None:
        self._impl.write(Path(path), content)

    def make_directory_tree(self, path: str | Path) -> None:
        self._impl.make_directory_tree(Path(path))

    def remove(self, path: str | Path) -> None:
        """Recursively delete a path. Nothing to delete is not an error."""
        self._impl.remove(Path(path))

    def copy(self, source: str | Path, dest: str | Path) -> None:
        """Recursively copy a file or directory, replacing whatever is at dest."""
        self._impl.copy(Path(source), Path(dest))

    def symlink(self, target: str | Path, link_path: str | Path) -> None:
        """Create a symlink at link_path pointing at target."""
        self._impl.symlink(Path(target), Path(link_path))

    def read_link(self, path: str | Path) -> Path:
        return self._impl.read_link(Path(path))

    def list_dir(self, path: str | Path) -> list[str]:
        return self._impl.list_dir(Path(path))

    def is_dir(self, path: str | Path) -> bool:
        return self._impl.is_dir(Path(path))

    def is_file(self, path: str | Path) -> bool:
        return self._impl.is_file(Path(path))

    def is_symlink(self, path: str | Path) -> bool:
        return self._impl.is_symlink(Path(path))

    def exists(self, path: str | Path) -> bool:
        return self._impl.exists(Path(path))
