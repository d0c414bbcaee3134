"""Filesystem implementation backed by the real operating system."""

import os
import shutil
import tempfile
from contextlib import suppress
from pathlib import Path

from ...DotgirlError import (
    IoFailureError,
    PathConflictError,
    PathNotFoundError,
    PathNotReadableError,
    SourceNotFoundError,
)
from .._AbstractImpl import _AbstractImpl
from ..FilesystemConfig import FilesystemConfig
from ._Data import _Data


class _Impl(_AbstractImpl):
    def __init__(self, filesystem_config: FilesystemConfig):
        if not isinstance(filesystem_config.data, _Data):
            raise ValueError("OS filesystem config data is required")

    def read(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise PathNotFoundError(f"File not found: {path}", path=path) from e
        except (IsADirectoryError, PermissionError, UnicodeDecodeError) as e:
            raise PathNotReadableError(f"File is not readable: {path}", path=path) from e
        except OSError as e:
            raise IoFailureError(f"Failed to read {path}: {e}", path=path) from e

    def write(self, path: Path, content: str) -> None:
        # Write through an existing symlink the way open() would
        target = Path(os.path.realpath(path))
        if target.is_dir():
            raise IoFailureError(f"Is a directory: {path}", path=path)
        temp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=target.parent, prefix=f".{target.name}.", suffix=".tmp", delete=False
            ) as fh:
                temp_name = fh.name
                fh.write(content)
            os.replace(temp_name, target)
        except OSError as e:
            if temp_name is not None:
                with suppress(OSError):
                    os.unlink(temp_name)
            raise IoFailureError(f"Failed to write {path}: {e}", path=path) from e

    def make_directory_tree(self, path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except (FileExistsError, NotADirectoryError) as e:
            raise PathConflictError(f"A non-directory blocks {path}", path=path) from e
        except OSError as e:
            raise IoFailureError(f"Failed to create {path}: {e}", path=path) from e

    def remove(self, path: Path) -> None:
        try:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            elif os.path.lexists(path):
                path.unlink()
        except OSError as e:
            raise IoFailureError(f"Failed to remove {path}: {e}", path=path) from e

    def copy(self, source: Path, dest: Path) -> None:
        if not source.exists():
            raise SourceNotFoundError(f"Copy source does not exist: {source}", path=source)
        resolved_source = source.resolve()
        resolved_dest = Path(os.path.realpath(dest.parent)) / dest.name
        if resolved_dest.is_relative_to(resolved_source):
            raise IoFailureError(f"Cannot copy {source} into itself at {dest}", path=dest)
        self.remove(dest)
        try:
            if source.is_dir():
                shutil.copytree(source, dest, symlinks=True)
            else:
                shutil.copy2(source, dest)
        except OSError as e:
            raise IoFailureError(f"Failed to copy {source} to {dest}: {e}", path=dest) from e

    def symlink(self, target: Path, link_path: Path) -> None:
        try:
            os.symlink(target, link_path)
        except OSError as e:
            raise IoFailureError(f"Failed to link {link_path} -> {target}: {e}", path=link_path) from e

    def read_link(self, path: Path) -> Path:
        try:
            return Path(os.readlink(path))
        except OSError as e:
            raise IoFailureError(f"Not a symlink: {path}", path=path) from e

    def list_dir(self, path: Path) -> list[str]:
        try:
            return sorted(os.listdir(path))
        except FileNotFoundError as e:
            raise PathNotFoundError(f"Directory not found: {path}", path=path) from e
        except OSError as e:
            raise IoFailureError(f"Failed to list {path}: {e}", path=path) from e

    def is_dir(self, path: Path) -> bool:
        return os.path.isdir(path)

    def is_file(self, path: Path) -> bool:
        return os.path.isfile(path)

    def is_symlink(self, path: Path) -> bool:
        return os.path.islink(path)

    def exists(self, path: Path) -> bool:
        return os.path.lexists(path)
