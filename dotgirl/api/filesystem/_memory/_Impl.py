"""In-memory filesystem implementation for isolated tests.

The tree is keyed by path segment, so a subtree operation on ``/foo`` can
never touch a sibling such as ``/foobar``. Symlinks store their target and
are resolved like the OS resolves them: intermediate components always, the
final component only for operations that follow links.
"""

import copy
import posixpath
from pathlib import Path

from ...DotgirlError import (
    DotgirlError,
    IoFailureError,
    PathConflictError,
    PathNotFoundError,
    PathNotReadableError,
    SourceNotFoundError,
)
from .._AbstractImpl import _AbstractImpl
from ..FilesystemConfig import FilesystemConfig
from ._Data import _Data
from ._Node import _Node, _NodeKind

# Same limit as Linux MAXSYMLINKS
_MAX_SYMLINK_HOPS = 40


def _split(path: Path | str) -> tuple[str, ...]:
    text = str(path)
    if not text.startswith("/"):
        raise IoFailureError(f"Path must be absolute: {text}", path=text)
    return tuple(part for part in posixpath.normpath(text).split("/") if part)


def _join(parts: tuple[str, ...]) -> str:
    return "/" + "/".join(parts)


class _Impl(_AbstractImpl):
    def __init__(self, filesystem_config: FilesystemConfig):
        if not isinstance(filesystem_config.data, _Data):
            raise ValueError("Memory filesystem config data is required")
        self._root = _Node(_NodeKind.DIRECTORY)

    def _lookup(self, parts: tuple[str, ...]) -> _Node | None:
        node = self._root
        for name in parts:
            if node.kind is not _NodeKind.DIRECTORY:
                return None
            child = node.children.get(name)
            if child is None:
                return None
            node = child
        return node

    def _resolve(self, path: Path | str, follow_last: bool = True) -> tuple[str, ...]:
        """Return the segments of path with symlinks resolved."""
        pending = list(_split(path))
        resolved: list[str] = []
        hops = 0
        while pending:
            name = pending.pop(0)
            node = self._lookup((*resolved, name))
            if node is not None and node.kind is _NodeKind.SYMLINK and (pending or follow_last):
                hops += 1
                if hops > _MAX_SYMLINK_HOPS:
                    raise IoFailureError(f"Too many levels of symbolic links: {path}", path=str(path))
                base = _join(tuple(resolved))
                pending = [*_split(posixpath.join(base, node.target)), *pending]
                resolved = []
                continue
            resolved.append(name)
        return tuple(resolved)

    def _directory(self, parts: tuple[str, ...], path: Path) -> _Node:
        node = self._lookup(parts)
        if node is None or node.kind is not _NodeKind.DIRECTORY:
            raise IoFailureError(f"No such directory: {_join(parts)}", path=path)
        return node

    def read(self, path: Path) -> str:
        node = self._lookup(self._resolve(path))
        if node is None:
            raise PathNotFoundError(f"File not found: {path}", path=path)
        if node.kind is not _NodeKind.FILE:
            raise PathNotReadableError(f"File is not readable: {path}", path=path)
        return node.content

    def write(self, path: Path, content: str) -> None:
        parts = self._resolve(path)
        if not parts:
            raise IoFailureError("Is a directory: /", path=path)
        parent = self._directory(parts[:-1], path)
        existing = parent.children.get(parts[-1])
        if existing is not None and existing.kind is _NodeKind.DIRECTORY:
            raise IoFailureError(f"Is a directory: {path}", path=path)
        parent.children[parts[-1]] = _Node(_NodeKind.FILE, content=content)

    def make_directory_tree(self, path: Path) -> None:
        parts = _split(path)
        for depth in range(1, len(parts) + 1):
            prefix = _join(parts[:depth])
            here = self._resolve(prefix, follow_last=False)
            node = self._lookup(here)
            if node is None:
                parent = self._directory(here[:-1], path)
                parent.children[here[-1]] = _Node(_NodeKind.DIRECTORY)
                continue
            if node.kind is _NodeKind.DIRECTORY:
                continue
            if node.kind is _NodeKind.SYMLINK:
                target = self._lookup(self._resolve(prefix))
                if target is not None and target.kind is _NodeKind.DIRECTORY:
                    continue
            raise PathConflictError(f"{prefix} exists and is not a directory", path=prefix)

    def remove(self, path: Path) -> None:
        parts = self._resolve(path, follow_last=False)
        if not parts:
            raise IoFailureError("Refusing to remove the root directory", path=path)
        parent = self._lookup(parts[:-1])
        if parent is None or parent.kind is not _NodeKind.DIRECTORY:
            return
        parent.children.pop(parts[-1], None)

    def copy(self, source: Path, dest: Path) -> None:
        try:
            source_parts = self._resolve(source)
        except DotgirlError as e:
            raise SourceNotFoundError(f"Copy source does not exist: {source}", path=source) from e
        node = self._lookup(source_parts)
        if node is None:
            raise SourceNotFoundError(f"Copy source does not exist: {source}", path=source)
        dest_parts = self._resolve(dest, follow_last=False)
        if not dest_parts or dest_parts[: len(source_parts)] == source_parts:
            raise IoFailureError(f"Cannot copy {source} into itself at {dest}", path=dest)
        parent = self._directory(dest_parts[:-1], dest)
        parent.children[dest_parts[-1]] = copy.deepcopy(node)

    def symlink(self, target: Path, link_path: Path) -> None:
        parts = self._resolve(link_path, follow_last=False)
        if not parts:
            raise IoFailureError("File exists: /", path=link_path)
        parent = self._directory(parts[:-1], link_path)
        if parts[-1] in parent.children:
            raise IoFailureError(f"File exists: {link_path}", path=link_path)
        parent.children[parts[-1]] = _Node(_NodeKind.SYMLINK, target=str(target))

    def read_link(self, path: Path) -> Path:
        node = self._lookup(self._resolve(path, follow_last=False))
        if node is None or node.kind is not _NodeKind.SYMLINK:
            raise IoFailureError(f"Not a symlink: {path}", path=path)
        return Path(node.target)

    def list_dir(self, path: Path) -> list[str]:
        node = self._lookup(self._resolve(path))
        if node is None:
            raise PathNotFoundError(f"Directory not found: {path}", path=path)
        if node.kind is not _NodeKind.DIRECTORY:
            raise IoFailureError(f"Not a directory: {path}", path=path)
        return sorted(node.children)

    def _find(self, path: Path, follow_last: bool) -> _Node | None:
        try:
            return self._lookup(self._resolve(path, follow_last=follow_last))
        except DotgirlError:
            return None

    def is_dir(self, path: Path) -> bool:
        node = self._find(path, follow_last=True)
        return node is not None and node.kind is _NodeKind.DIRECTORY

    def is_file(self, path: Path) -> bool:
        node = self._find(path, follow_last=True)
        return node is not None and node.kind is _NodeKind.FILE

    def is_symlink(self, path: Path) -> bool:
        node = self._find(path, follow_last=False)
        return node is not None and node.kind is _NodeKind.SYMLINK

    def exists(self, path: Path) -> bool:
        return self._find(path, follow_last=False) is not None
