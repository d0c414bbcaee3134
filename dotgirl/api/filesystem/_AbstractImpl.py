"""Abstract base class for filesystem backend implementations."""

from abc import ABC, abstractmethod
from pathlib import Path


class _AbstractImpl(ABC):
    @abstractmethod
    def read(self, path: Path) -> str:
        pass

    @abstractmethod
    def write(self, path: Path, content: str) -> None:
        pass

    @abstractmethod
    def make_directory_tree(self, path: Path) -> None:
        pass

    @abstractmethod
    def remove(self, path: Path) -> None:
        pass

    @abstractmethod
    def copy(self, source: Path, dest: Path) -> None:
        pass

    @abstractmethod
    def symlink(self, target: Path, link_path: Path) -> None:
        pass

    @abstractmethod
    def read_link(self, path: Path) -> Path:
        pass

    @abstractmethod
    def list_dir(self, path: Path) -> list[str]:
        pass

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        pass

    @abstractmethod
    def is_file(self, path: Path) -> bool:
        pass

    @abstractmethod
    def is_symlink(self, path: Path) -> bool:
        pass

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """True if anything occupies the path, including a dangling symlink."""
        pass
