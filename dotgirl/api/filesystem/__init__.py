"""Filesystem API module."""

from .Filesystem import Filesystem
from .FilesystemConfig import FilesystemConfig

__all__ = ["Filesystem", "FilesystemConfig"]
