"""API module for dotgirl.

Functions defined here serve as the single source of truth for the CLI commands.
"""

from .DotgirlError import DotgirlError
from .ErrorKind import ErrorKind

__all__ = ["DotgirlError", "ErrorKind"]
