"""Config API module."""

from .DotgirlConfig import DotgirlConfig
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig
from .normalize_path import normalize_path

__all__ = ["DotgirlConfig", "LogConfig", "get_home_dir", "normalize_path"]
