"""Top-level dotgirl configuration."""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import CONFIG_FILE
from ..DotgirlError import ConfigInvalidError
from ..filesystem.FilesystemConfig import FilesystemConfig
from .LogConfig import LogConfig


def _default_filesystem() -> FilesystemConfig:
    return FilesystemConfig(type="os", data={})


class DotgirlConfig(BaseModel):
    """Top-level configuration, read from ``<storage>/config.json``."""

    model_config = ConfigDict(extra="forbid")

    filesystem: FilesystemConfig = Field(default_factory=_default_filesystem)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls, home: Path) -> Path:
        """Get path to config file under the storage root."""
        return home / CONFIG_FILE

    @classmethod
    def load(cls, home: Path) -> "DotgirlConfig":
        """Load and validate config from file.

        A missing config file is not an error: every section has a default.

        Raises:
            ConfigInvalidError: If the file is not valid JSON or fails validation
        """
        path = cls.get_config_path(home)

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ConfigInvalidError(f"Invalid JSON in config file {path}: {e}", path=path) from e
        except OSError as e:
            raise ConfigInvalidError(f"Cannot read config file {path}: {e}", path=path) from e

        if not isinstance(raw, dict):
            raise ConfigInvalidError(f"Config file {path} must contain a JSON object", path=path)

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ConfigInvalidError(f"Configuration validation error: {detail}", path=path) from e
