"""Entry model: one managed path and its storage copy."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class Entry(BaseModel):
    """A storage copy (local) and the original location that links to it (remote)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    local: Path = Field(..., description="Absolute path of the copy inside the bundle's storage directory")
    remote: Path = Field(..., description="Absolute original location, replaced by a symlink to local")
