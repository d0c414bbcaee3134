"""In-memory filesystem configuration data for testing."""

from pydantic import BaseModel, ConfigDict


class _Data(BaseModel):
    """In-memory filesystem configuration data.

    Note: Every Filesystem built from this config starts from an empty tree
    containing only the root directory.
    """

    model_config = ConfigDict(extra="forbid")
