"""OS filesystem configuration data."""

from pydantic import BaseModel, ConfigDict


class _Data(BaseModel):
    """OS filesystem configuration data.

    Note: The OS backend operates on the real filesystem and needs no settings.
    """

    model_config = ConfigDict(extra="forbid")
