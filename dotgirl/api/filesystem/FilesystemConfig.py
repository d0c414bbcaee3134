"""Filesystem configuration with Pydantic validation."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from ._memory._Data import _Data as _MemoryData
from ._os._Data import _Data as _OsData

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKEND_REGISTRY: dict[str, type[BaseModel]] = {
    "os": _OsData,
    "memory": _MemoryData,
}


class FilesystemConfig(BaseModel):
    _BACKEND_REGISTRY: dict[str, type[BaseModel]] = _BACKEND_REGISTRY

    type: str = Field(..., description="Filesystem backend type")
    data: BaseModel = Field(..., description="Backend-specific configuration data")

    @model_validator(mode="before")
    @classmethod
    def validate_and_populate_data(cls, values: Any) -> dict[str, Any]:
        if not isinstance(values, dict):
            raise ValueError(f"filesystem config must be a dict, got {type(values).__name__}")
        values = dict(values)
        filesystem_type = values.get("type")
        if not filesystem_type:
            raise ValueError("filesystem.type is required")
        config_data_class = _BACKEND_REGISTRY.get(filesystem_type)
        if not config_data_class:
            raise ValueError(f"Unknown backend type: {filesystem_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        data = values.get("data")
        if data is None:
            data = {}
        # Allow empty dict - backend config classes have defaults
        values["data"] = data if isinstance(data, config_data_class) else config_data_class(**data)
        return values
