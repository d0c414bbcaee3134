"""Bundle model: a named group of entries."""

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..DotgirlError import SerializationFailureError
from .Entry import Entry


class Bundle(BaseModel):
    """A named, ordered group of entries stored under ``bundle/<id>/``."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., description="User-chosen bundle name, a single path component")
    entries: list[Entry] = Field(default_factory=list, description="Entries in link order")

    @staticmethod
    def is_valid_id(bundle_id: str) -> bool:
        return bool(bundle_id) and "/" not in bundle_id and "\0" not in bundle_id and bundle_id not in (".", "..")

    @field_validator("id")
    @classmethod
    def _validate_id(cls, v: str) -> str:
        if not cls.is_valid_id(v):
            raise ValueError(f"Invalid bundle id {v!r}: must be a single path component")
        return v

    @classmethod
    def from_json(cls, text: str, source: str = "bundle") -> "Bundle":
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise SerializationFailureError(f"Malformed bundle metadata in {source}: {e}", path=source) from e

    def to_json(self) -> str:
        return self.model_dump_json(indent=2) + "\n"
