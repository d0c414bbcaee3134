"""Lock model: the bundles currently believed to be linked."""

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..DotgirlError import SerializationFailureError
from .Bundle import Bundle


class Lock(BaseModel):
    """Record of linked bundles, at most one per id."""

    model_config = ConfigDict(extra="forbid")

    bundles: list[Bundle] = Field(default_factory=list, description="Linked bundles with their linked entries")

    @model_validator(mode="after")
    def _unique_ids(self) -> "Lock":
        ids = [bundle.id for bundle in self.bundles]
        duplicates = sorted({bundle_id for bundle_id in ids if ids.count(bundle_id) > 1})
        if duplicates:
            raise ValueError(f"Duplicate bundle ids in lock: {duplicates}")
        return self

    def find(self, bundle_id: str) -> Bundle | None:
        for bundle in self.bundles:
            if bundle.id == bundle_id:
                return bundle
        return None

    def put(self, bundle: Bundle) -> None:
        """Replace the record for bundle.id: drop the prior one, append the new one."""
        self.bundles = [it for it in self.bundles if it.id != bundle.id]
        self.bundles.append(bundle)

    @classmethod
    def from_json(cls, text: str, source: str = "lock") -> "Lock":
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise SerializationFailureError(f"Malformed lock file {source}: {e}", path=source) from e

    def to_json(self) -> str:
        return self.model_dump_json(indent=2) + "\n"
