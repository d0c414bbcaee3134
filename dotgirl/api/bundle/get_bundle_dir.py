"""Locate a bundle's storage directory."""

from pathlib import Path

from ...constants import BUNDLE_DIR
from ..DotgirlError import PathComponentInvalidError
from .Bundle import Bundle


def get_bundle_dir(storage: Path, bundle_id: str) -> Path:
    """Return ``<storage>/bundle/<bundle_id>``.

    Raises:
        PathComponentInvalidError: If bundle_id is not a single path component
    """
    if not Bundle.is_valid_id(bundle_id):
        raise PathComponentInvalidError(f"Invalid bundle id {bundle_id!r}: must be a single path component")
    return storage / BUNDLE_DIR / bundle_id
