"""Read a bundle's metadata file."""

from pathlib import Path

from ...constants import BUNDLE_FILE
from ..DotgirlError import BundleMissingMetadataError, BundleNotFoundError
from ..filesystem.Filesystem import Filesystem
from .Bundle import Bundle


def load_bundle_metadata(filesystem: Filesystem, bundle_dir: Path) -> Bundle:
    """Load the Bundle stored in bundle_dir.

    Raises:
        BundleNotFoundError: If bundle_dir does not exist
        BundleMissingMetadataError: If bundle_dir exists without a metadata file
        SerializationFailureError: If the metadata file is malformed
    """
    if not filesystem.is_dir(bundle_dir):
        raise BundleNotFoundError(f"Bundle `{bundle_dir.name}` not found at {bundle_dir}", path=bundle_dir)

    path = bundle_dir / BUNDLE_FILE
    if not filesystem.is_file(path):
        raise BundleMissingMetadataError(f"Bundle `{bundle_dir.name}` has no {BUNDLE_FILE}", path=path)

    return Bundle.from_json(filesystem.read(path), source=str(path))
