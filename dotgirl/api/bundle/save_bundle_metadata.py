"""Write a bundle's metadata file."""

from pathlib import Path

from ...constants import BUNDLE_FILE
from ..filesystem.Filesystem import Filesystem
from .Bundle import Bundle


def save_bundle_metadata(filesystem: Filesystem, bundle_dir: Path, bundle: Bundle) -> None:
    filesystem.write(bundle_dir / BUNDLE_FILE, bundle.to_json())
