"""Bundle API module."""

from .._output_schemas.bundle import BundleAddOutput, BundleLinkOutput, BundleStatusOutput
from .Bundle import Bundle
from .Entry import Entry
from .Lock import Lock

__all__ = [
    "Bundle",
    "BundleAddOutput",
    "BundleLinkOutput",
    "BundleStatusOutput",
    "Entry",
    "Lock",
]
