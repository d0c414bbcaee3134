"""Exception hierarchy for dotgirl.

Every failure surfaced by the API is a ``DotgirlError`` subclass tagged with
an ``ErrorKind``. Failure sites raise the specific subclass explicitly.
"""

from pathlib import Path

from .ErrorKind import ErrorKind


class DotgirlError(Exception):
    """Base class for all dotgirl errors."""

    kind: ErrorKind = ErrorKind.IO_FAILURE

    def __init__(self, message: str, path: str | Path | None = None):
        self.message = message
        self.path = str(path) if path is not None else None
        super().__init__(message)

    def describe(self) -> str:
        """Kind-prefixed message for display."""
        return f"{self.kind.value}: {self.message}"


class IoFailureError(DotgirlError):
    """Raised when the storage medium fails a read, write, copy, delete or symlink."""

    kind = ErrorKind.IO_FAILURE


class PathNotFoundError(IoFailureError):
    """Raised when reading a path that does not exist."""


class PathNotReadableError(IoFailureError):
    """Raised when reading a path that exists but is not a regular file."""


class SerializationFailureError(DotgirlError):
    """Raised when a bundle or lock payload cannot be parsed or produced."""

    kind = ErrorKind.SERIALIZATION_FAILURE


class HomeDirectoryNotFoundError(DotgirlError):
    """Raised when the invoking user's home directory cannot be determined."""

    kind = ErrorKind.HOME_DIRECTORY_NOT_FOUND


class PathComponentInvalidError(DotgirlError):
    """Raised when a path or bundle id has no usable final component."""

    kind = ErrorKind.PATH_COMPONENT_INVALID


class BundleNotFoundError(DotgirlError):
    """Raised when a bundle directory does not exist in storage."""

    kind = ErrorKind.BUNDLE_NOT_FOUND


class BundleMissingMetadataError(DotgirlError):
    """Raised when a bundle directory exists but has no metadata file."""

    kind = ErrorKind.BUNDLE_MISSING_METADATA


class PathConflictError(DotgirlError):
    """Raised when an existing non-directory blocks a directory that is needed."""

    kind = ErrorKind.PATH_CONFLICT


class SourceNotFoundError(DotgirlError):
    """Raised when a copy source does not exist."""

    kind = ErrorKind.SOURCE_NOT_FOUND


class PromptUnavailableError(DotgirlError):
    """Raised when an interactive answer is needed but none can be obtained."""

    kind = ErrorKind.PROMPT_UNAVAILABLE


class ConfigInvalidError(DotgirlError):
    """Raised when config.json cannot be parsed or validated."""

    kind = ErrorKind.CONFIG_INVALID
