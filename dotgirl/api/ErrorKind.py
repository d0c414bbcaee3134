"""ErrorKind enum tagging every dotgirl failure."""

from enum import Enum


class ErrorKind(str, Enum):
    IO_FAILURE = "io_failure"
    SERIALIZATION_FAILURE = "serialization_failure"
    HOME_DIRECTORY_NOT_FOUND = "home_directory_not_found"
    PATH_COMPONENT_INVALID = "path_component_invalid"
    BUNDLE_NOT_FOUND = "bundle_not_found"
    BUNDLE_MISSING_METADATA = "bundle_missing_metadata"
    PATH_CONFLICT = "path_conflict"
    SOURCE_NOT_FOUND = "source_not_found"
    PROMPT_UNAVAILABLE = "prompt_unavailable"
    CONFIG_INVALID = "config_invalid"
