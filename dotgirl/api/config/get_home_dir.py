"""Get the dotgirl storage root."""

import os
from pathlib import Path

from ...constants import HOME_ENV_VAR, STORAGE_DIR
from ..DotgirlError import HomeDirectoryNotFoundError


def get_home_dir() -> Path:
    """Get the dotgirl storage root.

    Checks DOTGIRL_HOME environment variable first, then HOME, then the
    platform's notion of the user's home directory.

    Returns:
        Absolute path to the storage root

    Raises:
        HomeDirectoryNotFoundError: If no home directory can be determined

    Examples:
        >>> get_home_dir()
        Path("/home/user/dotgirl")
    """
    dotgirl_home_env = os.environ.get(HOME_ENV_VAR)
    if dotgirl_home_env:
        storage = Path(dotgirl_home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        home_env = os.environ.get("HOME")
        if home_env:
            storage = Path(home_env) / STORAGE_DIR
        else:
            try:
                storage = Path.home() / STORAGE_DIR
            except (RuntimeError, KeyError) as e:
                raise HomeDirectoryNotFoundError("Could not determine the home directory") from e

    return storage
