"""Runtime environment a command operates on."""

from dataclasses import dataclass
from pathlib import Path

from ..utils.logger import configure_logging
from .config.DotgirlConfig import DotgirlConfig
from .config.get_home_dir import get_home_dir
from .filesystem.Filesystem import Filesystem
from .prompt._AbstractPrompt import _AbstractPrompt
from .prompt.TerminalPrompt import TerminalPrompt


@dataclass
class Env:
    """Storage root plus the filesystem and prompt every operation goes through."""

    storage: Path
    filesystem: Filesystem
    prompt: _AbstractPrompt

    @classmethod
    def load(cls) -> "Env":
        """Build the environment for a real invocation.

        Resolves the storage root, reads config.json, configures logging and
        connects an interactive terminal prompt.

        Raises:
            HomeDirectoryNotFoundError: If no home directory can be determined
            ConfigInvalidError: If config.json is malformed
        """
        storage = get_home_dir()
        config = DotgirlConfig.load(storage)
        configure_logging(storage, config.log.level)
        return cls(storage=storage, filesystem=Filesystem(config.filesystem), prompt=TerminalPrompt())
