"""Link engine: re-establish a bundle's symlinks at their original locations."""

from pathlib import Path

from ...utils.logger import get_logger
from ..DotgirlError import PathConflictError
from ..filesystem.Filesystem import Filesystem
from ..prompt._AbstractPrompt import _AbstractPrompt
from .Bundle import Bundle
from .Entry import Entry
from .LinkChoice import LinkChoice


def _blocking_file(filesystem: Filesystem, remote: Path) -> Path | None:
    """Nearest existing ancestor of remote, if it is a file rather than a directory."""
    for ancestor in remote.parents:
        if filesystem.is_dir(ancestor):
            return None
        if filesystem.is_file(ancestor):
            return ancestor
    return None


def _prepare_parent(filesystem: Filesystem, prompt: _AbstractPrompt, entry: Entry) -> None:
    blocker = _blocking_file(filesystem, entry.remote)
    if blocker is not None:
        message = (
            f"You're trying to link {entry.remote}, but {blocker} is a file. "
            "Do you want to remove the file and create a directory instead?"
        )
        if not prompt.confirm(message):
            raise PathConflictError(f"{blocker} is a file and was not replaced by a directory", path=blocker)
        get_logger("link").info("Removing file %s to make room for %s", blocker, entry.remote)
        filesystem.remove(blocker)

    parent = entry.remote.parent
    if not filesystem.is_dir(parent):
        filesystem.make_directory_tree(parent)


def _already_linked(filesystem: Filesystem, entry: Entry) -> bool:
    return filesystem.is_symlink(entry.remote) and filesystem.read_link(entry.remote) == entry.local


def link_entries(
    filesystem: Filesystem,
    prompt: _AbstractPrompt,
    bundle: Bundle,
    pre_authorized: set[Path],
    overwrite_all: bool = False,
) -> list[Entry]:
    """Place a symlink to each entry's local copy at its remote location.

    Entries are processed in bundle order. When something already occupies a
    remote path the user is asked whether to skip it, overwrite it, or
    overwrite it and everything after it, unless overwrite_all is set or the
    remote is in pre_authorized. A symlink that already points at the local
    copy is kept as is.

    Errors abort the pass; links made earlier in the pass stay in place.

    Args:
        filesystem: Filesystem to operate on
        prompt: Prompt used to resolve conflicts
        bundle: Bundle whose entries to link
        pre_authorized: Remote paths that may be overwritten without asking
        overwrite_all: Overwrite every existing remote without asking

    Returns:
        The entries that were linked, in bundle order. Skipped entries are omitted.

    Raises:
        PathConflictError: If the user declines to replace a file blocking a remote's parent
        PromptUnavailableError: If a question cannot be answered
        IoFailureError: If the filesystem fails
    """
    logger = get_logger("link")
    linked: list[Entry] = []

    for entry in bundle.entries:
        _prepare_parent(filesystem, prompt, entry)

        if filesystem.exists(entry.remote):
            if _already_linked(filesystem, entry):
                logger.debug("Already linked: %s -> %s", entry.remote, entry.local)
                linked.append(entry)
                continue

            if not overwrite_all and entry.remote not in pre_authorized:
                choice = LinkChoice(prompt.select(f"{entry.remote} already exists.", LinkChoice.labels()))
                if choice is LinkChoice.SKIP:
                    logger.info("Skipped %s", entry.remote)
                    continue
                if choice is LinkChoice.OVERWRITE_ALL:
                    overwrite_all = True

            logger.info("Overwriting %s", entry.remote)
            filesystem.remove(entry.remote)

        filesystem.symlink(entry.local, entry.remote)
        logger.info("Linked %s -> %s", entry.remote, entry.local)
        linked.append(entry)

    return linked
