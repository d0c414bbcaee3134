"""Re-link an existing bundle from its stored metadata."""

from ...utils.logger import get_logger
from ..Env import Env
from .Bundle import Bundle
from .BundleOutcome import BundleOutcome, Skipped
from .get_bundle_dir import get_bundle_dir
from .link_entries import link_entries
from .load_bundle_metadata import load_bundle_metadata
from .load_lock import load_lock
from .save_lock import save_lock


def link_bundle(env: Env, bundle_id: str) -> BundleOutcome:
    """Re-establish every symlink of a stored bundle.

    Remotes recorded in the bundle's previous lock record are overwritten
    without asking. Entries the user skips are dropped from the lock record,
    so the next link asks about them again.

    Raises:
        BundleNotFoundError: If the bundle does not exist in storage
        BundleMissingMetadataError: If the bundle has no metadata file
    """
    filesystem = env.filesystem
    lock = load_lock(filesystem, env.storage)

    previous = lock.find(bundle_id)
    pre_authorized = {entry.remote for entry in previous.entries} if previous else set()

    bundle = load_bundle_metadata(filesystem, get_bundle_dir(env.storage, bundle_id))
    linked = link_entries(filesystem, env.prompt, bundle, pre_authorized, overwrite_all=False)

    lock.put(Bundle(id=bundle.id, entries=linked))
    save_lock(filesystem, env.storage, lock)

    skipped = [Skipped(entry.remote, "skipped at prompt") for entry in bundle.entries if entry not in linked]
    get_logger("link").info("Linked %d of %d entries of `%s`", len(linked), len(bundle.entries), bundle_id)
    return BundleOutcome(bundle=bundle, linked=linked, skipped=skipped)
