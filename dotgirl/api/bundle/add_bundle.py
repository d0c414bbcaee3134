"""Ingest paths into a bundle and link them back."""

from pathlib import Path

from ...constants import BUNDLE_FILE
from ...utils.logger import get_logger
from ..DotgirlError import SourceNotFoundError
from ..Env import Env
from .Bundle import Bundle
from .BundleOutcome import BundleOutcome, Skipped
from .Entry import Entry
from .get_bundle_dir import get_bundle_dir
from .get_name import get_name
from .link_entries import link_entries
from .load_bundle_metadata import load_bundle_metadata
from .load_lock import load_lock
from .save_bundle_metadata import save_bundle_metadata
from .save_lock import save_lock


def _overlaps(path: Path, other: Path) -> bool:
    return path == other or path in other.parents or other in path.parents


def _select_paths(env: Env, existing: Bundle, paths: list[Path]) -> tuple[list[Path], list[Skipped]]:
    """Split input paths into ones to ingest and ones to skip with a reason.

    Selected paths never overlap each other, the storage area, or a path the
    bundle already manages, so moving one can never disturb another.
    """
    managed = [entry.remote for entry in existing.entries]
    used_names = {entry.local.name: entry.remote for entry in existing.entries}
    selected: list[Path] = []
    skipped: list[Skipped] = []
    seen: set[Path] = set()

    for path in paths:
        if path in seen:
            skipped.append(Skipped(path, "duplicate input"))
            continue
        seen.add(path)

        if env.filesystem.is_symlink(path):
            skipped.append(Skipped(path, "path is a symlink"))
            continue
        if path == env.storage or env.storage in path.parents:
            skipped.append(Skipped(path, "path is inside the storage area"))
            continue
        if path in env.storage.parents:
            skipped.append(Skipped(path, "path contains the storage area"))
            continue
        overlapping = next((other for other in [*managed, *selected] if _overlaps(path, other)), None)
        if overlapping is not None:
            skipped.append(Skipped(path, f"path overlaps {overlapping}"))
            continue

        name = get_name(path)
        if name == BUNDLE_FILE:
            skipped.append(Skipped(path, f"storage name `{name}` is reserved"))
            continue
        if name in used_names:
            skipped.append(Skipped(path, f"storage name `{name}` is already used by {used_names[name]}"))
            continue
        if not env.filesystem.exists(path):
            raise SourceNotFoundError(f"Path does not exist: {path}", path=path)

        used_names[name] = path
        selected.append(path)

    return selected, skipped


def add_bundle(env: Env, bundle_id: str, paths: list[Path]) -> BundleOutcome:
    """Move paths into the bundle's storage directory and symlink them back.

    Symlinks, paths inside or containing storage, paths overlapping another
    input or a managed path, duplicates and storage-name collisions are
    skipped. Adding to an existing bundle appends to its entries. The
    lock record for the bundle keeps its previously linked entries and gains
    the newly linked ones.

    Args:
        env: Environment to operate on
        bundle_id: Bundle to create or extend
        paths: Absolute, normalized paths to ingest

    Returns:
        BundleOutcome with the full bundle, the newly linked entries and the skipped inputs
    """
    logger = get_logger("add")
    filesystem = env.filesystem
    lock = load_lock(filesystem, env.storage)
    bundle_dir = get_bundle_dir(env.storage, bundle_id)

    if filesystem.is_file(bundle_dir / BUNDLE_FILE):
        logger.info("Adding to existing bundle `%s`", bundle_id)
        existing = load_bundle_metadata(filesystem, bundle_dir)
    else:
        logger.info("Creating bundle `%s`", bundle_id)
        existing = Bundle(id=bundle_id)

    selected, skipped = _select_paths(env, existing, paths)
    for item in skipped:
        logger.warning("Skipping %s: %s", item.path, item.reason)

    filesystem.make_directory_tree(bundle_dir)

    # Entries are recorded once copied; metadata is written even if a later move fails
    added: list[Entry] = []
    try:
        for remote in selected:
            local = bundle_dir / get_name(remote)
            filesystem.copy(remote, local)
            added.append(Entry(local=local, remote=remote))
            filesystem.remove(remote)
            logger.info("Moved %s to %s", remote, local)
    finally:
        bundle = Bundle(id=bundle_id, entries=[*existing.entries, *added])
        save_bundle_metadata(filesystem, bundle_dir, bundle)

    linked = link_entries(filesystem, env.prompt, Bundle(id=bundle_id, entries=added), set(), overwrite_all=True)

    previous = lock.find(bundle_id)
    kept = [entry for entry in previous.entries if entry not in added] if previous else []
    lock.put(Bundle(id=bundle_id, entries=[*kept, *linked]))
    save_lock(filesystem, env.storage, lock)

    return BundleOutcome(bundle=bundle, linked=linked, skipped=skipped)
