"""Report the link state of stored bundles."""

from typing import Any

from ...constants import BUNDLE_DIR
from ..DotgirlError import BundleNotFoundError
from ..Env import Env
from .Entry import Entry
from .get_bundle_dir import get_bundle_dir
from .load_lock import load_lock


def _entry_state(env: Env, entry: Entry) -> str:
    filesystem = env.filesystem
    if not filesystem.exists(entry.remote):
        return "missing"
    if filesystem.is_symlink(entry.remote) and filesystem.read_link(entry.remote) == entry.local:
        return "linked"
    return "conflict"


def bundle_status(env: Env, bundle_id: str = "") -> list[dict[str, Any]]:
    """Describe each stored bundle and the state of its locked entries.

    Args:
        env: Environment to inspect
        bundle_id: Only report this bundle. Empty string reports all.

    Returns:
        One dict per bundle with keys id, locked, entries (local, remote, state)

    Raises:
        BundleNotFoundError: If bundle_id is given but not stored
    """
    filesystem = env.filesystem
    lock = load_lock(filesystem, env.storage)

    if bundle_id:
        if not filesystem.is_dir(get_bundle_dir(env.storage, bundle_id)):
            raise BundleNotFoundError(f"Bundle `{bundle_id}` not found", path=get_bundle_dir(env.storage, bundle_id))
        bundle_ids = [bundle_id]
    else:
        root = env.storage / BUNDLE_DIR
        bundle_ids = [name for name in filesystem.list_dir(root) if filesystem.is_dir(root / name)] if filesystem.is_dir(root) else []

    report: list[dict[str, Any]] = []
    for current in bundle_ids:
        record = lock.find(current)
        entries = record.entries if record else []
        report.append(
            {
                "id": current,
                "locked": record is not None,
                "entries": [
                    {"local": str(entry.local), "remote": str(entry.remote), "state": _entry_state(env, entry)}
                    for entry in entries
                ],
            }
        )
    return report
