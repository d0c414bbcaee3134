"""Add API function.

Move paths into a bundle's storage directory and symlink them back.
Matches CLI: dotgirl add <bundle> <input...>
"""

from collections.abc import Iterator
from pathlib import Path

from ..config.normalize_path import normalize_path
from ..DotgirlError import DotgirlError
from ..Env import Env
from ..StageResult import StageResult
from . import BundleAddOutput
from ._entry_dicts import _entry_dicts, _skipped_dicts
from .add_bundle import add_bundle


def cmd_add(bundle_id: str, paths: list[str | Path], env: Env | None = None) -> StageResult:
    """Add paths to a bundle.

    Args:
        bundle_id: Bundle to create or extend
        paths: Paths to ingest (~ is expanded, symlinks are not resolved)
        env: Environment to operate on. Defaults to Env.load().

    Returns:
        StageResult with add results
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading environment...")
        try:
            active_env = env or Env.load()
            yield (0.3, "Resolving paths...")
            inputs = [normalize_path(path) for path in paths]
            yield (0.5, f"Adding {len(inputs)} path(s) to `{bundle_id}`...")
            outcome = add_bundle(active_env, bundle_id, inputs)
        except DotgirlError as e:
            result_obj.output = BundleAddOutput(
                errors=[e.describe()],
                warnings=[],
                bundle=bundle_id,
                entries=[],
                linked=[],
                skipped=[],
            ).model_dump(mode="python")
            result_obj.result = f"Add to `{bundle_id}` failed: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = BundleAddOutput(
            errors=[],
            warnings=[f"Skipped {item.path}: {item.reason}" for item in outcome.skipped],
            bundle=bundle_id,
            entries=_entry_dicts(outcome.bundle.entries),
            linked=_entry_dicts(outcome.linked),
            skipped=_skipped_dicts(outcome.skipped),
        ).model_dump(mode="python")
        count = len(outcome.linked)
        result_obj.result = f"Added {count} {'path' if count == 1 else 'paths'} to `{bundle_id}`"
        result_obj.success = True

    return StageResult(announce=f"Adding to bundle `{bundle_id}`...", progress_callback=do_work)
