"""Link API function.

Re-link a stored bundle.
Matches CLI: dotgirl link <bundle>
"""

from collections.abc import Iterator

from ..DotgirlError import DotgirlError
from ..Env import Env
from ..StageResult import StageResult
from . import BundleLinkOutput
from ._entry_dicts import _entry_dicts, _skipped_dicts
from .link_bundle import link_bundle


def cmd_link(bundle_id: str, env: Env | None = None) -> StageResult:
    """Re-establish the symlinks of a stored bundle."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading environment...")
        try:
            active_env = env or Env.load()
            yield (0.3, f"Linking `{bundle_id}`...")
            outcome = link_bundle(active_env, bundle_id)
        except DotgirlError as e:
            result_obj.output = BundleLinkOutput(
                errors=[e.describe()],
                warnings=[],
                bundle=bundle_id,
                linked=[],
                skipped=[],
            ).model_dump(mode="python")
            result_obj.result = f"Link of `{bundle_id}` failed: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = BundleLinkOutput(
            errors=[],
            warnings=[f"Skipped {item.path}" for item in outcome.skipped],
            bundle=bundle_id,
            linked=_entry_dicts(outcome.linked),
            skipped=_skipped_dicts(outcome.skipped),
        ).model_dump(mode="python")
        result_obj.result = f"Linked {len(outcome.linked)} of {len(outcome.bundle.entries)} entries of `{bundle_id}`"
        result_obj.success = True

    return StageResult(announce=f"Linking bundle `{bundle_id}`...", progress_callback=do_work)
