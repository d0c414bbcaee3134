"""Status API function.

Matches CLI: dotgirl status [<bundle>]
"""

from collections.abc import Iterator

from ..DotgirlError import DotgirlError
from ..Env import Env
from ..StageResult import StageResult
from . import BundleStatusOutput
from .bundle_status import bundle_status


def cmd_status(bundle_id: str = "", env: Env | None = None) -> StageResult:
    """Report the link state of one stored bundle, or of all of them.

    Args:
        bundle_id: Bundle to report. Empty string reports every stored bundle.
        env: Environment to inspect. Defaults to Env.load().
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading environment...")
        try:
            active_env = env or Env.load()
            yield (0.5, "Checking links...")
            report = bundle_status(active_env, bundle_id)
        except DotgirlError as e:
            result_obj.output = BundleStatusOutput(errors=[e.describe()], warnings=[], bundles=[]).model_dump(
                mode="python"
            )
            result_obj.result = f"Status failed: {e}"
            result_obj.success = False
            return

        warnings = [
            f"{bundle['id']}: {entry['remote']} is {entry['state']}"
            for bundle in report
            for entry in bundle["entries"]
            if entry["state"] != "linked"
        ]
        yield (1.0, "Complete")
        result_obj.output = BundleStatusOutput(errors=[], warnings=warnings, bundles=report).model_dump(mode="python")
        result_obj.result = f"Found {len(report)} bundle(s)"
        result_obj.success = True

    announce = "Checking all bundles..." if bundle_id == "" else f"Checking bundle `{bundle_id}`..."
    return StageResult(announce=announce, progress_callback=do_work)
