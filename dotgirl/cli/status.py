"""Status command - show which bundles are linked."""

from typing import Annotated

import typer

from dotgirl.api.bundle.cmd_status import cmd_status
from dotgirl.cli._handle_stage_result import _handle_stage_result


def status(
    bundle: Annotated[str | None, typer.Argument(help="Bundle name. Omit to show all bundles.")] = None,
) -> None:
    """Show the link state of stored bundles."""
    _handle_stage_result(cmd_status)(bundle or "")
