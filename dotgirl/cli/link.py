"""Link command - re-establish the symlinks of a stored bundle."""

from typing import Annotated

import typer

from dotgirl.api.bundle.cmd_link import cmd_link
from dotgirl.cli._handle_stage_result import _handle_stage_result


def link(
    bundle: Annotated[str, typer.Argument(help="Bundle name")],
) -> None:
    """Link a bundle.

    Asks before overwriting anything at a link location, except for
    locations that were linked by the previous run.
    """
    _handle_stage_result(cmd_link)(bundle)
