"""Add command - move paths into a bundle and link them back."""

from typing import Annotated

import typer

from dotgirl.api.bundle.cmd_add import cmd_add
from dotgirl.cli._handle_stage_result import _handle_stage_result


def add(
    bundle: Annotated[str, typer.Argument(help="Bundle name")],
    inputs: Annotated[list[str], typer.Argument(help="Files or directories to add")],
) -> None:
    """Add files or directories to a bundle.

    Each input is copied into the bundle's storage directory (a leading dot
    is dropped from its name), removed from its original location, and
    replaced by a symlink to the stored copy. Inputs that are symlinks are
    skipped.
    """
    _handle_stage_result(cmd_add)(bundle, inputs)
