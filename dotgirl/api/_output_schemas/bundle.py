"""Output schemas for bundle commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class BundleAddOutput(BaseOutputSchema):
    """Output schema for the add command.

    Output structure:
    - errors: list[str] - list of error messages, empty list if no errors
    - warnings: list[str] - one message per skipped input
    - bundle: str - the bundle id
    - entries: list[dict] - every entry of the bundle after the add (local, remote)
    - linked: list[dict] - entries linked by this add (local, remote)
    - skipped: list[dict] - inputs left alone (path, reason)
    """

    bundle: str = Field(..., description="Bundle id")
    entries: list[dict[str, str]] = Field(..., description="All entries of the bundle after the add")
    linked: list[dict[str, str]] = Field(..., description="Entries linked by this add")
    skipped: list[dict[str, str]] = Field(..., description="Inputs that were not added, with the reason")


class BundleLinkOutput(BaseOutputSchema):
    """Output schema for the link command."""

    bundle: str = Field(..., description="Bundle id")
    linked: list[dict[str, str]] = Field(..., description="Entries whose symlink is in place")
    skipped: list[dict[str, str]] = Field(..., description="Entries skipped at the prompt, with the reason")


class BundleStatusOutput(BaseOutputSchema):
    """Output schema for the status command."""

    bundles: list[dict[str, Any]] = Field(..., description="Per bundle: id, locked, entries with state")


# Register schemas
register_output_schema("bundle", "add", BundleAddOutput)
register_output_schema("bundle", "link", BundleLinkOutput)
register_output_schema("bundle", "status", BundleStatusOutput)
