"""Create the main Typer CLI app."""

import typer

from dotgirl.cli.add import add
from dotgirl.cli.link import link
from dotgirl.cli.status import status


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="dotgirl - keep dotfiles in one place and symlink them back",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    # Register all commands
    app.command(name="add")(add)
    app.command(name="link")(link)
    app.command(name="status")(status)

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        # Validate display format
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        # Store display format in context for use by commands
        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
