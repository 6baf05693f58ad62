"""Typer CLI for Foreman home management."""

from __future__ import annotations

from typing import Annotated

import typer

from foreman.cli._helpers import console

app = typer.Typer(
    name="foreman",
    help="Manage the Foreman home directory.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    if value:
        from foreman import __version__

        console.print(f"foreman {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging"),
    ] = False,
) -> None:
    """Foreman: a toolchain manager."""
    from foreman._log import setup_logging

    setup_logging(verbose=verbose)


from foreman.cli.home_cmd import artiaa_path, init, paths  # noqa: E402

app.command()(paths)
app.command()(init)
app.command("artiaa-path")(artiaa_path)


def app_entry() -> None:
    """Entry point for the CLI."""
    app()
