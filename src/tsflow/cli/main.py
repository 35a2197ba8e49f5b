"""tsflow CLI entrypoint."""

from __future__ import annotations

import typer

app = typer.Typer(
    name="tsflow",
    add_completion=False,
    no_args_is_help=True,
    help="Generate Flow module declarations from TypeScript @types packages.",
)


@app.callback()
def _callback() -> None:
    """tsflow CLI."""


@app.command("version")
def version() -> None:
    """Print the installed tsflow version."""
    from tsflow import __version__

    typer.echo(__version__)


def _register_commands() -> None:
    """Register CLI subcommands.

    Importing these modules must remain lightweight so `tsflow --help` is fast.
    """
    from tsflow.cli.commands import convert as convert_cmd

    convert_cmd.register(app)


_register_commands()
