"""Typer CLI entrypoint for previewing view helpers."""

from __future__ import annotations

import logging

import typer

from geoblacklight import __version__
from cli.commands import config as config_commands
from cli.commands.preview import preview_record

app = typer.Typer(
    help="GeoBlacklight view helper tools\n\nInspect settings and preview helper markup for indexed records\n",
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    add_completion=False,
)
app.add_typer(config_commands.app, name="config", help="Inspect the effective settings")
app.command("preview", help="Preview helper output for a JSON record")(preview_record)


@app.callback()
def root(
    ctx: typer.Context,
    version_flag: bool = typer.Option(
        False,
        "-v",
        "--version",
        help="Print the version",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    if version_flag:
        typer.echo(__version__)
        raise typer.Exit()
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
