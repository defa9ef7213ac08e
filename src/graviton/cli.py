"""Graviton CLI: inspect and maintain the resolution history."""

from pathlib import Path

import typer

from graviton import __version__

from .commands import history_app, init
from .constants import CACHE_DIR_ENV_VAR
from .logging import configure_logging
from .output import OutputContext, set_output_context


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"graviton {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="graviton",
    help="Remembers what package coordinates and domain names last resolved to",
    no_args_is_help=True,
)

app.add_typer(history_app, name="history")
app.command()(init)


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only show warnings and errors",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    cache_dir: Path | None = typer.Option(
        None,
        "--cache-dir",
        envvar=CACHE_DIR_ENV_VAR,
        help="Directory holding the history file and config.toml",
    ),
) -> None:
    """Graviton - resolution history for the app launcher."""
    console = configure_logging(
        verbosity=verbose,
        quiet=quiet,
        no_color=no_color,
        debug=debug,
    )
    set_output_context(OutputContext(console=console, json_mode=json_output))
    ctx.obj = {"cache_dir": cache_dir}
