"""History commands: inspect and feed the resolution history."""

import typer
from rich.markup import escape

from ..constants import FLUSH_TIMEOUT_SECONDS
from ..models import ArtifactCoordinate, HistoryEntry
from ..output import entry_to_dict, get_output_context
from ._common import open_history_store

history_app = typer.Typer(help="Resolution history commands", no_args_is_help=True)


@history_app.command("list")
def history_list(ctx: typer.Context) -> None:
    """List remembered resolutions, newest first."""
    store = open_history_store(ctx)
    get_output_context().entries(store.history)


@history_app.command("search")
def history_search(
    ctx: typer.Context,
    package: str = typer.Argument(..., help="Package name or coordinate to look up"),
) -> None:
    """Show the last fresh resolution for PACKAGE."""
    out = get_output_context()
    store = open_history_store(ctx)
    entry = store.search(package)
    if entry is None:
        out.error(f"No fresh history entry for {package}", {"package": package})
        raise typer.Exit(1)
    out.result(entry_to_dict(entry), escape(str(entry)))


@history_app.command("record")
def history_record(
    ctx: typer.Context,
    user_input: str = typer.Argument(..., metavar="INPUT", help="Text the user typed"),
    artifact: str = typer.Option(..., "--artifact", "-a", help="Resolved artifact coordinate"),
    classpath: str = typer.Option("", "--classpath", "-c", help="Resolved classpath"),
) -> None:
    """Record that INPUT resolved to ARTIFACT."""
    out = get_output_context()
    try:
        coordinate = ArtifactCoordinate.parse(artifact)
    except ValueError as e:
        out.error(str(e), {"artifact": artifact})
        raise typer.Exit(1) from None

    store = open_history_store(ctx)
    stored = store.record(
        HistoryEntry(user_input=user_input, resolved_artifact=coordinate, classpath=classpath)
    )
    # A short-lived CLI process would otherwise exit before the write lands.
    if not store.flush(timeout=FLUSH_TIMEOUT_SECONDS):
        out.print(f"[yellow]History write still pending after {FLUSH_TIMEOUT_SECONDS}s[/yellow]")
    out.result(entry_to_dict(stored), f"[green]Recorded:[/green] {escape(str(stored))}")


@history_app.command("path")
def history_path(ctx: typer.Context) -> None:
    """Print the location of the history file."""
    store = open_history_store(ctx)
    out = get_output_context()
    if out.json_mode:
        out.print_json({"path": str(store.history_file)})
    else:
        typer.echo(str(store.history_file))
