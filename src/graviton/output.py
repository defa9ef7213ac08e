"""Output formatting for graviton CLI."""

import json
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .models import HistoryEntry


def entry_to_dict(entry: HistoryEntry) -> dict[str, Any]:
    """Render an entry with its on-disk key names."""
    return entry.model_dump(mode="json", by_alias=True)


@dataclass
class OutputContext:
    """Context for output formatting."""

    console: Console
    json_mode: bool = False

    def print(self, message: str, style: str | None = None) -> None:
        """Print message unless in JSON mode."""
        if not self.json_mode:
            self.console.print(message, style=style)

    def print_json(self, data: Any) -> None:
        """Print JSON data to stdout."""
        if self.json_mode:
            print(json.dumps(data, indent=2, default=str))

    def result(self, data: dict[str, Any], message: str = "") -> None:
        """Print result in appropriate format."""
        if self.json_mode:
            self.print_json(data)
        elif message:
            self.console.print(message)

    def error(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Print error in appropriate format."""
        if self.json_mode:
            self.print_json({"error": message, **(data or {})})
        else:
            self.console.print(f"[red]Error: {escape(message)}[/red]")

    def entries(self, entries: Sequence[HistoryEntry], title: str = "History") -> None:
        """Print history entries, newest first."""
        if self.json_mode:
            self.print_json([entry_to_dict(e) for e in entries])
            return
        if not entries:
            self.console.print("[yellow]No history entries[/yellow]")
            return

        table = Table(title=title)
        table.add_column("User input")
        table.add_column("Resolved artifact")
        table.add_column("Last run (UTC)")
        table.add_column("Classpath", justify="right")
        for entry in entries:
            table.add_row(
                escape(entry.user_input),
                escape(str(entry.resolved_artifact)),
                entry.last_run_time.strftime("%Y-%m-%d %H:%M:%S"),
                str(len(entry.classpath_entries)),
            )
        self.console.print(table)


# Global output context (set by cli.py main callback)
_ctx: OutputContext | None = None


def get_output_context() -> OutputContext:
    """Get the current output context.

    Returns a default OutputContext if not yet initialized by CLI.
    """
    if _ctx is None:
        return OutputContext(Console())
    return _ctx


def set_output_context(ctx: OutputContext) -> None:
    """Set the global output context. Called by CLI main callback."""
    global _ctx
    _ctx = ctx
