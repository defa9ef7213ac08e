"""Init command implementation."""

import typer
from rich.markup import escape

from ..config import write_config_template
from ..constants import CONFIG_FILE_NAME
from ..output import get_output_context
from ._common import get_cache_dir


def init(ctx: typer.Context) -> None:
    """Create the cache directory and a config template."""
    out = get_output_context()
    cache_dir = get_cache_dir(ctx)
    config_path = cache_dir / CONFIG_FILE_NAME

    if config_path.exists():
        out.result(
            {"cache_dir": str(cache_dir), "config": str(config_path), "created": False},
            f"[yellow]Config already exists:[/yellow] {escape(str(config_path))}",
        )
        return

    write_config_template(cache_dir)
    out.result(
        {"cache_dir": str(cache_dir), "config": str(config_path), "created": True},
        f"[green]Created config template:[/green] {escape(str(config_path))}",
    )
