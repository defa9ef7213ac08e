"""Helpers shared by CLI commands."""

from pathlib import Path

import typer

from ..config import load_config
from ..core import HistoryStore, create_history_store, get_app_cache_dir
from ..errors import ConfigError
from ..output import get_output_context


def get_cache_dir(ctx: typer.Context) -> Path:
    """Cache directory chosen by the main callback, or the platform default."""
    root = ctx.find_root()
    cache_dir = root.obj.get("cache_dir") if isinstance(root.obj, dict) else None
    return cache_dir or get_app_cache_dir()


def open_history_store(ctx: typer.Context) -> HistoryStore:
    """Open the history store configured for this invocation.

    Exits with code 2 if the config file is invalid.
    """
    out = get_output_context()
    cache_dir = get_cache_dir(ctx)
    try:
        config = load_config(cache_dir)
    except ConfigError as e:
        out.error(str(e), {"path": str(e.path)})
        raise typer.Exit(2) from None
    return create_history_store(cache_dir, config.history)
