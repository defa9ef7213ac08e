"""Cache directory lookup."""

import os
import sys
from pathlib import Path

from ..constants import CACHE_DIR_ENV_VAR


def get_app_cache_dir() -> Path:
    """Get the OS-appropriate cache directory for graviton.

    ``GRAVITON_CACHE_DIR`` overrides the platform default.

    Returns:
        Path to the cache directory (not created)
    """
    override = os.environ.get(CACHE_DIR_ENV_VAR)
    if override:
        return Path(override).expanduser()

    if sys.platform == "darwin":
        return Path.home() / "Library" / "Caches" / "Graviton"
    if sys.platform == "win32":
        local = os.environ.get("LOCALAPPDATA")
        base = Path(local) if local else Path.home() / "AppData" / "Local"
        return base / "Graviton" / "Cache"

    xdg = os.environ.get("XDG_CACHE_HOME")
    base = Path(xdg) if xdg else Path.home() / ".cache"
    return base / "graviton"
