"""CLI command implementations for graviton.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py.
"""

from .history import history_app
from .init import init

__all__ = [
    "history_app",
    "init",
]
