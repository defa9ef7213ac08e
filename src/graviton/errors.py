"""Exception types for graviton."""

from pathlib import Path


class GravitonError(Exception):
    """Base class for graviton errors."""


class ConfigError(GravitonError):
    """Configuration file could not be loaded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid config {path}: {reason}")
        self.path = path
        self.reason = reason


class HistoryFormatError(GravitonError):
    """History file is not a readable YAML document stream."""


class UserInputError(GravitonError):
    """User input could not be parsed as a command line."""
