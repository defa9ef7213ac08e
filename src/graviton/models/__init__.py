"""Pydantic data models for graviton.

- Package coordinates (ArtifactCoordinate)
- Remembered resolutions (HistoryEntry)

Example:
    >>> from graviton.models import ArtifactCoordinate, HistoryEntry
    >>> entry = HistoryEntry(
    ...     user_input="com.example:app",
    ...     resolved_artifact=ArtifactCoordinate.parse("com.example:app:1.0"),
    ... )
    >>> entry.model_dump(by_alias=True, mode="json")
"""

from .coordinate import ArtifactCoordinate
from .history_entry import HistoryEntry, format_instant, utc_now

__all__ = [
    "ArtifactCoordinate",
    "HistoryEntry",
    "format_instant",
    "utc_now",
]
