"""History entry model.

One remembered outcome of a user request, as stored in the history file.
"""

import os
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .coordinate import ArtifactCoordinate


def utc_now() -> datetime:
    """Current instant as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def format_instant(value: datetime) -> str:
    """Render an instant as ISO-8601 in UTC with a ``Z`` suffix."""
    return value.astimezone(UTC).isoformat().replace("+00:00", "Z")


class HistoryEntry(BaseModel):
    """An entry in the history list.

    Field aliases are the key names used in the history file.

    Attributes:
        user_input: What the user actually typed, e.g. may be fragmentary or
            contain command line flags. Matched exactly, never normalized.
        last_run_time: When the user last invoked the app (UTC).
        resolved_artifact: What the input was fully resolved to last time.
        classpath: Dependency locations joined with ``os.pathsep``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    user_input: str = Field(alias="user input")
    last_run_time: datetime = Field(default_factory=utc_now, alias="last run time")
    resolved_artifact: ArtifactCoordinate = Field(alias="resolved artifact")
    classpath: str = Field(default="", alias="classpath")

    @field_validator("last_run_time")
    @classmethod
    def normalize_to_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    @field_validator("resolved_artifact", mode="before")
    @classmethod
    def parse_coordinate(cls, value: Any) -> Any:
        if isinstance(value, str):
            return ArtifactCoordinate.parse(value)
        return value

    @field_serializer("last_run_time")
    def serialize_time(self, value: datetime) -> str:
        return format_instant(value)

    @field_serializer("resolved_artifact")
    def serialize_coordinate(self, value: ArtifactCoordinate) -> str:
        return str(value)

    @property
    def classpath_entries(self) -> list[str]:
        """Classpath split on the host path-list separator."""
        if not self.classpath:
            return []
        return self.classpath.split(os.pathsep)

    def __str__(self) -> str:
        return (
            f"{self.user_input} -> {self.resolved_artifact} @ "
            f"{format_instant(self.last_run_time)} ({len(self.classpath_entries)} cp entries)"
        )
