"""Package coordinate model.

A coordinate names one distributable artifact in the usual Maven form::

    <group>:<artifact>[:<extension>[:<classifier>]]:<version>
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Fields may not hold separators or whitespace, so str() and parse() round trip.
_PART = r"^[^:\s]+$"
_OPTIONAL_PART = r"^[^:\s]*$"

_COORDINATE_RE = re.compile(
    r"^(?P<group>[^:\s]+):(?P<artifact>[^:\s]+)"
    r"(?::(?P<extension>[^:\s]*)(?::(?P<classifier>[^:\s]+))?)?"
    r":(?P<version>[^:\s]+)$"
)

DEFAULT_EXTENSION = "jar"


class ArtifactCoordinate(BaseModel):
    """Fully qualified identity of a resolved artifact.

    Attributes:
        group_id: Publishing group, e.g. ``com.example``.
        artifact_id: Artifact name within the group.
        extension: Packaging type; empty input falls back to ``jar``.
        classifier: Optional classifier, empty when absent.
        version: Resolved version string.
    """

    model_config = ConfigDict(frozen=True)

    group_id: str = Field(pattern=_PART)
    artifact_id: str = Field(pattern=_PART)
    extension: str = Field(default=DEFAULT_EXTENSION, pattern=_PART)
    classifier: str = Field(default="", pattern=_OPTIONAL_PART)
    version: str = Field(pattern=_PART)

    @field_validator("extension", mode="before")
    @classmethod
    def default_extension(cls, v: object) -> object:
        if v is None or v == "":
            return DEFAULT_EXTENSION
        return v

    @classmethod
    def parse(cls, text: str) -> "ArtifactCoordinate":
        """Parse a coordinate string.

        Raises:
            ValueError: If ``text`` is not a valid coordinate.
        """
        match = _COORDINATE_RE.match(text.strip())
        if match is None:
            raise ValueError(
                f"Bad artifact coordinates {text!r}, expected format is "
                "<group>:<artifact>[:<extension>[:<classifier>]]:<version>"
            )
        return cls(
            group_id=match["group"],
            artifact_id=match["artifact"],
            extension=match["extension"] or DEFAULT_EXTENSION,
            classifier=match["classifier"] or "",
            version=match["version"],
        )

    @property
    def key(self) -> str:
        """``group:artifact`` identity, without version."""
        return f"{self.group_id}:{self.artifact_id}"

    def __str__(self) -> str:
        parts = [self.group_id, self.artifact_id, self.extension]
        if self.classifier:
            parts.append(self.classifier)
        parts.append(self.version)
        return ":".join(parts)
