"""Encoding and decoding of the history file.

The file is a stream of YAML documents, one mapping per entry, written oldest
first so that appending by hand reads naturally::

    ---
    user input: com.example:app
    last run time: '2026-10-19T08:00:00Z'
    resolved artifact: com.example:app:jar:1.0
    classpath: /cache/app-1.0.jar

Decoding is strict per document: each one becomes either an entry or a reason
to skip it, and the caller decides what to do with the skips.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import yaml
from pydantic import ValidationError

from ..errors import HistoryFormatError
from ..models import HistoryEntry

REQUIRED_KEYS = ("user input", "last run time", "resolved artifact", "classpath")


class _HistoryDumper(yaml.SafeDumper):
    """Safe dumper that double-quotes strings a reader would otherwise fold."""


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    # Plain and block styles read NEL, U+2028 and U+2029 back as newlines.
    if not data.isprintable():
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style='"')
    return dumper.represent_str(data)


_HistoryDumper.add_representer(str, _represent_str)


@dataclass(frozen=True)
class DecodedRecord:
    """Result of decoding one document: an entry, or why it was skipped."""

    index: int
    entry: HistoryEntry | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.entry is not None


def encode_history(entries: Sequence[HistoryEntry]) -> str:
    """Render newest-first entries as an oldest-first YAML document stream."""
    documents = [e.model_dump(mode="json", by_alias=True) for e in reversed(entries)]
    if not documents:
        return ""
    return yaml.dump_all(
        documents,
        Dumper=_HistoryDumper,
        explicit_start=True,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=1_000_000,
    )


def _describe_validation_error(e: ValidationError) -> str:
    parts = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "entry"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def decode_record(index: int, document: object) -> DecodedRecord:
    """Decode a single YAML document into an entry or a skip reason."""
    if not isinstance(document, dict):
        return DecodedRecord(index, error=f"expected a mapping, got {type(document).__name__}")

    missing = [key for key in REQUIRED_KEYS if key not in document]
    if missing:
        return DecodedRecord(index, error=f"missing key(s): {', '.join(missing)}")

    try:
        entry = HistoryEntry.model_validate({key: document[key] for key in REQUIRED_KEYS})
    except ValidationError as e:
        return DecodedRecord(index, error=_describe_validation_error(e))
    return DecodedRecord(index, entry=entry)


def decode_history(text: str) -> Iterator[DecodedRecord]:
    """Decode a history file, yielding one result per non-empty document.

    Records come out in file order (oldest first).

    Raises:
        HistoryFormatError: If the text is not valid YAML. Raised lazily, when
            iteration reaches the broken document.
    """
    try:
        for index, document in enumerate(yaml.safe_load_all(text)):
            if document is None:
                continue
            yield decode_record(index, document)
    except yaml.YAMLError as e:
        raise HistoryFormatError(f"History file is not valid YAML: {e}") from e
