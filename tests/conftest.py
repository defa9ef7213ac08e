"""Shared test fixtures for graviton tests."""

from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from typer.testing import CliRunner

from graviton.models import ArtifactCoordinate, HistoryEntry


class FakeClock:
    """Settable clock for deterministic staleness tests."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def clock() -> FakeClock:
    """Clock fixed at 2026-10-19 12:00 UTC."""
    return FakeClock(datetime(2026, 10, 19, 12, 0, tzinfo=UTC))


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    """Empty graviton cache directory."""
    d = tmp_path / "cache"
    d.mkdir()
    return d


def make_entry(
    user_input: str,
    artifact: str = "com.example:app:1.0",
    classpath: str = "/cache/app.jar",
    last_run_time: datetime | None = None,
) -> HistoryEntry:
    """Build a history entry with sensible defaults."""
    data = {
        "user_input": user_input,
        "resolved_artifact": ArtifactCoordinate.parse(artifact),
        "classpath": classpath,
    }
    if last_run_time is not None:
        data["last_run_time"] = last_run_time
    return HistoryEntry(**data)
