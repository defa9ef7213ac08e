"""History store: what each piece of user input last resolved to.

Entries are kept newest first, unique by user input and capped at
``max_size``. Looking up a prior resolution lets the launcher skip network
work when the same package was run recently; recording a new one moves it to
the front and schedules a background write of the whole list.
"""

import logging
import threading
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from pathlib import Path

from ..config import HistoryConfig
from ..constants import DEFAULT_MAX_HISTORY_SIZE, DEFAULT_REFRESH_INTERVAL_HOURS, HISTORY_FILE_NAME
from ..errors import HistoryFormatError
from ..models import HistoryEntry, utc_now
from .history_codec import decode_history
from .history_writer import HistoryWriter
from .user_input import UserInput, parse_user_input

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
InputParser = Callable[[str], UserInput]


class HistoryStore:
    """Recently used resolutions, persisted across runs.

    Args:
        storage_path: Directory holding the history file.
        refresh_interval: Maximum age of an entry ``search`` will return.
        max_size: Maximum number of entries kept.
        clock: Source of the current instant.
        parse_input: Parser used to re-derive the package name of stored input.
    """

    def __init__(
        self,
        storage_path: Path,
        refresh_interval: timedelta = timedelta(hours=DEFAULT_REFRESH_INTERVAL_HOURS),
        max_size: int = DEFAULT_MAX_HISTORY_SIZE,
        clock: Clock = utc_now,
        parse_input: InputParser = parse_user_input,
    ) -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")
        self.refresh_interval = refresh_interval
        self.max_size = max_size
        self.clock = clock
        self._parse_input = parse_input
        self.history_file = Path(storage_path) / HISTORY_FILE_NAME

        self._lock = threading.Lock()
        # Sorted newest to oldest.
        self._history: list[HistoryEntry] = self._load()
        self._writer = HistoryWriter(self.history_file)

    @property
    def history(self) -> tuple[HistoryEntry, ...]:
        """Snapshot of all entries, newest first."""
        with self._lock:
            return tuple(self._history)

    def _now(self) -> datetime:
        now = self.clock()
        if now.tzinfo is None:
            return now.replace(tzinfo=UTC)
        return now.astimezone(UTC)

    def _load(self) -> list[HistoryEntry]:
        if not self.history_file.exists():
            return []

        try:
            text = self.history_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Ignoring unreadable history file %s: %s", self.history_file, e)
            return []

        loaded: list[HistoryEntry] = []
        try:
            for record in decode_history(text):
                if not record.ok:
                    logger.warning(
                        "Skipping un-parseable history entry #%d in %s: %s",
                        record.index + 1,
                        self.history_file,
                        record.error,
                    )
                    continue
                loaded.append(record.entry)
                if len(loaded) == self.max_size:
                    break
        except HistoryFormatError as e:
            logger.warning("Ignoring corrupt history file %s: %s", self.history_file, e)
            return []

        # File is oldest first.
        loaded.reverse()
        logger.debug("Loaded %d history entries from %s", len(loaded), self.history_file)
        return loaded

    def record(self, entry: HistoryEntry) -> HistoryEntry:
        """Record a fresh resolution and persist the history in the background.

        Any entry with the same user input is replaced. The stored entry keeps
        the caller's artifact and classpath with ``last_run_time`` set to now.

        Returns:
            The entry as stored.
        """
        with self._lock:
            to_write = entry.model_copy(update={"last_run_time": self._now()})
            for i, existing in enumerate(self._history):
                if existing.user_input == to_write.user_input:
                    del self._history[i]
                    break
            logger.info("Recording history entry: %s", to_write)

            self._history.insert(0, to_write)
            if len(self._history) > self.max_size:
                removed = self._history.pop()
                logger.info(
                    "Forgetting old history entry %s because we have more than %d entries",
                    removed,
                    self.max_size,
                )

            # Submit under the lock so snapshots queue in call order.
            self._writer.submit(tuple(self._history))
        return to_write

    def _package_name_of(self, entry: HistoryEntry) -> str | None:
        try:
            return self._parse_input(entry.user_input).package_name
        except Exception as e:
            logger.debug("Cannot re-parse history input %r: %s", entry.user_input, e)
            return None

    def search(self, package_name: str) -> HistoryEntry | None:
        """Find the newest entry whose input names ``package_name``.

        The stored user input is re-parsed on every call, so changes to the
        parsing rules apply to old entries too.

        Returns:
            The entry, or None if not found or older than the refresh interval.
        """
        logger.info("Searching for a cached resolution in our history list for '%s'", package_name)
        match = next(
            (e for e in self.history if self._package_name_of(e) == package_name),
            None,
        )
        if match is None:
            return None

        age = abs(self._now() - match.last_run_time)
        if age > self.refresh_interval:
            logger.info(
                "Found a history entry match for %s but it's too old (%d secs)",
                package_name,
                int(age.total_seconds()),
            )
            return None
        return match

    def flush(self, timeout: float | None = None) -> bool:
        """Wait for pending background writes. Returns False on timeout."""
        return self._writer.flush(timeout)


def create_history_store(storage_path: Path, config: HistoryConfig | None = None) -> HistoryStore:
    """Create a history store in ``storage_path`` using ``config`` limits."""
    config = config or HistoryConfig()
    return HistoryStore(
        storage_path,
        refresh_interval=config.refresh_interval,
        max_size=config.max_size,
    )
