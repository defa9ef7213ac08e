"""Background persistence of history snapshots.

A single daemon worker drains a FIFO queue of immutable snapshots, so writes
land in the order they were submitted and the last write to complete is the
last snapshot submitted. Each write goes to a temp file that then replaces the
history file, so a reader never sees a partial or mixed snapshot.

Pending writes are not waited for at interpreter exit; losing the newest
entries to an abrupt exit is accepted in exchange for never blocking the
caller.
"""

import contextlib
import logging
import os
import queue
import threading
from collections.abc import Sequence
from pathlib import Path

from ..models import HistoryEntry
from .history_codec import encode_history

logger = logging.getLogger(__name__)

Snapshot = tuple[HistoryEntry, ...]


def write_history_file(history_file: Path, snapshot: Sequence[HistoryEntry]) -> None:
    """Atomically replace ``history_file`` with the encoded snapshot."""
    history_file.parent.mkdir(parents=True, exist_ok=True)
    temp_path = history_file.with_name(f"{history_file.name}.{os.getpid()}.tmp")
    try:
        temp_path.write_text(encode_history(snapshot), encoding="utf-8")
        os.replace(temp_path, history_file)
    finally:
        with contextlib.suppress(FileNotFoundError):
            temp_path.unlink()


class HistoryWriter:
    """Serial writer that persists snapshots off the caller's thread."""

    def __init__(self, history_file: Path) -> None:
        self.history_file = history_file
        self._queue: queue.Queue[Snapshot] = queue.Queue()
        self._idle = threading.Condition()
        self._pending = 0
        self._thread: threading.Thread | None = None

    def submit(self, snapshot: Snapshot) -> None:
        """Queue a snapshot for writing and return immediately."""
        with self._idle:
            self._pending += 1
            if self._thread is None:
                self._thread = threading.Thread(
                    target=self._run,
                    name=f"history-writer-{self.history_file.name}",
                    daemon=True,
                )
                self._thread.start()
        self._queue.put(snapshot)

    def flush(self, timeout: float | None = None) -> bool:
        """Wait for all submitted snapshots to be handled.

        Returns:
            True if the queue drained, False if ``timeout`` expired first.
        """
        with self._idle:
            return self._idle.wait_for(lambda: self._pending == 0, timeout)

    @property
    def pending(self) -> int:
        with self._idle:
            return self._pending

    def _run(self) -> None:
        while True:
            snapshot = self._queue.get()
            try:
                write_history_file(self.history_file, snapshot)
                logger.debug("Wrote %d history entries to %s", len(snapshot), self.history_file)
            except OSError as e:
                logger.warning("Failed to write history file %s: %s", self.history_file, e)
            except Exception:
                # Keep the worker alive; the in-memory history stays authoritative.
                logger.exception("Unexpected error writing history file %s", self.history_file)
            finally:
                with self._idle:
                    self._pending -= 1
                    self._idle.notify_all()
