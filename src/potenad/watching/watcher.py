"""File watching implementation using polling.

Polling is preferred over native file watchers for cross-platform
reliability, and because the editor only ever follows a single file.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from potenad.logging import get_logger

log = get_logger("watching")

# Minimum poll interval in seconds
MIN_POLL_INTERVAL = 0.1


@dataclass
class WatchedFile:
    """Tracks a watched file's state."""

    path: Path
    mtime: float | None = None
    size: int | None = None
    exists: bool = True

    @classmethod
    def snapshot(cls, path: Path) -> WatchedFile:
        """Capture the current on-disk state of ``path``."""
        try:
            stat = path.stat()
        except FileNotFoundError:
            return cls(path=path, mtime=None, size=None, exists=False)
        return cls(path=path, mtime=stat.st_mtime, size=stat.st_size, exists=True)


@dataclass
class FileChangeEvent:
    """Represents a detected file change."""

    path: Path
    change_type: str  # "modified", "created", "deleted"
    old_mtime: float | None
    new_mtime: float | None
    timestamp: float = field(default_factory=time.time)


class FileWatcher:
    """Watches the open file for external changes using polling.

    Only one file is watched at a time; watching a new path replaces the
    previous one. Call ``check_changes()`` from a GUI tick, or run
    ``start()`` on an asyncio loop.

    Example:
        watcher = FileWatcher(poll_interval=1.0)
        watcher.watch(Path("notes.txt"))

        for event in watcher.check_changes():
            print(f"{event.path} {event.change_type}")
    """

    def __init__(self, poll_interval: float = 1.0) -> None:
        self._poll_interval = max(MIN_POLL_INTERVAL, poll_interval)
        self._watched: WatchedFile | None = None
        self._running = False

    @property
    def poll_interval(self) -> float:
        """Get the polling interval in seconds."""
        return self._poll_interval

    @poll_interval.setter
    def poll_interval(self, value: float) -> None:
        self._poll_interval = max(MIN_POLL_INTERVAL, value)

    @property
    def watched_path(self) -> Path | None:
        """The file currently being watched, if any."""
        return self._watched.path if self._watched else None

    def watch(self, path: Path) -> None:
        """Start following ``path``, dropping any previously watched file."""
        self._watched = WatchedFile.snapshot(path)
        log.debug("Watching %s", path)

    def unwatch(self) -> None:
        """Stop following the current file."""
        if self._watched:
            log.debug("Stopped watching %s", self._watched.path)
        self._watched = None

    def check_changes(self) -> list[FileChangeEvent]:
        """Check the watched file for changes.

        This is a synchronous check suitable for calling from a GUI tick.

        Returns:
            A list with at most one FileChangeEvent.
        """
        if self._watched is None:
            return []
        event = self._check_file(self._watched)
        return [event] if event else []

    def _check_file(self, watched: WatchedFile) -> FileChangeEvent | None:
        path = watched.path
        try:
            stat = path.stat()
        except FileNotFoundError:
            if not watched.exists:
                return None
            old_mtime = watched.mtime
            watched.exists = False
            watched.mtime = None
            watched.size = None
            return FileChangeEvent(
                path=path,
                change_type="deleted",
                old_mtime=old_mtime,
                new_mtime=None,
            )
        except OSError as e:
            log.warning("Error checking %s: %s", path, e)
            return None

        if not watched.exists:
            watched.exists = True
            watched.mtime = stat.st_mtime
            watched.size = stat.st_size
            return FileChangeEvent(
                path=path,
                change_type="created",
                old_mtime=None,
                new_mtime=stat.st_mtime,
            )

        # Modification: mtime or size changed
        if stat.st_mtime != watched.mtime or stat.st_size != watched.size:
            old_mtime = watched.mtime
            watched.mtime = stat.st_mtime
            watched.size = stat.st_size
            return FileChangeEvent(
                path=path,
                change_type="modified",
                old_mtime=old_mtime,
                new_mtime=stat.st_mtime,
            )

        return None

    async def start(self, callback: Callable[[FileChangeEvent], None]) -> None:
        """Run the polling loop until ``stop()`` is called or the task is cancelled.

        Args:
            callback: Function to call for each detected change.
        """
        if self._running:
            log.warning("FileWatcher already running")
            return

        self._running = True
        log.info("FileWatcher started (interval: %.1fs)", self._poll_interval)

        try:
            while self._running:
                for event in self.check_changes():
                    try:
                        callback(event)
                    except Exception as e:
                        log.error("Error in file change callback: %s", e)

                await asyncio.sleep(self._poll_interval)
        except asyncio.CancelledError:
            log.info("FileWatcher cancelled")
            raise
        finally:
            self._running = False

    def stop(self) -> None:
        """Stop the polling loop after its current sleep."""
        self._running = False
        log.info("FileWatcher stopped")

    def is_running(self) -> bool:
        """Check if the watcher is currently running."""
        return self._running
