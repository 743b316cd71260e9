"""In-memory editor session.

The EditorSession is what the GUI layer talks to: it owns the SessionState,
loads the open file into memory and persists the state on request.
"""

from __future__ import annotations

from pathlib import Path

from potenad.config.paths import get_state_path
from potenad.editor.result import SaveResult
from potenad.errors import StateSaveError
from potenad.logging import get_logger
from potenad.state import SessionState
from potenad.watching import FileChangeEvent, FileWatcher

log = get_logger("editor")

# Encoding used for opened documents
DOCUMENT_ENCODING = "utf-8"


class EditorSession:
    """Runtime editor object holding the open file and the session state.

    A session created without a state path runs in memory only: opening
    files works as usual but ``save_state()`` writes nothing.
    """

    def __init__(
        self,
        state_path: Path | None,
        state: SessionState | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            state_path: Where session state is persisted, or None for an
                in-memory session.
            state: Initial state. Loaded from ``state_path`` when omitted,
                falling back to an empty state on any load failure.
        """
        self._state_path = state_path
        if state is None:
            state = (
                SessionState.load_or_default(state_path)
                if state_path is not None
                else SessionState()
            )
        self._state = state
        self._watcher: FileWatcher | None = None

    @classmethod
    def create(cls) -> EditorSession:
        """Create a session persisted at the platform's state path.

        Falls back to an in-memory session when no user config directory
        is available.
        """
        return cls(get_state_path())

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def state_path(self) -> Path | None:
        return self._state_path

    @property
    def persistent(self) -> bool:
        """True if state is saved to disk."""
        return self._state_path is not None

    @property
    def path(self) -> Path | None:
        """Path of the open file."""
        return self._state.path

    @property
    def contents(self) -> str:
        """Text of the open file."""
        return self._state.contents

    def open_file(self, path: Path) -> None:
        """Read ``path`` fully into memory and make it the current file.

        The previous contents are replaced, not appended to. On failure the
        session is left exactly as it was.

        Raises:
            OSError: If the file does not exist or cannot be read.
            UnicodeDecodeError: If the file is not valid UTF-8.
            ValueError: If the path contains a NUL character.
        """
        path = Path(path)
        # Decode the raw bytes so line endings are kept as they are on disk
        contents = path.read_bytes().decode(DOCUMENT_ENCODING)

        self._state.replace_document(path, contents)
        log.info("Opened %s (%d chars)", path, len(contents))

        if self._watcher is not None:
            self._watcher.watch(path)

    def reopen_last(self) -> bool:
        """Open the file remembered from the previous run.

        Returns:
            True if the file was opened, False if there is no remembered
            path or it can no longer be read.
        """
        path = self._state.path
        if path is None:
            return False
        try:
            self.open_file(path)
        except (OSError, ValueError) as e:
            log.warning("Cannot reopen %s: %s", path, e)
            return False
        return True

    def forget(self) -> None:
        """Clear the open file and the remembered path."""
        self._state.forget()
        if self._watcher is not None:
            self._watcher.unwatch()

    def save_state(self) -> SaveResult:
        """Persist the session state.

        Never raises for I/O failures; the GUI layer decides whether to
        tell the user about an error result.
        """
        if self._state_path is None:
            log.debug("In-memory session, state not saved")
            return SaveResult(status="skipped")
        try:
            self._state.save(self._state_path)
        except StateSaveError as e:
            log.error("%s", e)
            return SaveResult(status="error", path=self._state_path, error=e.reason)
        return SaveResult(status="ok", path=self._state_path)

    def attach_watcher(self, watcher: FileWatcher) -> None:
        """Follow the open file with ``watcher``."""
        self._watcher = watcher
        if self._state.path is not None:
            watcher.watch(self._state.path)

    def poll_changes(self) -> list[FileChangeEvent]:
        """Check the open file for external changes.

        The path of every changed file is pushed onto ``state.channel``.
        """
        if self._watcher is None:
            return []
        events = self._watcher.check_changes()
        for event in events:
            self.notify(event)
        return events

    def notify(self, event: FileChangeEvent) -> None:
        """Post a file change to the notification channel.

        Usable directly as a ``FileWatcher.start()`` callback.
        """
        log.debug("%s %s", event.path, event.change_type)
        self._state.channel.put(event.path)

    def close(self) -> SaveResult:
        """Shut the session down: stop watching and save state."""
        if self._watcher is not None:
            if self._watcher.is_running():
                self._watcher.stop()
            self._watcher.unwatch()
            self._watcher = None
        return self.save_state()
