"""File watching for the open document.

Provides polling-based detection of external changes to the file held by
an EditorSession. Changes are reported through the session's notification
channel.
"""

from potenad.watching.watcher import (
    FileChangeEvent,
    FileWatcher,
    WatchedFile,
)

__all__ = [
    "FileChangeEvent",
    "FileWatcher",
    "WatchedFile",
]
