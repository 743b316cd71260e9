"""potenad: minimal text editor session core."""

__version__ = "0.1.0"

# Public API
from potenad.config import get_state_path
from potenad.editor import EditorSession, SaveResult
from potenad.errors import PotenadError, StateError, StateLoadError, StateSaveError
from potenad.state import SessionState
from potenad.watching import FileChangeEvent, FileWatcher

__all__ = [
    # Main entry points
    "EditorSession",
    "SessionState",
    "get_state_path",
    # Results and events
    "SaveResult",
    "FileChangeEvent",
    "FileWatcher",
    # Errors
    "PotenadError",
    "StateError",
    "StateLoadError",
    "StateSaveError",
]
