"""Exception hierarchy for potenad."""

from __future__ import annotations


class PotenadError(Exception):
    """Base class for all potenad errors."""


class StateError(PotenadError):
    """Error reading or writing the persisted session state."""


class StateLoadError(StateError):
    """Session state could not be loaded.

    Raised when:
    - The state file does not exist or cannot be read
    - The file is not valid UTF-8
    - The content is not valid TOML
    - The TOML does not match the state schema (unknown keys, wrong types)

    The underlying exception is chained as ``__cause__``.
    """

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Cannot load session state from {path}: {reason}")
        self.path = path
        self.reason = reason


class StateSaveError(StateError):
    """Session state could not be written to disk."""

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Cannot save session state to {path}: {reason}")
        self.path = path
        self.reason = reason
