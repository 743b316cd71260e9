"""Session state model and its TOML persistence.

The state file holds only durable fields:

    path = "/home/user/notes.txt"

Runtime fields (file contents, notification channel) live on the model as
private attributes, so they never reach the serializer and start out empty
on every load.
"""

from __future__ import annotations

import queue
import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, ConfigDict, PrivateAttr, ValidationError, field_validator

from potenad.errors import StateLoadError, StateSaveError
from potenad.logging import get_logger

log = get_logger("state")


class SessionState(BaseModel):
    """Durable session record plus runtime-only editor data.

    Attributes:
        path: Last opened file, or None if nothing has been opened yet.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    path: Path | None = None

    # Runtime only, never serialized
    _contents: str = PrivateAttr(default="")
    _channel: queue.Queue[Path] = PrivateAttr(default_factory=queue.Queue)

    @field_validator("path")
    @classmethod
    def reject_nul(cls, value: Path | None) -> Path | None:
        if value is not None and "\x00" in str(value):
            raise ValueError("path contains a NUL character")
        return value

    @property
    def contents(self) -> str:
        """Full text of the open file."""
        return self._contents

    @property
    def channel(self) -> queue.Queue[Path]:
        """Notification channel for background events (changed file paths)."""
        return self._channel

    def replace_document(self, path: Path, contents: str) -> None:
        """Record a newly opened file, replacing any previous contents."""
        self._contents = contents
        self.path = path

    def forget(self) -> None:
        """Drop the remembered path and the in-memory contents."""
        self._contents = ""
        self.path = None

    @classmethod
    def load(cls, path: Path) -> SessionState:
        """Load session state from a TOML file.

        Args:
            path: Location of the state file.

        Returns:
            The decoded state, with runtime fields at their defaults.

        Raises:
            StateLoadError: If the file is missing, unreadable, not UTF-8,
                not valid TOML, or does not match the schema.
        """
        try:
            raw = path.read_bytes()
        except FileNotFoundError as e:
            raise StateLoadError(path, "file not found") from e
        except OSError as e:
            raise StateLoadError(path, e.strerror or str(e)) from e

        try:
            data = tomllib.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise StateLoadError(path, "not valid UTF-8") from e
        except tomllib.TOMLDecodeError as e:
            raise StateLoadError(path, f"invalid TOML: {e}") from e

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise StateLoadError(path, f"{e.error_count()} invalid field(s)") from e

    @classmethod
    def load_or_default(cls, path: Path) -> SessionState:
        """Load session state, falling back to an empty state on any error."""
        try:
            state = cls.load(path)
        except StateLoadError as e:
            if isinstance(e.__cause__, FileNotFoundError):
                log.debug("No session state at %s", path)
            else:
                log.warning("%s; starting with an empty session", e)
            return cls()
        log.debug("Loaded session state from %s", path)
        return state

    def to_toml(self) -> str:
        """Encode the durable fields as TOML.

        A None path is omitted, since TOML has no null.
        """
        return tomli_w.dumps(self.model_dump(mode="json", exclude_none=True))

    def save(self, path: Path) -> Path:
        """Write the durable fields to ``path``.

        Missing parent directories are created. Any existing file is
        overwritten in place (not atomically).

        Returns:
            The path written.

        Raises:
            StateSaveError: If the directory or file cannot be written.
        """
        encoded = self.to_toml().encode("utf-8")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(encoded)
        except OSError as e:
            raise StateSaveError(path, e.strerror or str(e)) from e
        log.debug("Saved session state to %s", path)
        return path
