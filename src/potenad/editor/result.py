"""State save result dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class SaveResult:
    """Outcome of saving the session state.

    Attributes:
        status: "ok", "error", or "skipped" (in-memory session).
        path: The state file targeted, or None for an in-memory session.
        error: Human-readable failure reason when status is "error".
    """

    status: str  # "ok", "error", "skipped"
    path: Path | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        """True unless the save was attempted and failed."""
        return self.status != "error"

    def __repr__(self) -> str:
        if self.status == "error":
            return f"<SaveResult error: {self.error}>"
        return f"<SaveResult {self.status}>"
