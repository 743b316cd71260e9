"""Persisted session state.

Example usage:
    from potenad.state import SessionState

    state = SessionState.load_or_default(path)
    state.save(path)
"""

from potenad.state.session_state import SessionState

__all__ = ["SessionState"]
