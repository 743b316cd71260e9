"""Platform-aware configuration path resolution.

Handles the user config directory for:
- Windows: %APPDATA%
- macOS: ~/Library/Application Support
- Other Unix: $XDG_CONFIG_HOME, falling back to ~/.config

POTENAD_CONFIG_DIR overrides the platform lookup on every platform.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from potenad.logging import get_logger

STATE_FILENAME = "config.toml"
APP_NAME = "potenad"
CONFIG_DIR_ENV = "POTENAD_CONFIG_DIR"

_log = get_logger("config")


def _home() -> Path | None:
    try:
        return Path.home()
    except RuntimeError:
        # No HOME and no passwd entry
        return None


def get_user_config_dir() -> Path | None:
    """Get the platform's per-user configuration directory.

    Returns:
        The base config directory (without the app name), or None if the
        platform cannot supply one. The directory may not exist.
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()

    if sys.platform == "win32":
        app_data = os.environ.get("APPDATA")
        if app_data:
            return Path(app_data)
        return None

    home = _home()

    if sys.platform == "darwin":
        return home / "Library" / "Application Support" if home else None

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)

    return home / ".config" if home else None


def get_state_path() -> Path | None:
    """Get the session state file path.

    Returns:
        ``<user config dir>/potenad/config.toml``, or None when no user
        config directory is available. The file may not exist.
    """
    config_dir = get_user_config_dir()
    if config_dir is None:
        _log.warning("No user config directory available; session state will not persist")
        return None
    return config_dir / APP_NAME / STATE_FILENAME
