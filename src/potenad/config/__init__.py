"""Configuration path resolution for potenad.

The only persisted file is the session state:

    <user config dir>/potenad/config.toml

Example usage:
    from potenad.config import get_state_path

    path = get_state_path()
    if path is None:
        ...  # run without persistence
"""

from potenad.config.paths import (
    APP_NAME,
    CONFIG_DIR_ENV,
    STATE_FILENAME,
    get_state_path,
    get_user_config_dir,
)

__all__ = [
    "APP_NAME",
    "CONFIG_DIR_ENV",
    "STATE_FILENAME",
    "get_state_path",
    "get_user_config_dir",
]
