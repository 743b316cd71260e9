"""Logging setup for potenad.

All modules log through children of the ``potenad`` logger. Output goes to
the file named by POTENAD_LOG when set, otherwise to stderr when it is a
console. The level comes from the CLI ``-v`` count or POTENAD_LOG_LEVEL.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_FILE_ENV = "POTENAD_LOG"
LOG_LEVEL_ENV = "POTENAD_LOG_LEVEL"

DEFAULT_LEVEL = logging.WARNING

logger = logging.getLogger("potenad")

_initialized = False

# -v count -> level; anything above the last entry means DEBUG
_VERBOSITY_LEVELS = (logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG)


class _LowercaseLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        record.levelname = record.levelname.lower()
        return super().format(record)


def resolve_level(verbose: int | None = None, level: str | None = None) -> int:
    """Pick a log level.

    A verbosity count wins over a level name. Without either, the
    POTENAD_LOG_LEVEL environment variable is used, then WARNING. Unknown
    names also give WARNING.
    """
    if verbose is not None:
        return _VERBOSITY_LEVELS[min(max(verbose, 0), len(_VERBOSITY_LEVELS) - 1)]
    name = (level or os.environ.get(LOG_LEVEL_ENV) or "").upper()
    return logging.getLevelNamesMapping().get(name, DEFAULT_LEVEL)


def setup_logging(
    verbose: int | None = None,
    level: str | None = None,
    file: str | None = None,
) -> None:
    """Attach a handler to the potenad logger. Only the first call has effect.

    Args:
        verbose: ``-v`` count: 0 errors, 1 warnings, 2 info, 3+ debug.
        level: Level name, used when ``verbose`` is None.
        file: Log file path. Defaults to POTENAD_LOG.
    """
    global _initialized
    if _initialized:
        return
    _initialized = True

    log_level = resolve_level(verbose, level)
    logger.setLevel(log_level)

    log_path = file or os.environ.get(LOG_FILE_ENV)
    handler: logging.Handler | None = None
    if log_path:
        try:
            handler = logging.FileHandler(
                os.path.expanduser(log_path), mode="a", encoding="utf-8"
            )
        except OSError as e:
            print(f"[potenad] Failed to open log file: {e}", file=sys.stderr)
            handler = logging.StreamHandler(sys.stderr)
    elif sys.stderr.isatty():
        handler = logging.StreamHandler(sys.stderr)

    if handler is None:
        return
    handler.setLevel(log_level)
    handler.setFormatter(
        _LowercaseLevelFormatter("%(asctime)s %(levelname)s: %(message)s", datefmt="%H:%M:%S")
    )
    logger.addHandler(handler)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the potenad logger, or its child ``potenad.<name>``."""
    return logger.getChild(name) if name else logger
