"""Command-line interface for potenad.

Stands in for the GUI layer: each command drives the same EditorSession
operations a window's File menu would.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from potenad import __version__
from potenad.config.paths import APP_NAME, STATE_FILENAME
from potenad.editor import EditorSession, SaveResult
from potenad.logging import setup_logging

console = Console()
err_console = Console(stderr=True)

# Exit codes
EXIT_OK = 0
EXIT_OPEN_FAILED = 1
EXIT_SAVE_FAILED = 2


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="potenad",
        description="Minimal text editor session tool",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=None,
        help="Increase verbosity (can be repeated)",
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        help="Base config directory (default: platform user config dir)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command")

    open_parser = subparsers.add_parser("open", help="Open a file and remember it")
    open_parser.add_argument("path", type=Path, help="File to open")

    subparsers.add_parser("last", help="Reopen the last opened file")
    subparsers.add_parser("state", help="Show the session state")
    subparsers.add_parser("forget", help="Forget the last opened file")

    return parser


def _make_session(config_dir: Path | None) -> EditorSession:
    if config_dir is not None:
        return EditorSession(config_dir / APP_NAME / STATE_FILENAME)
    return EditorSession.create()


def _show_document(session: EditorSession) -> None:
    console.rule(Text(str(session.path)))
    console.print(session.contents, markup=False, highlight=False, soft_wrap=True, end="")
    if session.contents and not session.contents.endswith("\n"):
        console.print()


def _finish(result: SaveResult) -> int:
    if not result.success:
        err_console.print(f"[red]Could not save session state:[/red] {escape(str(result.error))}")
        return EXIT_SAVE_FAILED
    return EXIT_OK


def run_cli(args: Sequence[str]) -> int:
    """Run the CLI with the given arguments."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    if parsed.command is None:
        parser.print_help()
        return EXIT_OPEN_FAILED

    setup_logging(verbose=parsed.verbose)
    session = _make_session(parsed.config_dir)

    if parsed.command == "open":
        try:
            session.open_file(parsed.path.resolve())
        except (OSError, ValueError) as e:
            err_console.print(
                f"[red]Cannot open {escape(str(parsed.path))}:[/red] {escape(str(e))}"
            )
            return EXIT_OPEN_FAILED
        _show_document(session)
        return _finish(session.close())

    elif parsed.command == "last":
        if not session.reopen_last():
            err_console.print("No previously opened file to reopen")
            return EXIT_OPEN_FAILED
        _show_document(session)
        return _finish(session.close())

    elif parsed.command == "state":
        location = str(session.state_path) if session.persistent else "(in memory)"
        console.print(f"state file: {location}", markup=False, highlight=False, soft_wrap=True)
        last = str(session.path) if session.path else "(none)"
        console.print(f"last file:  {last}", markup=False, highlight=False, soft_wrap=True)
        return EXIT_OK

    elif parsed.command == "forget":
        session.forget()
        return _finish(session.close())

    parser.print_help()
    return EXIT_OPEN_FAILED
