"""CLI entry point for potenad.

Usage:
    python -m potenad open notes.txt
    python -m potenad last
"""

import sys


def main() -> int:
    """Main entry point for the potenad CLI."""
    from potenad.cli import run_cli

    return run_cli(sys.argv[1:])


if __name__ == "__main__":
    sys.exit(main())
