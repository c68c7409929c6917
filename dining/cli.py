"""Command-line entry point for the dining simulation."""

from __future__ import annotations

import sys

from dining.settings import SettingsError, parse_settings
from dining.table import Table


def main(argv=None) -> int:
    """Run the simulation for the given arguments; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        settings = parse_settings(args)
    except SettingsError as error:
        print(f"Error: {error}")
        return 1
    Table(settings, sys.stdout).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())