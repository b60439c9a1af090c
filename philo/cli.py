"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from philo.parsing import ArgumentError, check_input, parse_settings
from philo.table import Table

__all__ = ["main"]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation; arguments are philosophers, die, eat, sleep [, meals]."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        check_input(args)
        settings = parse_settings(args)
    except ArgumentError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        Table(settings, sys.stdout).run()
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())