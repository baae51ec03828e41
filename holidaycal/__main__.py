"""Command-line entry for holidaycal.

This module provides the ``holidaycal`` console script and
``python -m holidaycal``; all work is delegated to ``holidaycal.run()``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn

from . import run
from .exceptions import HolidayCalError

logger = logging.getLogger(__name__)


def _create_parser() -> argparse.ArgumentParser:
    """Create argument parser for holidaycal CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="holidaycal",
        description="Holiday calendar - month grid and holiday list viewer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  holidaycal --data state.json                      # Current month as a grid
  holidaycal --data state.json --year 2024 --month 12
  holidaycal --data state.yaml --view list          # This year's holidays
  holidaycal --data state.json --format html > calendar.html
  holidaycal --data state.json --interactive        # Navigate with arrow keys
        """,
    )

    parser.add_argument(
        "--data",
        metavar="PATH",
        help="JSON/YAML state snapshot with holidays under academicCalendar.data "
        "(or HOLIDAYCAL_DATA_FILE env var)",
    )
    parser.add_argument("--config", metavar="PATH", help="YAML configuration file")
    parser.add_argument("--year", type=int, metavar="YEAR", help="Year to display (default: current)")
    parser.add_argument(
        "--month",
        type=int,
        choices=range(1, 13),
        metavar="MONTH",
        help="Month to display, 1-12 (default: current)",
    )
    parser.add_argument(
        "--view", choices=["grid", "list"], default="grid", help="Initial view (default: grid)"
    )
    parser.add_argument(
        "--format", choices=["console", "html"], help="Output format (default: console)"
    )
    parser.add_argument(
        "--interactive", action="store_true", help="Navigate interactively with the keyboard"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    return parser


def main(argv: list[str] | None = None) -> NoReturn:
    """Run the holidaycal CLI."""
    parser = _create_parser()
    args = parser.parse_args(argv)

    try:
        exit_code = run(args)
    except HolidayCalError as e:
        logger.error(f"holidaycal: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("Operation cancelled by user")
        sys.exit(130)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
