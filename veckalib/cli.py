"""
Command line entry point: ``python -m veckalib`` / ``veckalib``.

Subcommands:
  week [DATE]                   ISO week of a date (default: today)
  weeks-in-year YEAR            52 or 53
  window (YYYY-Www | YYYY-MM)   Start and end of a week or month
  countdown TARGET [--now DATE] Next occurrence of MM-DD, a preset or a date

Exit codes: 0 success, 2 invalid input.
"""

import argparse
import logging
import re
import sys
from typing import List, Optional

from veckalib.conventions.calendars import resolve_calendar
from veckalib.conventions.types import CountdownType
from veckalib.recurrence import anchor_from_components, make_anchor, preset_anchor, resolve
from veckalib.weeks import (
    month_window,
    parse_week_id,
    week_info,
    week_window,
    weeks_in_year,
)

logger = logging.getLogger(__name__)

_MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{1,2})$")
_MONTH_DAY_PATTERN = re.compile(r"^(\d{1,2})-(\d{1,2})$")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="veckalib",
        description="ISO 8601 week numbers, date windows and countdowns",
    )
    parser.add_argument(
        "--calendar",
        metavar="NAME",
        default=None,
        help="Registered calendar name (ISO8601, UTC, SE, ...). Defaults to $VECKALIB_CALENDAR or ISO8601.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    week = sub.add_parser("week", help="ISO week of a date")
    week.add_argument("date", nargs="?", default=None, metavar="YYYY-MM-DD")

    count = sub.add_parser("weeks-in-year", help="Number of ISO weeks in a year")
    count.add_argument("year", type=int)

    window = sub.add_parser("window", help="Date range of a week or month")
    window.add_argument("target", metavar="YYYY-Www|YYYY-MM")

    countdown = sub.add_parser("countdown", help="Next occurrence of an event")
    countdown.add_argument(
        "target",
        metavar="MM-DD|PRESET|YYYY-MM-DD",
        help=f"Annual month-day, a preset ({', '.join(k.value for k in CountdownType)}) or a one-time date",
    )
    countdown.add_argument("--now", default=None, metavar="YYYY-MM-DD", help="Reference date (default: today)")
    countdown.add_argument(
        "--annual",
        action="store_true",
        help="Treat a full YYYY-MM-DD target as repeating every year.",
    )
    return parser


def _run_week(args, calendar) -> None:
    info = week_info(args.date, calendar=calendar)
    print(info.week_id)
    print(info.summary())


def _run_window(args) -> None:
    target = args.target.strip()
    month_match = _MONTH_PATTERN.match(target)
    if month_match:
        window = month_window(int(month_match.group(1)), int(month_match.group(2)))
    else:
        window = week_window(parse_week_id(target))
    print(f"{window.start.isoformat()} {window.end.isoformat()}")


def _countdown_anchor(target: str, annual: bool, calendar):
    target = target.strip()
    preset_key = target.lower().replace("-", "_")
    if preset_key in {kind.value for kind in CountdownType}:
        return preset_anchor(preset_key)
    month_day = _MONTH_DAY_PATTERN.match(target)
    if month_day:
        return anchor_from_components(int(month_day.group(1)), int(month_day.group(2)))
    return make_anchor(target, annual, calendar)


def _run_countdown(args, calendar) -> None:
    anchor = _countdown_anchor(args.target, args.annual, calendar)
    now = calendar.now() if args.now is None else args.now
    occurrence = resolve(anchor, now, calendar)
    plural = "" if abs(occurrence.day_offset) == 1 else "s"
    print(f"{occurrence.date.isoformat()} ({occurrence.day_offset} day{plural})")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Returns:
        int: Exit code (0 = success, 2 = invalid input).
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )

    try:
        calendar = resolve_calendar(args.calendar)
        if args.command == "week":
            _run_week(args, calendar)
        elif args.command == "weeks-in-year":
            print(weeks_in_year(args.year))
        elif args.command == "window":
            _run_window(args)
        elif args.command == "countdown":
            _run_countdown(args, calendar)
    except (ValueError, TypeError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0
