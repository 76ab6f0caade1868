"""
Device clock.

The clock keeps a user-set wall time as an offset from the host clock and
tracks uptime from when it was created. parse_clock_set turns the arguments
of 'clock set hh:mm:ss day month year' into a datetime.
"""

import calendar
import time
from datetime import datetime, timedelta
from typing import Optional, Sequence

from ..errors import AmbiguousAbbreviation, ArgumentFormatError, ResourceUnavailable
from ..registry.matching import MatchKind, lookup_by_prefix

MIN_YEAR = 1993
MAX_YEAR = 2035

MONTHS = [calendar.month_name[i] for i in range(1, 13)]

CLOCK_SET_USAGE = "Usage: clock set <hh:mm:ss> <day 1-31> <month> <year 1993-2035>"


class Clock:
    """Settable wall clock plus uptime counter."""

    def __init__(self):
        self._offset = timedelta(0)
        self._started = time.monotonic()

    def now(self) -> datetime:
        return datetime.now() + self._offset

    def set(self, when: datetime) -> None:
        self._offset = when - datetime.now()

    def uptime(self) -> timedelta:
        return timedelta(seconds=int(time.monotonic() - self._started))

    def format_uptime(self) -> str:
        total = int(self.uptime().total_seconds())
        hours, rest = divmod(total, 3600)
        minutes, seconds = divmod(rest, 60)
        return f"PNF uptime is {hours} hours, {minutes} minutes, {seconds} seconds"

    def format_now(self) -> str:
        now = self.now()
        return f"{now:%H:%M:%S}.{now.microsecond // 1000:03d} {now:%a %b %d %Y}"


def resolve_month(token: str) -> int:
    """Resolve a month name or unique abbreviation to 1-12."""
    names = [m.lower() for m in MONTHS]
    match = lookup_by_prefix(token.lower(), names)
    if match.kind is MatchKind.AMBIGUOUS:
        raise AmbiguousAbbreviation(token, [MONTHS[names.index(m)] for m in match.matches])
    if match.kind is MatchKind.NONE:
        raise ArgumentFormatError(f"Invalid month: {token}")
    return names.index(match.name) + 1


def _parse_time(text: str) -> tuple[int, int, int]:
    parts = text.split(":")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        raise ArgumentFormatError("Invalid time format. Expected hh:mm:ss")
    hour, minute, second = (int(p) for p in parts)
    if hour > 23:
        raise ArgumentFormatError("Invalid hour. Hour must be between 0 and 23.")
    if minute > 59:
        raise ArgumentFormatError("Invalid minute. Minute must be between 0 and 59.")
    if second > 59:
        raise ArgumentFormatError("Invalid second. Second must be between 0 and 59.")
    return hour, minute, second


def parse_clock_set(args: Sequence[str]) -> datetime:
    """
    Parse ['set', 'hh:mm:ss', day, month, year] into a datetime.

    Raises:
        ArgumentFormatError: wrong shape or out-of-range field
        AmbiguousAbbreviation: month abbreviation matches several months
    """
    if len(args) != 5 or args[0] != "set":
        raise ArgumentFormatError(CLOCK_SET_USAGE)

    _, time_text, day_text, month_text, year_text = args
    hour, minute, second = _parse_time(time_text)

    if not year_text.isdigit():
        raise ArgumentFormatError(f"Invalid year: {year_text}")
    year = int(year_text)
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ArgumentFormatError(
            f"Invalid year. Year must be between {MIN_YEAR} and {MAX_YEAR}."
        )

    month = resolve_month(month_text)

    if not day_text.isdigit():
        raise ArgumentFormatError(f"Invalid day: {day_text}")
    day = int(day_text)
    max_day = calendar.monthrange(year, month)[1]
    if not 1 <= day <= max_day:
        raise ArgumentFormatError(
            f"Invalid day. {MONTHS[month - 1]} {year} has days 1 to {max_day}."
        )

    return datetime(year, month, day, hour, minute, second)


def require_clock(clock: Optional[Clock]) -> Clock:
    """Return the clock or fail when the device has none."""
    if clock is None:
        raise ResourceUnavailable("Clock functionality is unavailable.")
    return clock
