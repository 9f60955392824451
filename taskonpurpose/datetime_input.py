"""Reading a point in time typed by a person: exact dates, times, day names or offsets from now."""

from __future__ import annotations

import re
from datetime import date, datetime, time

from taskonpurpose.relative_time import parse_relative_duration
from taskonpurpose.weekday_time import parse_weekday_datetime

__all__ = [
    "parse_absolute_datetime",
    "parse_exact_or_relative_datetime",
    "parse_exact_or_relative_datetime_help_string",
]

_HELP = (
    "Enter an exact time or a time relative to now. Examples:\n"
    '"3:00pm" or "3pm", for today at 3:00pm or type "Tomorrow 3pm" for tomorrow at 3:00pm\n'
    '"Mon 3:15pm" for Monday of this week at 3pm. Or you can say "next Mon 5pm" for next week\'s Monday\n'
    'You can also say "last Mon 5pm" for last week\'s Monday\n'
    'Full dates also work like "1/15/2025 4:15pm" or "2/13/2025 4pm"\n'
    'Relative times also work like "30m" or "30min" for in thirty minutes from now, or\n'
    '  "1h", "1hour", for in an hour, or "1d", "1day", for in a day, or\n'
    '  "1w", "1week" for in a week; you can also say "30m ago" or "-30m" to give a time in the past\n'
)

_DATE_AND_REST = re.compile(r"^\s*(?P<date>\S+)(?:\s+(?P<time>.+?))?\s*$")
_MONTH_DAY_YEAR = re.compile(r"(\d{1,2})([/-])(\d{1,2})\2(\d{4}|\d{2})")
_YEAR_MONTH_DAY = re.compile(r"(\d{4})([/-])(\d{1,2})\2(\d{1,2})")
_TIME = re.compile(
    r"\s*(?P<hour>\d{1,2})(?::(?P<minute>\d{2})(?::(?P<second>\d{2}))?)?"
    r"\s*(?P<meridiem>am|pm)?\s*",
    re.IGNORECASE,
)


def parse_exact_or_relative_datetime_help_string() -> str:
    """Return the help text describing the accepted ways to enter a time."""
    return _HELP


def _parse_date(text: str) -> date | None:
    match = _MONTH_DAY_YEAR.fullmatch(text)
    if match:
        month, day, year_text = int(match.group(1)), int(match.group(3)), match.group(4)
        year = int(year_text) + (2000 if len(year_text) == 2 else 0)
        return date(year, month, day)
    match = _YEAR_MONTH_DAY.fullmatch(text)
    if match:
        return date(int(match.group(1)), int(match.group(3)), int(match.group(4)))
    return None


def _parse_time(text: str) -> time | None:
    match = _TIME.fullmatch(text)
    if match is None:
        return None
    minute_text, meridiem = match.group("minute"), match.group("meridiem")
    if minute_text is None and meridiem is None:
        return None
    hour = int(match.group("hour"))
    minute = int(minute_text) if minute_text is not None else 0
    second = int(match.group("second")) if match.group("second") is not None else 0
    if meridiem is not None:
        if not 1 <= hour <= 12:
            raise ValueError(f"hour out of range for am/pm: {text!r}")
        hour %= 12
        if meridiem.lower() == "pm":
            hour += 12
    return time(hour, minute, second)


def parse_absolute_datetime(text: str, now: datetime) -> datetime:
    """Parse a full date, a date with a time, or a time of today.

    A date without a time means the start of that day. Naive results take the
    time zone of ``now``; zoned ISO timestamps are converted to it.
    Raises ValueError when the text is not an exact date or time.
    """
    match = _DATE_AND_REST.match(text)
    if match is not None:
        day = _parse_date(match.group("date"))
        if day is not None:
            time_text = match.group("time")
            if time_text is None:
                at = time(0, 0, 0)
            else:
                parsed = _parse_time(time_text)
                if parsed is None:
                    raise ValueError(f"not a valid time in {text!r}")
                at = parsed
            return datetime.combine(day, at, tzinfo=now.tzinfo)

    at = _parse_time(text)
    if at is not None:
        return datetime.combine(now.date(), at, tzinfo=now.tzinfo)

    try:
        parsed_iso = datetime.fromisoformat(text.strip())
    except ValueError:
        raise ValueError(f"not a date or time: {text!r}") from None
    if parsed_iso.tzinfo is None:
        return parsed_iso.replace(tzinfo=now.tzinfo)
    return parsed_iso.astimezone(now.tzinfo)


def parse_exact_or_relative_datetime(text: str, now: datetime | None = None) -> datetime | None:
    """Turn typed text into a point in time, or None when it cannot be understood.

    Offsets from now (``30m``, ``2h ago``) are tried first, then exact dates and
    times, then day names such as ``next Mon 5pm``.
    """
    if now is None:
        now = datetime.now().astimezone()

    try:
        delta = parse_relative_duration(text)
    except ValueError:
        pass
    else:
        try:
            return now + delta
        except OverflowError:
            return None

    try:
        return parse_absolute_datetime(text, now)
    except ValueError:
        pass

    try:
        return parse_weekday_datetime(text, now)
    except ValueError:
        return None