"""Parsing of day names with an optional time, such as ``next Mon 5pm`` or ``Tomorrow 9:00am``."""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta

__all__ = ["parse_weekday_datetime"]

_PATTERN = re.compile(
    r"^\s*(last\s+|next\s+)?"
    r"(Monday|Mon|Tuesday|Tue|Wed|Wednesday|Thu|Thur|Thurs|Thursday|Fri|Friday"
    r"|Sat|Saturday|Sun|Sunday|Tomorrow)"
    r"\s*(([0-9]{1,2})(:[0-9]{2}(:[0-9]{2})?)?\s*(am|pm)?)?\s*$",
    re.IGNORECASE,
)

# Offsets counted from the Sunday that starts the current week.
_DAY_OFFSETS: dict[str, int] = {}
for _names, _offset in (
    (("sunday", "sun"), 0),
    (("monday", "mon"), 1),
    (("tuesday", "tue"), 2),
    (("wednesday", "wed"), 3),
    (("thursday", "thu", "thur", "thurs"), 4),
    (("friday", "fri"), 5),
    (("saturday", "sat"), 6),
):
    for _name in _names:
        _DAY_OFFSETS[_name] = _offset

_TWELVE_HOUR = re.compile(r"(\d{1,2}):(\d{2})\s*(am|pm)", re.IGNORECASE)
_HOUR_MINUTE = re.compile(r"(\d{1,2}):(\d{2})")
_HOUR_MINUTE_SECOND = re.compile(r"(\d{1,2}):(\d{2}):(\d{2})")


def _parse_time(text: str) -> time | None:
    match = _TWELVE_HOUR.fullmatch(text)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        if 1 <= hour <= 12 and minute < 60:
            hour %= 12
            if match.group(3).lower() == "pm":
                hour += 12
            return time(hour, minute)
    match = _HOUR_MINUTE.fullmatch(text)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        if hour < 24 and minute < 60:
            return time(hour, minute)
    match = _HOUR_MINUTE_SECOND.fullmatch(text)
    if match:
        hour, minute, second = (int(g) for g in match.groups())
        if hour < 24 and minute < 60 and second < 60:
            return time(hour, minute, second)
    return None


def _target_date(day: str, now: datetime) -> date:
    today = now.date()
    day = day.lower()
    if day == "tomorrow":
        return today + timedelta(days=1)
    days_since_sunday = (now.weekday() + 1) % 7
    return today - timedelta(days=days_since_sunday) + timedelta(days=_DAY_OFFSETS[day])


def parse_weekday_datetime(text: str, now: datetime) -> datetime:
    """Parse a day of the current week (or ``Tomorrow``) with an optional time.

    Weeks start on Sunday. A leading ``next`` or ``last`` moves the day a week
    forward or back. Without a time the result is the start of that day; a bare
    hour with am/pm means the start of that hour. The result carries the time
    zone of ``now``. Raises ValueError when the text cannot be understood.
    """
    match = _PATTERN.match(text)
    if match is None:
        raise ValueError(f"not a day of the week: {text!r}")

    target = _target_date(match.group(2), now)

    last_or_next = match.group(1)
    if last_or_next is not None:
        if last_or_next.strip().lower() == "next":
            target += timedelta(days=7)
        else:
            target -= timedelta(days=7)

    if match.group(3) is None:
        at = time(0, 0, 0)
    else:
        hour, minutes, seconds, meridiem = (
            match.group(4),
            match.group(5),
            match.group(6),
            match.group(7),
        )
        if hour is not None and minutes is None and seconds is None and meridiem is not None:
            time_text = f"{hour}:00{meridiem}"
        else:
            time_text = match.group(3)
        parsed = _parse_time(time_text)
        if parsed is None:
            raise ValueError(f"not a valid time in {text!r}")
        at = parsed

    return datetime.combine(target, at, tzinfo=now.tzinfo)