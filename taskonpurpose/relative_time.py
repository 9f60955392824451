"""Parsing of durations typed relative to now, such as ``30m``, ``2 hours`` or ``1w ago``."""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal, InvalidOperation

__all__ = ["parse_relative_duration"]

_UNIT_SECONDS: dict[str, int] = {}
for _names, _seconds in (
    (("s", "sec", "secs", "second", "seconds"), 1),
    (("m", "min", "mins", "minute", "minutes"), 60),
    (("h", "hour", "hours"), 60 * 60),
    (("d", "day", "days"), 60 * 60 * 24),
    (("w", "week", "weeks"), 60 * 60 * 24 * 7),
):
    for _name in _names:
        _UNIT_SECONDS[_name] = _seconds

_DEFAULT_UNIT_SECONDS = 1

_NUMBER = r"(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"

_PATTERN = re.compile(
    rf"""
    (?:(?P<sign>[+-])\s*)?
    (?P<number>{_NUMBER})?
    \s*
    (?P<unit>[A-Za-z]+)?
    (?:\s+(?P<ago>ago))?
    """,
    re.VERBOSE,
)

_MAX_MICROSECONDS = (timedelta.max.days * 86400 + timedelta.max.seconds) * 10**6 + (
    timedelta.max.microseconds
)
_MIN_MICROSECONDS = -(timedelta.max.days + 1) * 86400 * 10**6


def parse_relative_duration(text: str) -> timedelta:
    """Parse a signed duration such as ``30m``, ``-30s``, ``2 hours`` or ``1w ago``.

    The number may be left out (``m`` means one minute) and the unit may be left
    out (``30`` means thirty seconds). Values too large to represent saturate.
    Raises ValueError when the text is not a duration.
    """
    match = _PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f"not a duration: {text!r}")

    number_text = match.group("number")
    unit = match.group("unit")
    if number_text is None and unit is None:
        raise ValueError(f"not a duration: {text!r}")

    if unit is None:
        unit_seconds = _DEFAULT_UNIT_SECONDS
    else:
        try:
            unit_seconds = _UNIT_SECONDS[unit]
        except KeyError:
            raise ValueError(f"unknown time unit {unit!r} in {text!r}") from None

    try:
        number = Decimal(number_text) if number_text is not None else Decimal(1)
    except InvalidOperation:
        raise ValueError(f"not a number in {text!r}") from None

    negative = (match.group("sign") == "-") != (match.group("ago") is not None)

    microseconds = number * unit_seconds * 10**6
    if negative:
        microseconds = -microseconds

    if microseconds >= _MAX_MICROSECONDS:
        return timedelta.max
    if microseconds <= _MIN_MICROSECONDS:
        return timedelta.min
    return timedelta(microseconds=int(microseconds.to_integral_value()))