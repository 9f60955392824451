# taskonpurpose

Helpers for reading the date and time phrases people type when planning
work or looking back at what they did: "30m", "next Mon 5pm",
"1/15/2025 3pm", "2h ago", and so on.

## What it understands

- **Relative times**: an optional sign, a number and a unit, with or
  without a space between them: `30s`, `30 sec`, `30m`, `30 minutes`,
  `1h`, `2 hours`, `1d`, `2 days`, `1w`, `2 weeks`. A leading `-` or a
  trailing `ago` puts the time in the past (`-30m`, `30m ago`). The number
  may be left out (`m` is one minute) and so may the unit (`30` is thirty
  seconds). Durations too large to represent saturate.
- **Weekdays**: `Mon`, `Tuesday`, `THU` and so on mean that day of the
  current week, which starts on Sunday. Prefix with `next` or `last` to
  move a week forward or back. `Tomorrow` means the day after today.
  A time may follow: `Mon 5pm`, `next Mon 5:17pm`, `last Fri 17:17:30`.
  Without a time the start of the day is meant; a bare hour with am/pm
  means the start of that hour.
- **Exact dates and times**: `3pm`, `3:00pm`, `9am` (today),
  `12/15/2024` (start of that day), `1/15/2025 3:00pm`, `1/15/2025 3pm`.
  Dates may also be written `month-day-year`, with a two-digit year
  (taken as 20xx), or `year/month/day`. ISO 8601 timestamps are accepted
  too; zoned ones are converted to the time zone of `now`.

The forms are tried in that order: relative, then exact, then weekday.
Anything else is not understood, and the parser returns `None`.

## Usage

```python
from datetime import datetime

from taskonpurpose.datetime_input import (
    parse_exact_or_relative_datetime,
    parse_exact_or_relative_datetime_help_string,
)

now = datetime.now().astimezone()

when = parse_exact_or_relative_datetime("next Mon 5pm", now)
if when is None:
    print(parse_exact_or_relative_datetime_help_string())
```

`now` may be left out, in which case the current local time is used.
Results carry the time zone of `now`.

The pieces can be used on their own as well; each raises `ValueError`
when the text is not of its form:

- `taskonpurpose.relative_time.parse_relative_duration(text)` returns a
  `timedelta` for the relative forms.
- `taskonpurpose.weekday_time.parse_weekday_datetime(text, now)` reads
  only the weekday and `Tomorrow` forms.
- `taskonpurpose.datetime_input.parse_absolute_datetime(text, now)` reads
  only clock times, calendar dates and ISO timestamps.

## Settings menu

`taskonpurpose.settings_menu` holds the small "What to configure?" menu.
`configure_settings(ask=None, out=None)` calls `ask(prompt, choices)`,
which returns the chosen `ConfigureOption`, the typed text when `choices`
is `None`, or `None` when the prompt is cancelled. Without `ask`, a plain
numbered prompt on the terminal is used. Choosing `ConfigureOption.HELP`
writes the help text to `out` (standard output by default) and waits for
Enter. A `KeyboardInterrupt` raised while asking becomes
`MenuInterrupted`. The help text is also available from `help_text()`
and `print_help(out)`.

## What it does not do

This package only reads typed times and shows the settings help. It has
no command to run, no task list or "Do Now" list, no reflection report
and no storage for tasks or time spent.