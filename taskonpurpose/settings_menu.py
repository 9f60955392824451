"""The settings menu, which currently offers help on what can be configured."""

from __future__ import annotations

import enum
import sys
from collections.abc import Callable, Sequence
from typing import Any, TextIO

__all__ = [
    "ConfigureOption",
    "MenuInterrupted",
    "configure_settings",
    "help_text",
    "print_help",
]

Ask = Callable[[str, "Sequence[Any] | None"], Any]

_HELP_TEXT = """
    In the future you will be able to configure if core vs. non-core time is shown with the
    "Do Now" list. For now to find out this time you need to go into the Back Menu -> Reflection
    option and give a time range and then at the bottom of the report you will see core versus
    non-core time. For example enter "2d" and then "0m" to see the last two days of time.

    Also in the future you will be able to configure how the default selection is made when there
    are multiple choices in a priority list. Until then the recommendation is to set a goal for
    how much time you want to spend on core versus non-core work and then to generally favor core
    work or non-core work based on this goal. One strategy is to always favor core work in the
    urgent categories (🔥 & 🔴) and then when on the importance & maybe urgent category (🔝 & 🟡)
    go based on if you are above or below your goal of core work. Then you can make sure that you
    are able to get core work done without neglecting non-core work. Remember that you can quickly
    scan for if work is core or non-core by looking to the end of the item printed pay attention to
    the core unicode of a building🏢 or non-core unicode of a broom🧹.
    """


class MenuInterrupted(Exception):
    """Raised when the person interrupts a menu to leave the program."""


class ConfigureOption(enum.Enum):
    """Choices offered by the settings menu."""

    HELP = "❓ Help"

    def __str__(self) -> str:
        return self.value


def help_text() -> str:
    """Return the help text shown by the settings menu."""
    return _HELP_TEXT


def print_help(out: TextIO | None = None) -> None:
    """Write the settings help text to ``out`` (standard output by default)."""
    print(_HELP_TEXT, file=out if out is not None else sys.stdout)


def _console_ask(prompt: str, choices: Sequence[Any] | None) -> Any:
    """Ask on the terminal; return None when input ends (the prompt is cancelled)."""
    try:
        if choices is None:
            return input(f"{prompt} ")
        print(prompt)
        for number, choice in enumerate(choices, start=1):
            print(f"  {number}. {choice}")
        while True:
            answer = input("> ").strip()
            if answer.isdigit() and 1 <= int(answer) <= len(choices):
                return choices[int(answer) - 1]
            print(f"Enter a number from 1 to {len(choices)}")
    except EOFError:
        return None


def configure_settings(ask: Ask | None = None, out: TextIO | None = None) -> None:
    """Show the settings menu.

    ``ask(prompt, choices)`` returns the chosen item, or the typed text when
    ``choices`` is None, or None when the prompt is cancelled. A
    KeyboardInterrupt from it is raised as MenuInterrupted.
    """
    if ask is None:
        ask = _console_ask
    try:
        selection = ask("What to configure?", list(ConfigureOption))
        if selection is ConfigureOption.HELP:
            print_help(out)
            ask("Press Enter to continue...", None)
    except KeyboardInterrupt:
        raise MenuInterrupted() from None