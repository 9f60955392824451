import io

import pytest

from taskonpurpose.settings_menu import (
    ConfigureOption,
    MenuInterrupted,
    configure_settings,
    help_text,
    print_help,
)


class ScriptedAsk:
    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []
        self.choices = []

    def __call__(self, prompt, choices):
        self.prompts.append(prompt)
        self.choices.append(choices)
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer


def test_offered_options_are_labelled():
    ask = ScriptedAsk(None)
    configure_settings(ask, io.StringIO())
    offered = ask.choices[0]
    assert offered == [ConfigureOption.HELP]
    assert [str(option) for option in offered] == ["❓ Help"]


def test_help_text_mentions_reflection_and_icons():
    text = help_text()
    assert "Back Menu -> Reflection" in text
    assert "building🏢" in text
    assert "broom🧹" in text


def test_print_help_writes_help_text():
    out = io.StringIO()
    print_help(out)
    assert out.getvalue() == help_text() + "\n"


def test_choosing_help_prints_it_and_waits():
    ask = ScriptedAsk(ConfigureOption.HELP, "")
    out = io.StringIO()
    configure_settings(ask, out)
    assert out.getvalue() == help_text() + "\n"
    assert ask.prompts == ["What to configure?", "Press Enter to continue..."]
    assert ask.choices == [[ConfigureOption.HELP], None]


def test_cancelling_the_continue_prompt_returns_normally():
    ask = ScriptedAsk(ConfigureOption.HELP, None)
    out = io.StringIO()
    assert configure_settings(ask, out) is None
    assert out.getvalue() == help_text() + "\n"


def test_cancelling_the_selection_prints_nothing():
    ask = ScriptedAsk(None)
    out = io.StringIO()
    configure_settings(ask, out)
    assert out.getvalue() == ""
    assert ask.prompts == ["What to configure?"]


def test_interrupt_on_selection_raises_menu_interrupted():
    ask = ScriptedAsk(KeyboardInterrupt())
    with pytest.raises(MenuInterrupted):
        configure_settings(ask, io.StringIO())


def test_interrupt_on_continue_raises_menu_interrupted():
    ask = ScriptedAsk(ConfigureOption.HELP, KeyboardInterrupt())
    out = io.StringIO()
    with pytest.raises(MenuInterrupted):
        configure_settings(ask, out)
    assert out.getvalue() == help_text() + "\n"