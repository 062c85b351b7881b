"""Tests for rule explanations."""

from klondike.playtest.input import parse_command
from klondike.engine.commands import Unrecognized
from klondike.playtest.rules import HELP_TEXT, RuleExplainer


def test_rules_include_goal_and_commands():
    text = RuleExplainer().explain_rules()

    assert "Klondike" in text
    assert "Goal:" in text
    assert HELP_TEXT in text


def test_help_lists_every_command_key():
    keys = [line.split(":")[0].strip() for line in HELP_TEXT.split("\n")[1:]]

    assert keys == [
        "?", "r", "q", "n", "a", "k", "k[1-7]", "[1-7]",
        "[1-7][1-7]", "h[1-7]", "d[1-7]", "s[1-7]", "c[1-7]",
    ]


def test_help_keys_parse():
    for key in ["?", "r", "q", "n", "a", "k", "k1", "1", "12", "h1", "d1", "s1", "c1"]:
        assert not isinstance(parse_command(key), Unrecognized)
