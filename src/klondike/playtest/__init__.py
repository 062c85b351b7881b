"""Terminal play layer for the Klondike engine."""

from klondike.playtest.display import StateRenderer, format_card
from klondike.playtest.rules import RuleExplainer, HELP_TEXT
from klondike.playtest.input import HumanPlayer, InputResult, parse_command
from klondike.playtest.session import SolitaireSession, SessionConfig, SessionResult

__all__ = [
    "StateRenderer",
    "format_card",
    "RuleExplainer",
    "HELP_TEXT",
    "HumanPlayer",
    "InputResult",
    "parse_command",
    "SolitaireSession",
    "SessionConfig",
    "SessionResult",
]
