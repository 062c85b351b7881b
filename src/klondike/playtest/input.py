"""Human input handling: typed text to game commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from klondike.engine.commands import (
    AutoFinish,
    Command,
    DrawFromStock,
    FoundationToPile,
    PileToFoundation,
    PileToPile,
    Quit,
    Retire,
    ShowHelp,
    Unrecognized,
    WasteToFoundation,
    WasteToPile,
)
from klondike.engine.game import CLUB_FD, DIAMOND_FD, HEART_FD, SPADE_FD

# Foundation letters map to foundation indices
FOUNDATION_KEYS = {"h": HEART_FD, "d": DIAMOND_FD, "s": SPADE_FD, "c": CLUB_FD}

SIMPLE_COMMANDS = {
    "?": ShowHelp(),
    "r": Retire(),
    "q": Quit(),
    "n": DrawFromStock(),
    "a": AutoFinish(),
    "k": WasteToFoundation(),
}

PILE_DIGITS = "1234567"


def parse_command(text: str) -> Command:
    """Parse one line of player input.

    Unknown input parses to Unrecognized rather than raising.
    """
    raw = text.strip().lower()

    if raw in SIMPLE_COMMANDS:
        return SIMPLE_COMMANDS[raw]

    if len(raw) == 1 and raw in PILE_DIGITS:
        return PileToFoundation(pile=int(raw))

    if len(raw) == 2:
        first, second = raw
        if second in PILE_DIGITS:
            if first == "k":
                return WasteToPile(pile=int(second))
            if first in PILE_DIGITS:
                return PileToPile(src=int(first), dest=int(second))
            if first in FOUNDATION_KEYS:
                return FoundationToPile(foundation=FOUNDATION_KEYS[first], pile=int(second))

    return Unrecognized(text=text.strip())


@dataclass
class InputResult:
    """Result of human input."""

    command: Optional[Command] = None
    quit: bool = False


class HumanPlayer:
    """Reads commands from the terminal."""

    def get_command(self, prompt: str = "> ") -> InputResult:
        """Read and parse one command.

        Returns:
            InputResult with the parsed command, or quit on EOF/Ctrl-C
        """
        try:
            raw = input(prompt)
        except (EOFError, KeyboardInterrupt):
            return InputResult(quit=True)

        command = parse_command(raw)
        return InputResult(command=command, quit=isinstance(command, Quit))
