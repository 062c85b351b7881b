"""Player commands and their outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class DrawFromStock:
    """Turn the next stock card onto the waste."""


@dataclass(frozen=True)
class WasteToFoundation:
    """Play the waste top onto its foundation."""


@dataclass(frozen=True)
class AutoFinish:
    """Move tableau cards to the foundations while possible."""


@dataclass(frozen=True)
class WasteToPile:
    pile: int  # 1-7


@dataclass(frozen=True)
class PileToFoundation:
    pile: int  # 1-7


@dataclass(frozen=True)
class PileToPile:
    src: int  # 1-7
    dest: int  # 1-7


@dataclass(frozen=True)
class FoundationToPile:
    foundation: int  # 0-3: hearts, diamonds, spades, clubs
    pile: int  # 1-7


# Boundary-only commands, handled by the session rather than the engine
@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class ShowHelp:
    pass


@dataclass(frozen=True)
class Retire:
    pass


@dataclass(frozen=True)
class Unrecognized:
    text: str = ""


Command = Union[
    DrawFromStock,
    WasteToFoundation,
    AutoFinish,
    WasteToPile,
    PileToFoundation,
    PileToPile,
    FoundationToPile,
    Quit,
    ShowHelp,
    Retire,
    Unrecognized,
]


class SuccessKind(Enum):
    """What a successful command produced."""

    VALID_MOVE = "valid_move"
    VICTORY = "victory"
    QUIT = "quit"
    RETIRE = "retire"
    HELP = "help"


class FailureKind(Enum):
    """Why a command was rejected."""

    INVALID_MOVE = "invalid_move"
    INVALID_COMMAND = "invalid_command"


@dataclass(frozen=True)
class Success:
    """Accepted command, with the text to show the player."""

    kind: SuccessKind
    text: str = ""

    @property
    def ok(self) -> bool:
        return True

    @property
    def victory(self) -> bool:
        return self.kind == SuccessKind.VICTORY


@dataclass(frozen=True)
class Failure:
    """Rejected command. Game state is untouched."""

    kind: FailureKind
    reason: str = ""

    @property
    def ok(self) -> bool:
        return False

    @property
    def victory(self) -> bool:
        return False


Outcome = Union[Success, Failure]


def invalid_move(reason: str = "") -> Failure:
    return Failure(FailureKind.INVALID_MOVE, reason)


def invalid_command(reason: str = "") -> Failure:
    return Failure(FailureKind.INVALID_COMMAND, reason)
