"""Text-based draw-1 Klondike Solitaire."""

from klondike.engine import Game, Success, Failure, SuccessKind, FailureKind
from klondike.playtest import SolitaireSession, SessionConfig

__all__ = [
    "Game",
    "Success",
    "Failure",
    "SuccessKind",
    "FailureKind",
    "SolitaireSession",
    "SessionConfig",
]
