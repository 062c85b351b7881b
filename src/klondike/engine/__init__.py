"""Klondike rules engine: cards, zones, commands and the game controller."""

from klondike.engine.cards import Card, Color, Rank, Suit, full_deck, shuffled_deck
from klondike.engine.piles import Foundation, Pile, Stock, Tableau, Waste
from klondike.engine.commands import (
    AutoFinish,
    Command,
    DrawFromStock,
    Failure,
    FailureKind,
    FoundationToPile,
    Outcome,
    PileToFoundation,
    PileToPile,
    Quit,
    Retire,
    ShowHelp,
    Success,
    SuccessKind,
    Unrecognized,
    WasteToFoundation,
    WasteToPile,
)
from klondike.engine.game import DealError, Game

__all__ = [
    "Card",
    "Color",
    "Rank",
    "Suit",
    "full_deck",
    "shuffled_deck",
    "Foundation",
    "Pile",
    "Stock",
    "Tableau",
    "Waste",
    "AutoFinish",
    "Command",
    "DrawFromStock",
    "Failure",
    "FailureKind",
    "FoundationToPile",
    "Outcome",
    "PileToFoundation",
    "PileToPile",
    "Quit",
    "Retire",
    "ShowHelp",
    "Success",
    "SuccessKind",
    "Unrecognized",
    "WasteToFoundation",
    "WasteToPile",
    "DealError",
    "Game",
]
