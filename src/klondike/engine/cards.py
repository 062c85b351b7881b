"""Card schema and the 52-card deck."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class Rank(Enum):
    """Playing card ranks, Ace low."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    @property
    def value_rank(self) -> int:
        """Numeric order: Ace=1 ... King=13."""
        return RANK_VALUES[self]


# Rank value mapping for card comparison
RANK_VALUES = {rank: i + 1 for i, rank in enumerate(Rank)}


class Color(Enum):
    """Card colors."""

    RED = "red"
    BLACK = "black"


class Suit(Enum):
    """Playing card suits, in foundation scan order."""

    HEARTS = "H"
    DIAMONDS = "D"
    SPADES = "S"
    CLUBS = "C"

    @property
    def color(self) -> Color:
        if self in (Suit.HEARTS, Suit.DIAMONDS):
            return Color.RED
        return Color.BLACK


@dataclass(frozen=True)
class Card:
    """Immutable playing card.

    Turning a card over produces a new Card; piles swap the old one out.
    """

    rank: Rank
    suit: Suit
    face_up: bool = False

    @property
    def color(self) -> Color:
        return self.suit.color

    def face_up_copy(self) -> "Card":
        """Same card, face-up."""
        return self if self.face_up else replace(self, face_up=True)

    def face_down_copy(self) -> "Card":
        """Same card, face-down."""
        return replace(self, face_up=False) if self.face_up else self

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"


def full_deck() -> list[Card]:
    """The 52 canonical cards, each face-down, in suit then rank order."""
    return [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank]


def shuffled_deck(rng: Optional[random.Random] = None) -> list[Card]:
    """Uniformly shuffled 52-card deck.

    Args:
        rng: Random source; the process-level generator is used if None.
    """
    deck = full_deck()
    if rng is None:
        random.shuffle(deck)
    else:
        rng.shuffle(deck)
    return deck
