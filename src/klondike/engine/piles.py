"""Card zones: tableau piles, foundations, stock and waste.

All zones store cards bottom to top, so the playable card is always the
last element. Empty zones answer queries with None rather than failing.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from klondike.engine.cards import Card, Rank, Suit

PILE_COUNT = 7


class Pile:
    """One tableau column."""

    def __init__(self, cards: Optional[Iterable[Card]] = None) -> None:
        self.cards: List[Card] = list(cards) if cards else []

    def __len__(self) -> int:
        return len(self.cards)

    def top(self) -> Optional[Card]:
        return self.cards[-1] if self.cards else None

    def add_card(self, card: Card) -> None:
        self.cards.append(card)

    def can_add(self, card: Card) -> bool:
        """Empty piles take any card; otherwise alternate color, one rank down."""
        top = self.top()
        if top is None:
            return True
        return (
            top.face_up
            and top.color != card.color
            and card.rank.value_rank == top.rank.value_rank - 1
        )

    def take(self) -> Optional[Card]:
        """Pop the top card and reveal the one beneath it."""
        if not self.cards:
            return None
        card = self.cards.pop()
        self.flip_top()
        return card

    def flip_top(self) -> None:
        if self.cards and not self.cards[-1].face_up:
            self.cards[-1] = self.cards[-1].face_up_copy()


class Tableau:
    """The seven tableau piles, addressed by 0-based index."""

    def __init__(self) -> None:
        self.piles: List[Pile] = [Pile() for _ in range(PILE_COUNT)]

    def add_card(self, pile_index: int, card: Card) -> None:
        """Deal a card onto a pile (face-down unless already face-up)."""
        self.piles[pile_index].add_card(card)

    def flip_all(self) -> None:
        """Turn every pile's top card face-up once the deal is done."""
        for pile in self.piles:
            pile.flip_top()

    def top(self, pile_index: int) -> Optional[Card]:
        return self.piles[pile_index].top()

    def can_add(self, pile_index: int, card: Card) -> bool:
        return self.piles[pile_index].can_add(card)

    def take(self, pile_index: int) -> Optional[Card]:
        return self.piles[pile_index].take()

    def move(self, src: int, dest: int) -> bool:
        """Move the single top card of src onto dest.

        Returns:
            False (nothing changed) if src is empty, src == dest, or dest
            refuses the card.
        """
        if src == dest:
            return False
        card = self.top(src)
        if card is None or not self.can_add(dest, card):
            return False
        self.piles[dest].add_card(self.take(src))  # type: ignore[arg-type]
        return True

    def lowest_top(self) -> Optional[int]:
        """Index of the pile whose face-up top has the lowest rank.

        Ties go to the leftmost pile.
        """
        low_pile: Optional[int] = None
        low_value = Rank.KING.value_rank + 1
        for i, pile in enumerate(self.piles):
            card = pile.top()
            if card is not None and card.face_up and card.rank.value_rank < low_value:
                low_value = card.rank.value_rank
                low_pile = i
        return low_pile

    def sizes(self) -> list[int]:
        return [len(pile) for pile in self.piles]

    def depth(self) -> int:
        """Height of the tallest pile."""
        return max(self.sizes())


class Foundation:
    """Ascending single-suit stack, Ace to King."""

    def __init__(self, suit: Suit) -> None:
        self.suit = suit
        self.cards: List[Card] = []

    def __len__(self) -> int:
        return len(self.cards)

    def size(self) -> int:
        return len(self.cards)

    def top(self) -> Optional[Card]:
        return self.cards[-1] if self.cards else None

    def can_add(self, card: Card) -> bool:
        if card.suit != self.suit:
            return False
        top = self.top()
        if top is None:
            return card.rank == Rank.ACE
        return card.rank.value_rank == top.rank.value_rank + 1

    def add(self, card: Card) -> None:
        if not self.can_add(card):
            raise ValueError(f"Foundation {self.suit.value} cannot take {card}")
        self.cards.append(card.face_up_copy())

    def take(self) -> Optional[Card]:
        return self.cards.pop() if self.cards else None

    def is_full(self) -> bool:
        return len(self.cards) == len(Rank)


class Stock:
    """Undealt cards, drawn from the top."""

    def __init__(self, cards: Optional[Iterable[Card]] = None) -> None:
        self.cards: List[Card] = [c.face_down_copy() for c in cards] if cards else []

    def __len__(self) -> int:
        return len(self.cards)

    def size(self) -> int:
        return len(self.cards)

    def is_empty(self) -> bool:
        return not self.cards

    def take(self, n: int) -> Optional[List[Card]]:
        """Remove up to n cards from the top, topmost first.

        Returns:
            None if the stock is empty.
        """
        if not self.cards or n <= 0:
            return None
        taken: List[Card] = []
        while self.cards and len(taken) < n:
            taken.append(self.cards.pop())
        return taken

    def refresh(self, cards: Iterable[Card]) -> None:
        """Replace contents with recycled waste cards (given bottom to top).

        The order is reversed so the first card ever drawn is on top again.
        """
        self.cards = [c.face_down_copy() for c in reversed(list(cards))]


class Waste:
    """Cards drawn from the stock; only the top is playable."""

    def __init__(self) -> None:
        self.cards: List[Card] = []

    def __len__(self) -> int:
        return len(self.cards)

    def size(self) -> int:
        return len(self.cards)

    def is_empty(self) -> bool:
        return not self.cards

    def put(self, cards: Iterable[Card]) -> None:
        self.cards.extend(c.face_up_copy() for c in cards)

    def top(self) -> Optional[Card]:
        return self.cards[-1] if self.cards else None

    def take(self) -> Optional[Card]:
        return self.cards.pop() if self.cards else None

    def get_all(self) -> List[Card]:
        """Copy of every waste card, bottom to top."""
        return list(self.cards)

    def clear(self) -> None:
        self.cards = []
