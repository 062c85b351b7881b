"""Klondike game controller: owns every zone and applies commands."""

from __future__ import annotations

import logging
import random
from typing import Optional, Sequence

from klondike.engine.cards import Card, Suit, full_deck, shuffled_deck
from klondike.engine.commands import (
    AutoFinish,
    Command,
    DrawFromStock,
    FoundationToPile,
    Outcome,
    PileToFoundation,
    PileToPile,
    Success,
    SuccessKind,
    WasteToFoundation,
    WasteToPile,
    invalid_command,
    invalid_move,
)
from klondike.engine.piles import PILE_COUNT, Foundation, Stock, Tableau, Waste

logger = logging.getLogger(__name__)

HEART_FD = 0
DIAMOND_FD = 1
SPADE_FD = 2
CLUB_FD = 3


class DealError(Exception):
    """Ran out of cards while dealing the tableau."""


class Game:
    """One game of draw-1 Klondike.

    Piles are numbered 1-7 and foundations 0-3 (hearts, diamonds, spades,
    clubs) in every command. Rule violations come back as Failure values and
    leave the game untouched; exceptions are reserved for programming errors.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        deck: Optional[Sequence[Card]] = None,
    ) -> None:
        """Shuffle and deal.

        Args:
            rng: Random source for the shuffle (process generator if None)
            deck: Exact deck order to deal instead of shuffling; cards are
                dealt from the end of the sequence
        """
        if deck is None:
            cards = shuffled_deck(rng)
        else:
            cards = [card.face_down_copy() for card in deck]
            _check_full_deck(cards)

        self.tableau = Tableau()
        for i in range(PILE_COUNT):
            for _ in range(i + 1):
                if not cards:
                    raise DealError("Not playing with a full deck")
                self.tableau.add_card(i, cards.pop())
        self.tableau.flip_all()

        self.foundations = [Foundation(suit) for suit in Suit]
        self.stock = Stock(cards)
        self.waste = Waste()
        self.turn = 0

    def execute(self, cmd: Command) -> Outcome:
        """Apply a parsed command.

        Returns:
            Success carrying the rendered board, or Failure with the reason
        """
        if isinstance(cmd, DrawFromStock):
            outcome = self.draw_from_stock()
        elif isinstance(cmd, WasteToFoundation):
            outcome = self.waste_to_foundation()
        elif isinstance(cmd, AutoFinish):
            outcome = self.auto_finish()
        elif isinstance(cmd, WasteToPile):
            outcome = self.waste_to_pile(cmd.pile)
        elif isinstance(cmd, PileToFoundation):
            outcome = self.pile_to_foundation(cmd.pile)
        elif isinstance(cmd, PileToPile):
            outcome = self.pile_to_pile(cmd.src, cmd.dest)
        elif isinstance(cmd, FoundationToPile):
            outcome = self.foundation_to_pile(cmd.foundation, cmd.pile)
        else:
            outcome = invalid_command(f"Not a game move: {cmd!r}")

        logger.debug(f"Turn {self.turn}: {cmd!r} -> {outcome.kind.value}")
        if outcome.victory:
            logger.info(f"Victory in {self.turn} turns")
        return outcome

    def victory(self) -> bool:
        return (
            self.foundations[HEART_FD].is_full()
            and self.foundations[DIAMOND_FD].is_full()
            and self.foundations[SPADE_FD].is_full()
            and self.foundations[CLUB_FD].is_full()
        )

    def success(self) -> Success:
        """Snapshot after a successful move."""
        kind = SuccessKind.VICTORY if self.victory() else SuccessKind.VALID_MOVE
        return Success(kind, self.display())

    def _complete_turn(self) -> Success:
        self.turn += 1
        return self.success()

    def draw_from_stock(self) -> Outcome:
        if self.stock.is_empty():
            if self.waste.is_empty():
                return invalid_move("Stock and waste are both empty")
            self.stock.refresh(self.waste.get_all())
            self.waste.clear()
        taken = self.stock.take(1)
        if taken is None:
            return invalid_move("Stock is empty")
        self.waste.put(taken)
        return self._complete_turn()

    def waste_to_foundation(self) -> Outcome:
        top_card = self.waste.top()
        if top_card is None:
            return invalid_move("Waste is empty")
        foundation = self._accepting_foundation(top_card)
        if foundation is None:
            return invalid_move(f"No foundation takes {top_card}")
        foundation.add(self.waste.take())  # type: ignore[arg-type]
        return self._complete_turn()

    def pile_to_foundation(self, pile_num: int) -> Outcome:
        if not self._move_pile_to_foundation(pile_num):
            return invalid_move(f"Pile {pile_num} has no card for the foundations")
        return self._complete_turn()

    def _move_pile_to_foundation(self, pile_num: int) -> bool:
        if not _valid_pile(pile_num):
            return False
        top_card = self.tableau.top(pile_num - 1)
        if top_card is None:
            return False
        foundation = self._accepting_foundation(top_card)
        if foundation is None:
            return False
        foundation.add(self.tableau.take(pile_num - 1))  # type: ignore[arg-type]
        return True

    def auto_finish(self) -> Outcome:
        """Play the lowest tableau top to the foundations until stuck.

        Counts as a single turn however many cards move.
        """
        moved = 0
        while True:
            low_pile = self.tableau.lowest_top()
            if low_pile is None:
                break
            if not self._move_pile_to_foundation(low_pile + 1):
                break
            moved += 1
        logger.debug(f"Auto-finish moved {moved} cards")
        return self._complete_turn()

    def waste_to_pile(self, pile_num: int) -> Outcome:
        if not _valid_pile(pile_num):
            return invalid_move(f"No pile {pile_num}")
        top_card = self.waste.top()
        if top_card is None:
            return invalid_move("Waste is empty")
        if not self.tableau.can_add(pile_num - 1, top_card):
            return invalid_move(f"Pile {pile_num} cannot take {top_card}")
        self.tableau.add_card(pile_num - 1, self.waste.take())  # type: ignore[arg-type]
        return self._complete_turn()

    def foundation_to_pile(self, foundation_index: int, pile_num: int) -> Outcome:
        if not 0 <= foundation_index < len(self.foundations) or not _valid_pile(pile_num):
            return invalid_move(f"No foundation {foundation_index} or pile {pile_num}")
        foundation = self.foundations[foundation_index]
        top_card = foundation.top()
        if top_card is None:
            return invalid_move(f"Foundation {foundation.suit.value} is empty")
        if not self.tableau.can_add(pile_num - 1, top_card):
            return invalid_move(f"Pile {pile_num} cannot take {top_card}")
        self.tableau.add_card(pile_num - 1, foundation.take())  # type: ignore[arg-type]
        return self._complete_turn()

    def pile_to_pile(self, src_pile_num: int, dest_pile_num: int) -> Outcome:
        if not _valid_pile(src_pile_num) or not _valid_pile(dest_pile_num):
            return invalid_move(f"No pile {src_pile_num} or {dest_pile_num}")
        if not self.tableau.move(src_pile_num - 1, dest_pile_num - 1):
            return invalid_move(f"Cannot move pile {src_pile_num} to pile {dest_pile_num}")
        return self._complete_turn()

    def _accepting_foundation(self, card: Card) -> Optional[Foundation]:
        """First foundation, hearts to clubs, that takes the card."""
        for foundation in self.foundations:
            if foundation.can_add(card):
                return foundation
        return None

    def cards_in_play(self) -> list[Card]:
        """Every card in every zone."""
        cards = list(self.stock.cards) + self.waste.get_all()
        for pile in self.tableau.piles:
            cards.extend(pile.cards)
        for foundation in self.foundations:
            cards.extend(foundation.cards)
        return cards

    def display(self, debug: bool = False) -> str:
        """Render the board as text."""
        from klondike.playtest.display import StateRenderer

        return StateRenderer().render(self, debug=debug)


def _valid_pile(pile_num: int) -> bool:
    return 1 <= pile_num <= PILE_COUNT


def _check_full_deck(cards: list[Card]) -> None:
    """Injected decks must hold each of the 52 cards exactly once."""
    wanted = {(c.rank, c.suit) for c in full_deck()}
    given = [(c.rank, c.suit) for c in cards]
    if len(given) != len(wanted) or set(given) != wanted:
        raise ValueError("Deck must contain each of the 52 cards exactly once")
