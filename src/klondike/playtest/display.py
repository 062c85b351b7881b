"""Terminal display for the Klondike board."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from klondike.engine.cards import Card

if TYPE_CHECKING:
    from klondike.engine.game import Game


# Unicode card symbols
SUIT_SYMBOLS = {"H": "♥", "D": "♦", "C": "♣", "S": "♠"}

SEPARATOR = "-" * 53
EMPTY_CELL = "[   ]"
HIDDEN_CELL = "[###]"
BLANK_CELL = " " * len(EMPTY_CELL)


def format_card(card: Card) -> str:
    """Format card with unicode suit symbol."""
    suit_symbol = SUIT_SYMBOLS.get(card.suit.value, card.suit.value)
    return f"{card.rank.value}{suit_symbol}"


def card_cell(card: Optional[Card], debug: bool = False) -> str:
    """Fixed-width cell for one card slot.

    Face-down cards show as ``[###]``; in debug mode they are revealed in
    parentheses so face state stays visible.
    """
    if card is None:
        return EMPTY_CELL
    if card.face_up:
        return f"[{format_card(card):>3}]"
    if debug:
        return f"({format_card(card):>3})"
    return HIDDEN_CELL


def _row(cells: list[str]) -> str:
    return ("  " + "  ".join(cells)).rstrip()


def _label(text: str) -> str:
    return text.center(len(EMPTY_CELL))


class StateRenderer:
    """Renders the board to text."""

    def render(self, game: "Game", debug: bool = False) -> str:
        """Render the whole board.

        Lines: separator, counters, zone header, stock/waste/foundation
        tops, blank, pile header, then one line per tableau depth.
        """
        lines: list[str] = [SEPARATOR]
        lines.append(
            f"Turn: {game.turn}   Stock: {game.stock.size()}   Waste: {game.waste.size()}"
        )
        lines.append(_row([_label(c) for c in ("n", "k", "", "h", "d", "s", "c")]))

        stock_cell = EMPTY_CELL if game.stock.is_empty() else HIDDEN_CELL
        if debug and not game.stock.is_empty():
            stock_cell = card_cell(game.stock.cards[-1], debug=True)
        top_cells = [stock_cell, card_cell(game.waste.top()), BLANK_CELL]
        top_cells.extend(card_cell(f.top()) for f in game.foundations)
        lines.append(_row(top_cells))
        lines.append("")

        lines.extend(self.render_tableau(game, debug))
        return "\n".join(lines)

    def render_tableau(self, game: "Game", debug: bool = False) -> list[str]:
        """Seven columns, bottom card first."""
        piles = game.tableau.piles
        lines = [_row([_label(str(i + 1)) for i in range(len(piles))])]
        for depth in range(game.tableau.depth()):
            cells = [
                card_cell(pile.cards[depth], debug) if depth < len(pile) else BLANK_CELL
                for pile in piles
            ]
            lines.append(_row(cells))
        return lines
