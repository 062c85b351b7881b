"""Rule and command explanations for the player."""

from __future__ import annotations

HELP_TEXT = "\n".join([
    "-----------------------------------------------------",
    "?          : Display Help",
    "r          : Retire Current Game",
    "q          : Quit",
    "n          : Draw Cards from Stock",
    "a          : Try to Automatically Finish Game",
    "k          : Move Card from Waste to Foundation",
    "k[1-7]     : Move Card from Waste to Pile by Number",
    "[1-7]      : Move Card from Pile by Number to Foundation",
    "[1-7][1-7] : Move Card from Pile to Pile by Number",
    "h[1-7]     : Move Card from Hearts Foundation to Pile by Number",
    "d[1-7]     : Move Card from Diamonds Foundation to Pile by Number",
    "s[1-7]     : Move Card from Spades Foundation to Pile by Number",
    "c[1-7]     : Move Card from Clubs Foundation to Pile by Number",
])


class RuleExplainer:
    """Explains Klondike rules."""

    def explain_rules(self) -> str:
        """Condensed rule summary followed by the command list."""
        lines: list[str] = []

        lines.append("=== Klondike ===")
        lines.append("")
        lines.append("Goal: Build all four foundations from Ace to King by suit")
        lines.append("Setup: Seven piles of 1 to 7 cards, top card face-up; 24 in stock")
        lines.append("Turn: Draw one card from the stock, or move a single card")
        lines.append("Piles: Build down in alternating colors; an empty pile takes any card")
        lines.append("Stock: When empty, the waste is turned over to form a new stock")
        lines.append("")
        lines.append(self.explain_commands())

        return "\n".join(lines)

    def explain_commands(self) -> str:
        return HELP_TEXT
