"""Tests for SolitaireSession."""

from unittest.mock import patch
from klondike.engine.cards import Card, Rank, Suit, full_deck
from klondike.engine.commands import FailureKind, SuccessKind
from klondike.engine.game import Game
from klondike.engine.piles import Pile, Stock, Tableau, Waste
from klondike.playtest.rules import HELP_TEXT
from klondike.playtest.session import SessionConfig, SolitaireSession


def near_win_game() -> Game:
    """Game one card (K of clubs on pile 1) away from victory."""
    game = Game(deck=full_deck())
    game.tableau = Tableau()
    game.stock = Stock()
    game.waste = Waste()
    for foundation in game.foundations:
        for rank in Rank:
            if foundation.suit == Suit.CLUBS and rank == Rank.KING:
                break
            foundation.add(Card(rank, foundation.suit))
    game.tableau.piles[0] = Pile([Card(Rank.KING, Suit.CLUBS, True)])
    return game


class TestSessionConfig:
    """Tests for SessionConfig."""

    def test_default_config(self):
        config = SessionConfig()

        assert config.debug is False
        assert config.show_rules is True

    def test_seed_generation(self):
        assert SessionConfig().seed is not None

    def test_explicit_seed_kept(self):
        assert SessionConfig(seed=7).seed == 7


class TestSolitaireSession:
    """Tests for command routing."""

    def test_initialization(self):
        session = SolitaireSession(SessionConfig(seed=12345))

        assert session.seed == 12345
        assert session.games_played == 1
        assert session.move_history == []
        assert session.game.turn == 0

    def test_same_seed_same_game(self):
        session1 = SolitaireSession(SessionConfig(seed=12345))
        session2 = SolitaireSession(SessionConfig(seed=12345))

        assert session1.display() == session2.display()

    def test_valid_move(self):
        session = SolitaireSession(SessionConfig(seed=1))

        outcome = session.command("n")

        assert outcome.kind == SuccessKind.VALID_MOVE
        assert session.game.turn == 1

    def test_quit(self):
        session = SolitaireSession(SessionConfig(seed=1))

        assert session.command("q").kind == SuccessKind.QUIT

    def test_help(self):
        session = SolitaireSession(SessionConfig(seed=1))

        outcome = session.command("?")

        assert outcome.kind == SuccessKind.HELP
        assert outcome.text == HELP_TEXT
        assert session.game.turn == 0

    def test_unrecognized(self):
        session = SolitaireSession(SessionConfig(seed=1))

        outcome = session.command("xyz")

        assert outcome.kind == FailureKind.INVALID_COMMAND
        assert "xyz" in outcome.reason

    def test_retire_deals_new_game(self):
        session = SolitaireSession(SessionConfig(seed=1))
        session.command("n")
        old_game = session.game

        outcome = session.command("r")

        assert outcome.kind == SuccessKind.RETIRE
        assert session.game is not old_game
        assert session.game.turn == 0
        assert session.games_played == 2
        assert outcome.text == session.game.display()

    def test_move_history(self):
        session = SolitaireSession(SessionConfig(seed=1))
        session.command("n")
        session.command("zz")

        assert session.move_history == [
            {"game": 1, "turn": 1, "input": "n", "outcome": "valid_move"},
            {"game": 1, "turn": 1, "input": "zz", "outcome": "invalid_command"},
        ]

    def test_victory_counted(self):
        session = SolitaireSession(SessionConfig(seed=1))
        session.game = near_win_game()

        outcome = session.command("1")

        assert outcome.kind == SuccessKind.VICTORY
        assert session.games_won == 1

    def test_moves_after_victory_not_counted_again(self):
        """Moves after a win stay tagged victory but count one game won."""
        session = SolitaireSession(SessionConfig(seed=1))
        session.game = near_win_game()

        session.command("1")
        second = session.command("a")
        third = session.command("a")

        assert second.kind == SuccessKind.VICTORY
        assert third.kind == SuccessKind.VICTORY
        assert session.games_won == 1
        assert session.games_won <= session.games_played

    def test_debug_display(self):
        session = SolitaireSession(SessionConfig(seed=1, debug=True))

        assert "(" in session.display()

    def test_retire_respects_debug(self):
        session = SolitaireSession(SessionConfig(seed=1, debug=True))

        outcome = session.command("r")

        assert outcome.text == session.display()
        assert "(" in outcome.text
        assert "[###]" not in outcome.text


class TestSessionRun:
    """Tests for the interactive loop."""

    def test_runs_until_quit(self):
        session = SolitaireSession(SessionConfig(seed=3, show_rules=False))
        output: list[str] = []

        with patch("builtins.input", side_effect=["n", "zz", "?", "q"]):
            result = session.run(output_fn=output.append)

        text = "\n".join(output)
        assert "Turn: 1" in text
        assert "Invalid command" in text
        assert HELP_TEXT in output
        assert result.games_played == 1
        assert result.turns == 1

    def test_shows_rules_and_seed(self):
        session = SolitaireSession(SessionConfig(seed=3))
        output: list[str] = []

        with patch("builtins.input", side_effect=EOFError):
            session.run(output_fn=output.append)

        text = "\n".join(output)
        assert "Goal:" in text
        assert "--seed 3" in text

    def test_invalid_move_reported(self):
        session = SolitaireSession(SessionConfig(seed=3, show_rules=False))
        session.game.waste = Waste()
        output: list[str] = []

        with patch("builtins.input", side_effect=["k", "q"]):
            session.run(output_fn=output.append)

        assert any(line.startswith("Invalid move.") for line in output)

    def test_victory_deals_new_game(self):
        session = SolitaireSession(SessionConfig(seed=3, show_rules=False))
        session.game = near_win_game()
        output: list[str] = []

        with patch("builtins.input", side_effect=["1", "q"]):
            result = session.run(output_fn=output.append)

        assert "\n=== You Win! ===" in output
        assert result.games_won == 1
        assert result.games_played == 2
        assert session.game.turn == 0
