"""Interactive Klondike session management."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional

from klondike.engine.commands import (
    Command,
    Failure,
    FailureKind,
    Outcome,
    Quit,
    Retire,
    ShowHelp,
    Success,
    SuccessKind,
    Unrecognized,
    invalid_command,
)
from klondike.engine.game import Game
from klondike.playtest.input import HumanPlayer, parse_command
from klondike.playtest.rules import HELP_TEXT, RuleExplainer

logger = logging.getLogger(__name__)


@dataclass
class SessionConfig:
    """Configuration for a play session."""

    seed: Optional[int] = None
    debug: bool = False
    show_rules: bool = True

    def __post_init__(self):
        """Generate seed if not provided."""
        if self.seed is None:
            self.seed = random.randint(0, 2**32 - 1)


@dataclass
class SessionResult:
    """Summary of a finished session."""

    seed: int
    games_played: int
    games_won: int
    turns: int


class SolitaireSession:
    """Owns the current Game and routes player commands to it.

    Quit, help and retire are handled here; everything else goes to the
    engine.
    """

    def __init__(self, config: Optional[SessionConfig] = None):
        """Initialize session and deal the first game."""
        self.config = config or SessionConfig()
        self.seed = self.config.seed
        self.rng = random.Random(self.seed)

        self.explainer = RuleExplainer()
        self.human_input = HumanPlayer()

        self.move_history: list[dict] = []
        self.games_played = 0
        self.games_won = 0
        self.game_seed = 0
        self.game = self._deal()

    def _deal(self) -> Game:
        self.game_seed = self.rng.randint(0, 2**32 - 1)
        self.games_played += 1
        logger.debug(f"Dealing game {self.games_played} (seed {self.game_seed})")
        return Game(rng=random.Random(self.game_seed))

    def new_game(self) -> None:
        """Discard the current game and deal a fresh one."""
        self.game = self._deal()

    def display(self) -> str:
        return self.game.display(debug=self.config.debug)

    def command(self, text: str) -> Outcome:
        """Parse and execute one line of player input."""
        return self.execute(parse_command(text), text)

    def execute(self, cmd: Command, text: str = "") -> Outcome:
        """Execute an already-parsed command."""
        outcome: Outcome
        if isinstance(cmd, Quit):
            outcome = Success(SuccessKind.QUIT)
        elif isinstance(cmd, ShowHelp):
            outcome = Success(SuccessKind.HELP, HELP_TEXT)
        elif isinstance(cmd, Retire):
            self.new_game()
            outcome = Success(SuccessKind.RETIRE, self.display())
        elif isinstance(cmd, Unrecognized):
            outcome = invalid_command(f"Unknown command '{cmd.text}'")
        else:
            already_won = self.game.victory()
            outcome = self.game.execute(cmd)
            # Every move after a win is tagged victory; count the game once
            if outcome.victory and not already_won:
                self.games_won += 1

        self._record_move(text, outcome)
        return outcome

    def _record_move(self, text: str, outcome: Outcome) -> None:
        """Record command in history."""
        self.move_history.append({
            "game": self.games_played,
            "turn": self.game.turn,
            "input": text,
            "outcome": outcome.kind.value,
        })

    def run(self, output_fn: Callable[[str], None] = print) -> SessionResult:
        """Run the interactive loop until the player quits.

        Args:
            output_fn: Function to output text (default: print)

        Returns:
            SessionResult with games played and won
        """
        if self.config.show_rules:
            output_fn(self.explainer.explain_rules())
            output_fn("")
            output_fn(f"Seed: {self.seed} (use --seed {self.seed} to replay)")

        output_fn(self.display())

        while True:
            result = self.human_input.get_command()
            if result.quit or result.command is None:
                break

            outcome = self.execute(result.command)

            if isinstance(outcome, Failure):
                output_fn(self._failure_message(outcome))
                continue

            if outcome.kind == SuccessKind.HELP:
                output_fn(outcome.text)
                continue

            output_fn(self.display())

            if outcome.victory:
                output_fn("\n=== You Win! ===")
                output_fn(f"Finished in {self.game.turn} turns. Dealing a new game.")
                self.new_game()
                output_fn(self.display())

        return SessionResult(
            seed=self.seed,
            games_played=self.games_played,
            games_won=self.games_won,
            turns=self.game.turn,
        )

    def _failure_message(self, failure: Failure) -> str:
        if failure.kind == FailureKind.INVALID_COMMAND:
            return f"Invalid command. {failure.reason}. Enter ? for help."
        return f"Invalid move. {failure.reason}."
