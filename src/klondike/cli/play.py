"""CLI command for playing Klondike in the terminal."""

from __future__ import annotations

import logging

import click

from klondike.playtest.session import SolitaireSession, SessionConfig

logger = logging.getLogger(__name__)


@click.command()
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--debug", is_flag=True, help="Reveal face-down cards")
@click.option("--show-rules/--no-rules", default=True, help="Display rules at start")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(seed: int | None, debug: bool, show_rules: bool, verbose: bool):
    """Play draw-1 Klondike Solitaire. Enter ? during play for commands."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    config = SessionConfig(seed=seed, debug=debug, show_rules=show_rules)
    session = SolitaireSession(config)

    try:
        result = session.run(output_fn=click.echo)
    except KeyboardInterrupt:
        click.echo("\n\nGame interrupted.")
        result = None

    if result:
        logger.debug(f"Session finished: {result}")
        click.echo(f"\nGames won: {result.games_won} of {result.games_played}")

    click.echo("\nThanks for playing!")


if __name__ == "__main__":
    main()
