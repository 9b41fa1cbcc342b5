"""High card CLI game.

Command line front end: reads both players, runs the game through the
controller and prints the narration.
"""

import logging
import sys
from typing import Optional

import click

from highcard.controller import HighCardController, GameResult
from highcard.core import GameConfig, HighCardError
from .input_handler import CLIInputHandler
from .render import CLIRenderer

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class HighCardCLI:
    """High card CLI game.

    Runs one game between two players and echoes every round.
    """

    def __init__(self, config: GameConfig, show_banner: bool = True, show_hands: bool = False,
                 logger: Optional[logging.Logger] = None):
        """Initialise the CLI game.

        Args:
            config: Game settings with both players filled in
            show_banner: Whether to print the title banner
            show_hands: Whether to print both hands after the deal
            logger: Logger passed on to the controller
        """
        self.config = config
        self.show_banner = show_banner
        self.show_hands = show_hands
        self.logger = logger or logging.getLogger(__name__)
        self.controller = HighCardController(config, logger=self.logger)

    def run(self) -> GameResult:
        """Play the game to the end and return the final result."""
        if self.show_banner:
            click.echo(CLIRenderer.render_banner())

        self.controller.deal()
        if self.show_hands or self.config.debug_mode:
            click.echo(CLIRenderer.render_hands(self.controller.get_snapshot()))

        while not self.controller.is_game_over():
            result = self.controller.play_round()
            click.echo(CLIRenderer.render_round(result))
            if self.config.debug_mode:
                click.echo(CLIRenderer.render_hands(self.controller.get_snapshot()))

        final = self.controller.get_result()
        click.echo(CLIRenderer.render_final_scores(final))
        return final


@click.command()
@click.option("--rounds", type=click.IntRange(min=1), default=5, show_default=True,
              help="Number of rounds to play.")
@click.option("--hand-size", type=click.IntRange(1, 26), default=5, show_default=True,
              help="Cards dealt to each player.")
@click.option("--seed", type=int, default=None, help="Seed for a reproducible shuffle.")
@click.option("--log-level", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              default="WARNING", show_default=True)
@click.option("--no-banner", is_flag=True, help="Skip the title banner.")
@click.option("--show-hands", is_flag=True, help="Print both hands after the deal.")
@click.option("--debug", is_flag=True, help="Print hands after every round and log at DEBUG.")
def main(rounds: int, hand_size: int, seed: Optional[int], log_level: str,
         no_banner: bool, show_hands: bool, debug: bool) -> None:
    """Play a game of high card between two players."""
    level = logging.DEBUG if debug else getattr(logging, log_level.upper())
    logging.basicConfig(level=level, format=LOG_FORMAT)

    try:
        config = GameConfig(rounds=rounds, hand_size=hand_size, random_seed=seed, debug_mode=debug)
        for seat in (1, 2):
            config.add_player(CLIInputHandler.get_player_identity(seat))
        HighCardCLI(config, show_banner=not no_banner, show_hands=show_hands).run()
    except HighCardError as e:
        click.echo(CLIRenderer.render_error_message(str(e)), err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
