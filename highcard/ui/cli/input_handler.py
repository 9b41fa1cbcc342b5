"""High card CLI input handling.

Prompts for the two players' names and ages with click, re-prompting until the
input is valid.
"""

import click

from highcard.core import PlayerConfig


class InputValidationError(click.BadParameter):
    """Input validation error."""


class CLIInputHandler:
    """CLI input handler.

    Reads player identities from the terminal. click re-prompts on invalid
    input and raises click.Abort when input ends.
    """

    @staticmethod
    def parse_name(value: str) -> str:
        """Strip a player name.

        Raises:
            InputValidationError: If the name is blank
        """
        name = value.strip()
        if not name:
            raise InputValidationError("Name cannot be empty")
        return name

    @staticmethod
    def get_player_identity(seat: int) -> PlayerConfig:
        """Prompt for one player's name and age.

        Args:
            seat: 1-based player number used in the prompts

        Returns:
            The player's configuration
        """
        name = click.prompt(
            f"Player {seat} Name",
            type=str,
            value_proc=CLIInputHandler.parse_name
        )
        age = click.prompt(
            f"Player {seat} Age",
            type=click.IntRange(min=0)
        )
        return PlayerConfig(name=name, age=age)
