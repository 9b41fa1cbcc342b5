"""High card CLI rendering.

Turns controller DTOs into the text printed on the terminal. Every method is
a pure function of its arguments.
"""

from typing import List

from highcard.controller import GameSnapshot, GameResult, RoundResult

BANNER = r"""
 _   _ _       _        ____              _
| | | (_) __ _| |__    / ___|__ _ _ __ __| |
| |_| | |/ _` | '_ \  | |   / _` | '__/ _` |
|  _  | | (_| | | | | | |__| (_| | | | (_| |
|_| |_|_|\__, |_| |_|  \____\__,_|_|  \__,_|
         |___/
"""


class CLIRenderer:
    """CLI renderer.

    Formats game snapshots and results for the terminal.
    """

    @staticmethod
    def render_banner() -> str:
        """Return the title banner."""
        return BANNER

    @staticmethod
    def render_hands(snapshot: GameSnapshot) -> str:
        """Render each player's hand, top card first.

        Args:
            snapshot: Game snapshot

        Returns:
            One line per player, e.g. "Ann: King of Clubs, 4 of Hearts"
        """
        lines = []
        for player in snapshot.players:
            cards = ", ".join(player.hand) if player.hand else "(empty)"
            lines.append(f"{player.name}: {cards}")
        return "\n".join(lines)

    @staticmethod
    def render_round(result: RoundResult) -> str:
        """Render the narration of one round.

        Args:
            result: Round result

        Returns:
            The round header, both plays and the verdict
        """
        lines = [
            "",
            f"Round {result.round_number}:",
            f"{result.player_a} plays: {result.card_a}",
            f"{result.player_b} plays: {result.card_b}",
        ]
        winner = result.winner_name
        if winner is None:
            lines.append("Tie, no points awarded.")
        else:
            lines.append(f"{winner} wins the round!")
        return "\n".join(lines)

    @staticmethod
    def render_final_scores(result: GameResult) -> str:
        """Render the final scores and the winner."""
        lines: List[str] = [
            "",
            "Final Scores:",
            f"{result.player_a}: {result.score_a}",
            f"{result.player_b}: {result.score_b}",
        ]
        if result.winner_name is None:
            lines.append("It's a tie!")
        else:
            lines.append(f"Winner: {result.winner_name}")
        return "\n".join(lines)

    @staticmethod
    def render_error_message(error: str) -> str:
        return f"Error: {error}"
