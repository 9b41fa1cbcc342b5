"""CLI unit tests.

Covers the renderer, the input handler and the click entry point.
"""

import click
import pytest
from click.testing import CliRunner

from highcard.controller import GameResult, RoundResult, GameSnapshot, PlayerSnapshot
from highcard.core import GameConfig, RoundOutcome
from highcard.ui.cli import CLIRenderer, CLIInputHandler, HighCardCLI, InputValidationError, main


def make_round(outcome, card_a="King of Hearts", card_b="2 of Clubs"):
    return RoundResult(round_number=3, player_a="Ann", player_b="Bob", card_a=card_a, card_b=card_b,
                       value_a=13, value_b=2, outcome=outcome, score_a=1, score_b=1)


@pytest.mark.unit
@pytest.mark.fast
class TestCLIRenderer:
    """Renderer tests."""

    def test_banner(self):
        assert "|___/" in CLIRenderer.render_banner()

    def test_round_win(self):
        text = CLIRenderer.render_round(make_round(RoundOutcome.WIN_A))
        assert text.splitlines() == [
            "",
            "Round 3:",
            "Ann plays: King of Hearts",
            "Bob plays: 2 of Clubs",
            "Ann wins the round!",
        ]

    def test_round_tie(self):
        text = CLIRenderer.render_round(make_round(RoundOutcome.TIE))
        assert text.endswith("Tie, no points awarded.")

    def test_final_scores_winner(self):
        text = CLIRenderer.render_final_scores(GameResult(player_a="Ann", player_b="Bob", score_a=1, score_b=3))
        assert text.splitlines()[1:] == ["Final Scores:", "Ann: 1", "Bob: 3", "Winner: Bob"]

    def test_final_scores_tie(self):
        text = CLIRenderer.render_final_scores(GameResult(player_a="Ann", player_b="Bob", score_a=2, score_b=2))
        assert text.endswith("It's a tie!")

    def test_hands(self):
        snapshot = GameSnapshot(
            players=[PlayerSnapshot(name="Ann", age=30, hand=["King of Clubs", "4 of Hearts"]),
                     PlayerSnapshot(name="Bob", age=25)],
            deck_size=50, rounds_played=0, total_rounds=1,
        )
        assert CLIRenderer.render_hands(snapshot) == "Ann: King of Clubs, 4 of Hearts\nBob: (empty)"

    def test_error_message(self):
        assert CLIRenderer.render_error_message("boom") == "Error: boom"


@pytest.mark.unit
@pytest.mark.fast
class TestCLIInputHandler:
    """Input handler tests."""

    def test_parse_name(self):
        assert CLIInputHandler.parse_name("  Ann ") == "Ann"

    def test_parse_blank_name(self):
        with pytest.raises(InputValidationError):
            CLIInputHandler.parse_name("   ")

    def test_get_player_identity(self):
        @click.command()
        def prompt_one():
            player = CLIInputHandler.get_player_identity(1)
            click.echo(f"got {player.name}/{player.age}")

        result = CliRunner().invoke(prompt_one, input="  \nAnn\n-3\nabc\n30\n")
        assert result.exit_code == 0
        assert "Name cannot be empty" in result.output
        assert "got Ann/30" in result.output


@pytest.mark.unit
class TestHighCardCLI:
    """Game runner tests."""

    def test_run(self, capsys):
        config = GameConfig.default_heads_up("Ann", 30, "Bob", 25)
        config.random_seed = 5
        result = HighCardCLI(config, show_banner=False).run()
        out = capsys.readouterr().out
        assert len(result.rounds) == 5
        assert "Round 5:" in out
        assert "Final Scores:" in out

    def test_run_quiet_by_default(self, capsys):
        config = GameConfig.default_heads_up("Ann", 30, "Bob", 25)
        HighCardCLI(config, show_banner=False).run()
        assert "(empty)" not in capsys.readouterr().out

    def test_run_debug_mode_prints_hands_each_round(self, capsys):
        config = GameConfig.default_heads_up("Ann", 30, "Bob", 25)
        config.debug_mode = True
        HighCardCLI(config, show_banner=False).run()
        out = capsys.readouterr().out
        # five rounds empty both five-card hands
        assert "Ann: (empty)" in out
        assert "Bob: (empty)" in out
        assert out.index("Round 5:") < out.index("Ann: (empty)") < out.index("Final Scores:")


@pytest.mark.unit
class TestMain:
    """Entry point tests."""

    def test_full_game(self):
        result = CliRunner().invoke(main, ["--seed", "7", "--no-banner"], input="Ann\n30\nBob\n25\n")
        assert result.exit_code == 0, result.output
        assert "Round 1:" in result.output
        assert "Round 5:" in result.output
        assert "Round 6:" not in result.output
        assert "Final Scores:" in result.output

    def test_banner_and_hands(self):
        result = CliRunner().invoke(main, ["--rounds", "2", "--hand-size", "3", "--show-hands"],
                                    input="Ann\n30\nBob\n25\n")
        assert result.exit_code == 0, result.output
        assert "|___/" in result.output
        assert "Ann: " in result.output
        assert "Round 2:" in result.output
        assert "Round 3:" not in result.output

    def test_debug_flag(self):
        result = CliRunner().invoke(main, ["--no-banner", "--debug", "--rounds", "1", "--hand-size", "1"],
                                    input="Ann\n30\nBob\n25\n")
        assert result.exit_code == 0, result.output
        assert "Ann: (empty)" in result.output
        assert "Bob: (empty)" in result.output

    def test_bad_settings_abort(self):
        result = CliRunner().invoke(main, ["--rounds", "6", "--hand-size", "5"], input="Ann\n30\nBob\n25\n")
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_input_ends_early(self):
        result = CliRunner().invoke(main, ["--no-banner"], input="Ann\n")
        assert result.exit_code != 0
        assert "Final Scores:" not in result.output
