"""Tests for the controller DTOs."""

import pytest

from highcard.controller.dto import PlayerSnapshot, GameSnapshot, RoundResult, GameResult
from highcard.core import RoundOutcome


def make_round(outcome, score_a=0, score_b=0):
    return RoundResult(
        round_number=1,
        player_a="Ann",
        player_b="Bob",
        card_a="King of Hearts",
        card_b="2 of Clubs",
        value_a=13,
        value_b=2,
        outcome=outcome,
        score_a=score_a,
        score_b=score_b,
    )


@pytest.mark.unit
@pytest.mark.fast
class TestPlayerSnapshot:
    """Tests for PlayerSnapshot."""

    def test_creation(self):
        player = PlayerSnapshot(name="Ann", age=30)
        assert player.score == 0
        assert player.hand == []

    def test_validation(self):
        with pytest.raises(ValueError):
            PlayerSnapshot(name="", age=30)
        with pytest.raises(ValueError):
            PlayerSnapshot(name="Ann", age=-1)


@pytest.mark.unit
@pytest.mark.fast
class TestGameSnapshot:
    """Tests for GameSnapshot."""

    def test_requires_two_players(self):
        with pytest.raises(ValueError):
            GameSnapshot(players=[PlayerSnapshot(name="Ann", age=30)], deck_size=52,
                         rounds_played=0, total_rounds=5)

    def test_creation(self):
        snapshot = GameSnapshot(
            players=[PlayerSnapshot(name="Ann", age=30), PlayerSnapshot(name="Bob", age=25)],
            deck_size=42, rounds_played=0, total_rounds=5, dealt=True,
        )
        assert snapshot.deck_size == 42
        assert snapshot.dealt is True


@pytest.mark.unit
@pytest.mark.fast
class TestResults:
    """Tests for RoundResult and GameResult."""

    def test_round_winner(self):
        assert make_round(RoundOutcome.WIN_A, 1, 0).winner_name == "Ann"
        assert make_round(RoundOutcome.WIN_B, 0, 1).winner_name == "Bob"
        assert make_round(RoundOutcome.TIE).winner_name is None

    def test_round_validation(self):
        with pytest.raises(ValueError):
            RoundResult(round_number=0, player_a="Ann", player_b="Bob", card_a="x", card_b="y",
                        value_a=1, value_b=1, outcome=RoundOutcome.TIE, score_a=0, score_b=0)

    def test_game_winner(self):
        assert GameResult(player_a="Ann", player_b="Bob", score_a=3, score_b=1).winner_name == "Ann"
        assert GameResult(player_a="Ann", player_b="Bob", score_a=0, score_b=2).winner_name == "Bob"

    def test_game_tie(self):
        result = GameResult(player_a="Ann", player_b="Bob", score_a=2, score_b=2)
        assert result.winner_name is None
        assert result.is_tie
