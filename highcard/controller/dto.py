"""Data transfer objects.

Defines the data the controller hands to the UI layer. Pydantic dataclasses
keep the snapshots validated and easy to serialise; cards travel as their
rendered text so the UI never holds a reference into the live containers.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass

from highcard.core import RoundOutcome


@pydantic_dataclass
class PlayerSnapshot:
    """State of one player at a point in time."""
    name: str = Field(..., min_length=1, description="Player name")
    age: int = Field(..., ge=0, description="Player age")
    score: int = Field(0, ge=0, description="Rounds won so far")
    hand: List[str] = Field(default_factory=list, description="Cards in hand, top to bottom")


@pydantic_dataclass
class GameSnapshot:
    """State of the whole game, for display."""
    players: List[PlayerSnapshot] = Field(..., description="Both players, A first")
    deck_size: int = Field(..., ge=0, description="Cards left in the deck")
    rounds_played: int = Field(..., ge=0, description="Rounds finished")
    total_rounds: int = Field(..., ge=1, description="Rounds in the game")
    dealt: bool = Field(False, description="Whether the hands have been dealt")
    timestamp: datetime = Field(default_factory=datetime.now, description="Snapshot time")

    @field_validator('players')
    @classmethod
    def validate_two_players(cls, v):
        """High card is played by exactly two players."""
        if len(v) != 2:
            raise ValueError(f"Expected 2 players, got {len(v)}")
        return v


@pydantic_dataclass
class RoundResult:
    """Outcome of a single round."""
    round_number: int = Field(..., ge=1, description="1-based round number")
    player_a: str = Field(..., min_length=1, description="Name of player A")
    player_b: str = Field(..., min_length=1, description="Name of player B")
    card_a: str = Field(..., min_length=1, description="Card played by A")
    card_b: str = Field(..., min_length=1, description="Card played by B")
    value_a: int = Field(..., ge=0, description="rank_value of A's card")
    value_b: int = Field(..., ge=0, description="rank_value of B's card")
    outcome: RoundOutcome = Field(..., description="Round outcome")
    score_a: int = Field(..., ge=0, description="A's score after the round")
    score_b: int = Field(..., ge=0, description="B's score after the round")

    @property
    def winner_name(self) -> Optional[str]:
        """Name of the round winner, None on a tie."""
        if self.outcome == RoundOutcome.WIN_A:
            return self.player_a
        if self.outcome == RoundOutcome.WIN_B:
            return self.player_b
        return None


@pydantic_dataclass
class GameResult:
    """Final result of a finished game."""
    player_a: str = Field(..., min_length=1, description="Name of player A")
    player_b: str = Field(..., min_length=1, description="Name of player B")
    score_a: int = Field(..., ge=0, description="Rounds won by A")
    score_b: int = Field(..., ge=0, description="Rounds won by B")
    rounds: List[RoundResult] = Field(default_factory=list, description="Every round, in order")
    timestamp: datetime = Field(default_factory=datetime.now, description="Finish time")

    @property
    def winner_name(self) -> Optional[str]:
        """Name of the game winner, None when the scores are level."""
        if self.score_a > self.score_b:
            return self.player_a
        if self.score_b > self.score_a:
            return self.player_b
        return None

    @property
    def is_tie(self) -> bool:
        return self.score_a == self.score_b
