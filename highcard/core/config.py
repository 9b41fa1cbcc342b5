"""
Game configuration for the high card game.

Contains player identities and the game settings.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .exceptions import InvalidArgumentError

DECK_SIZE = 52


@dataclass
class PlayerConfig:
    """
    Identity of a single player.
    """
    name: str
    age: int

    def __post_init__(self):
        """Validate the player identity."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidArgumentError("Player name cannot be empty")
        if isinstance(self.age, bool) or not isinstance(self.age, int):
            raise InvalidArgumentError(f"Player age must be an integer: {self.age!r}")
        if self.age < 0:
            raise InvalidArgumentError(f"Player age cannot be negative: {self.age}")
        self.name = self.name.strip()


@dataclass
class GameConfig:
    """
    Settings of a high card game.

    Every round plays one card per player and sends it back to the deck, so a
    hand shrinks by one card per round and the number of rounds cannot exceed
    the hand size.
    """
    players: List[PlayerConfig] = field(default_factory=list)

    rounds: int = 5                      # rounds to play
    hand_size: int = 5                   # cards dealt to each player

    random_seed: Optional[int] = None    # seed for a reproducible shuffle
    debug_mode: bool = False             # print hands after every round, DEBUG logging

    def __post_init__(self):
        """Validate the settings."""
        self._validate_basic_settings()
        self._validate_players()

    def _validate_basic_settings(self):
        if self.rounds < 1:
            raise InvalidArgumentError(f"Rounds must be at least 1: {self.rounds}")

        if self.hand_size < 1:
            raise InvalidArgumentError(f"Hand size must be at least 1: {self.hand_size}")

        if self.rounds > self.hand_size:
            raise InvalidArgumentError(
                f"Rounds ({self.rounds}) cannot exceed hand size ({self.hand_size})"
            )

        if 2 * self.hand_size > DECK_SIZE:
            raise InvalidArgumentError(
                f"Two hands of {self.hand_size} cards do not fit in a {DECK_SIZE}-card deck"
            )

    def _validate_players(self):
        if not self.players:
            return  # players may be added later

        if len(self.players) != 2:
            raise InvalidArgumentError(f"High card needs exactly 2 players, got {len(self.players)}")

    def add_player(self, player_config: PlayerConfig):
        """Add a player configuration."""
        if len(self.players) >= 2:
            raise InvalidArgumentError("Game already has 2 players")
        self.players.append(player_config)

    @classmethod
    def default_heads_up(cls, name_a: str, age_a: int, name_b: str, age_b: int) -> 'GameConfig':
        """
        Create the classic game: 5 cards each, 5 rounds.
        """
        return cls(
            players=[PlayerConfig(name_a, age_a), PlayerConfig(name_b, age_b)],
            rounds=5,
            hand_size=5,
        )
