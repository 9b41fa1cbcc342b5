"""
High card game controller.

Runs a game on top of the core containers: builds and shuffles the deck, deals
the hands, plays the rounds and keeps the score. The controller owns the deck
and both players; the UI only ever sees DTO snapshots.
"""

import logging
import random
from typing import List, Optional

from ..core import (
    Deck, Player, GameConfig, RoundOutcome,
    highest_card, compare_round,
    GameStateError, MissingArgumentError, InvalidArgumentError
)
from .decorators import logged_action
from .dto import PlayerSnapshot, GameSnapshot, RoundResult, GameResult


class HighCardController:
    """High card game controller.

    Each round, both players play their highest card; the strictly higher
    card scores a point. Played cards go back to the bottom of the deck
    without a reshuffle, so they are only seen again once the cards above
    them have been drawn.
    """

    def __init__(
        self,
        config: GameConfig,
        logger: Optional[logging.Logger] = None,
        rng: Optional[random.Random] = None
    ):
        """Initialise the controller.

        Args:
            config: Game settings; must name exactly two players
            logger: Logger, defaults to this module's logger
            rng: Random generator for the shuffle; defaults to one seeded with
                config.random_seed

        Raises:
            MissingArgumentError: If config is None
            InvalidArgumentError: If config does not name two players
        """
        if config is None:
            raise MissingArgumentError("Game config cannot be None")
        if len(config.players) != 2:
            raise InvalidArgumentError(f"High card needs exactly 2 players, got {len(config.players)}")

        self._config = config
        self._logger = logger or logging.getLogger(__name__)
        if rng is None:
            rng = random.Random(config.random_seed) if config.random_seed is not None else random.Random()
        self._rng = rng
        self._players: List[Player] = [Player(p.name, p.age) for p in config.players]
        self._scores: List[int] = [0, 0]
        self._rounds: List[RoundResult] = []
        self._deck: Optional[Deck] = None

    @property
    def players(self) -> List[Player]:
        return list(self._players)

    @property
    def deck(self) -> Optional[Deck]:
        """The game deck, None until deal() has run."""
        return self._deck

    @property
    def rounds_played(self) -> int:
        return len(self._rounds)

    def is_dealt(self) -> bool:
        return self._deck is not None

    def is_game_over(self) -> bool:
        return len(self._rounds) >= self._config.rounds

    @logged_action("deal")
    def deal(self) -> None:
        """Build and shuffle the standard deck, then deal both hands.

        Cards are dealt one at a time, alternating A, B, A, B, ...

        Raises:
            GameStateError: If the hands have already been dealt
        """
        if self.is_dealt():
            raise GameStateError("Hands have already been dealt")

        deck = Deck.standard(self._rng)
        deck.shuffle()
        for _ in range(self._config.hand_size):
            for player in self._players:
                player.draw(deck)
        self._deck = deck

        self._logger.info(
            "Dealt %d cards to %s and %s, %d left in the deck",
            self._config.hand_size, self._players[0].name, self._players[1].name, len(deck)
        )

    @logged_action("play round")
    def play_round(self) -> RoundResult:
        """Play one round.

        Returns:
            The round result, including the scores after the round

        Raises:
            GameStateError: If the hands are not dealt or every round has been played
        """
        if not self.is_dealt():
            raise GameStateError("Deal the hands before playing a round")
        if self.is_game_over():
            raise GameStateError(f"All {self._config.rounds} rounds have been played")

        player_a, player_b = self._players
        card_a = highest_card(player_a)
        card_b = highest_card(player_b)
        outcome = compare_round(card_a, card_b)

        if outcome == RoundOutcome.WIN_A:
            self._scores[0] += 1
        elif outcome == RoundOutcome.WIN_B:
            self._scores[1] += 1

        # played cards go back to the bottom of the deck
        player_a.return_card(card_a, self._deck)
        player_b.return_card(card_b, self._deck)

        result = RoundResult(
            round_number=len(self._rounds) + 1,
            player_a=player_a.name,
            player_b=player_b.name,
            card_a=str(card_a),
            card_b=str(card_b),
            value_a=card_a.rank_value,
            value_b=card_b.rank_value,
            outcome=outcome,
            score_a=self._scores[0],
            score_b=self._scores[1],
        )
        self._rounds.append(result)

        self._logger.info(
            "Round %d: %s plays %s, %s plays %s -> %s",
            result.round_number, player_a.name, card_a, player_b.name, card_b, outcome.value
        )
        return result

    def play_game(self) -> GameResult:
        """Deal if needed and play every remaining round.

        Returns:
            The final result
        """
        if not self.is_dealt():
            self.deal()
        while not self.is_game_over():
            self.play_round()
        return self.get_result()

    def get_result(self) -> GameResult:
        """Return the result so far (final once is_game_over() is True)."""
        return GameResult(
            player_a=self._players[0].name,
            player_b=self._players[1].name,
            score_a=self._scores[0],
            score_b=self._scores[1],
            rounds=list(self._rounds),
        )

    def get_snapshot(self) -> GameSnapshot:
        """Return a read-only view of the current game state."""
        players = [
            PlayerSnapshot(
                name=player.name,
                age=player.age,
                score=score,
                hand=[str(card) for card in player.hand],
            )
            for player, score in zip(self._players, self._scores)
        ]
        return GameSnapshot(
            players=players,
            deck_size=len(self._deck) if self.is_dealt() else 0,
            rounds_played=len(self._rounds),
            total_rounds=self._config.rounds,
            dealt=self.is_dealt(),
        )
