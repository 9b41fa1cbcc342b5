"""
Core game logic for the high card game.

This package contains the card containers (Card, Deck, DiscardPile), the
player hand, the round engine and the error taxonomy.
"""

import random
from typing import Iterable, Optional

from .enums import Suit, Rank, RoundOutcome, get_all_suits, get_all_ranks
from .cards import Card, Deck, DiscardPile
from .player import Player
from .round_engine import highest_card, compare_round
from .config import GameConfig, PlayerConfig
from .exceptions import (
    HighCardError, InvalidArgumentError, MissingArgumentError, EmptyHandError, GameStateError
)


# Convenience functions for common operations
def new_deck(shuffle: bool = True, seed: Optional[int] = None) -> Deck:
    """Create the standard 52-card deck.

    Args:
        shuffle: Whether to shuffle the deck after creation.
        seed: Optional seed for a reproducible shuffle.

    Returns:
        A new deck of cards.
    """
    deck = Deck.standard(random.Random(seed) if seed is not None else None)
    if shuffle:
        deck.shuffle()
    return deck


def create_player(name: str, age: int, starting_hand: Optional[Iterable[Optional[Card]]] = None) -> Player:
    """Create a new player.

    Args:
        name: The player's name.
        age: The player's age.
        starting_hand: Optional initial cards, top card first.

    Returns:
        A new Player instance.
    """
    return Player(name, age, starting_hand)


__all__ = [
    # Enums
    'Suit', 'Rank', 'RoundOutcome',

    # Containers
    'Card', 'Deck', 'DiscardPile', 'Player',

    # Round engine
    'highest_card', 'compare_round',

    # Configuration
    'GameConfig', 'PlayerConfig',

    # Errors
    'HighCardError', 'InvalidArgumentError', 'MissingArgumentError', 'EmptyHandError', 'GameStateError',

    # Convenience functions
    'new_deck', 'create_player',

    # Utility functions
    'get_all_suits', 'get_all_ranks'
]
