"""
Enumerations used by the high card game.

Contains the four suits and thirteen ranks of the standard deck, in the
order the canonical deck is built, and the outcome of a single round.
"""

from enum import Enum, IntEnum
from typing import List


class Suit(Enum):
    """
    Suits of the standard deck.

    Declaration order is the order the canonical deck is built in.
    """

    HEARTS = "Hearts"
    CLUBS = "Clubs"
    DIAMONDS = "Diamonds"
    SPADES = "Spades"

    def __str__(self) -> str:
        return self.value


class Rank(IntEnum):
    """
    Ranks of the standard deck.

    The integer value is the card's comparison value: Ace is low (1) and
    King is high (13).
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def label(self) -> str:
        """Name printed on the card, e.g. "Ace", "7" or "Queen"."""
        if Rank.TWO <= self <= Rank.TEN:
            return str(self.value)
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.label


class RoundOutcome(Enum):
    """Result of comparing the two cards played in a round."""

    WIN_A = "win_a"
    WIN_B = "win_b"
    TIE = "tie"


def get_all_suits() -> List[Suit]:
    """Return the suits in canonical deck order."""
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """Return the ranks from Ace to King."""
    return list(Rank)
