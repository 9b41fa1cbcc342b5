"""
Card containers for the high card game.

Contains the immutable Card value, the ordered Deck (index 0 is the top) and
the unordered DiscardPile. Cards are matched by value everywhere, so moving a
card between containers always removes it from the source before adding it
to the target.
"""

import logging
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .enums import Rank, Suit
from .exceptions import InvalidArgumentError, MissingArgumentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Card:
    """
    A single playing card.

    Equality and hashing are structural over rank, suit and rank_value, so two
    cards with the same three fields are interchangeable.

    Attributes:
        rank: Name of the rank, e.g. "Ace" or "10"; stored trimmed
        suit: Name of the suit, e.g. "Hearts"; stored trimmed
        rank_value: Comparison value, Ace=1 through King=13
    """

    rank: str
    suit: str
    rank_value: int

    def __post_init__(self) -> None:
        """
        Validate and normalise the card fields.

        Raises:
            MissingArgumentError: When rank or suit is None
            InvalidArgumentError: When rank or suit is blank, or rank_value is negative
        """
        object.__setattr__(self, "rank", self._clean_text(self.rank, "rank"))
        object.__setattr__(self, "suit", self._clean_text(self.suit, "suit"))

        if isinstance(self.rank_value, bool) or not isinstance(self.rank_value, int):
            raise InvalidArgumentError(f"Card rank_value must be an integer: {self.rank_value!r}")
        if self.rank_value < 0:
            raise InvalidArgumentError(f"Card rank_value cannot be negative: {self.rank_value}")

    @staticmethod
    def _clean_text(value: Optional[str], field_name: str) -> str:
        if value is None:
            raise MissingArgumentError(f"Card {field_name} cannot be None")
        if not isinstance(value, str):
            raise InvalidArgumentError(f"Card {field_name} must be a string: {value!r}")
        cleaned = value.strip()
        if not cleaned:
            raise InvalidArgumentError(f"Card {field_name} cannot be empty")
        return cleaned

    @classmethod
    def standard(cls, rank: Rank, suit: Suit) -> "Card":
        """
        Create a card of the standard deck.

        Args:
            rank: Rank of the card
            suit: Suit of the card

        Returns:
            Card: e.g. Card("Queen", "Diamonds", 12) for (Rank.QUEEN, Suit.DIAMONDS)
        """
        return cls(rank.label, suit.value, rank.value)

    def __str__(self) -> str:
        return f"{self.rank} of {self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank!r}, {self.suit!r}, {self.rank_value})"


class Deck:
    """
    An ordered pile of cards drawn from the top.

    Index 0 is the top of the deck. Cards are drawn from the top and added to
    the bottom; the same card value may appear more than once.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Create an empty deck.

        Args:
            rng: Random number generator used by shuffle(); a fresh unseeded
                generator is used when omitted
        """
        self._rng = rng or random.Random()
        self._cards: List[Card] = []

    @classmethod
    def standard(cls, rng: Optional[random.Random] = None) -> "Deck":
        """
        Create the unshuffled 52-card deck.

        Suits go Hearts, Clubs, Diamonds, Spades; within each suit the cards go
        from Ace (1) to King (13).
        """
        deck = cls(rng)
        deck._cards = [Card.standard(rank, suit) for suit in Suit for rank in Rank]
        return deck

    @classmethod
    def from_cards(
        cls,
        cards: Optional[Iterable[Optional[Card]]],
        rng: Optional[random.Random] = None,
        shuffle: bool = True,
    ) -> "Deck":
        """
        Create a deck from the given cards, skipping None entries.

        Args:
            cards: Cards to load, first card on top
            rng: Random number generator used by shuffle()
            shuffle: Whether to shuffle once the cards are loaded

        Returns:
            Deck: The new deck

        Raises:
            InvalidArgumentError: When cards is None
        """
        if cards is None:
            raise InvalidArgumentError("Card list cannot be None")
        deck = cls(rng)
        for card in cards:
            if card is not None:
                deck.add_card(card)
        if shuffle:
            deck.shuffle()
        return deck

    def draw(self) -> Optional[Card]:
        """
        Remove and return the top card.

        Returns:
            Optional[Card]: The top card, or None when the deck is empty
        """
        if not self._cards:
            logger.debug("Draw from an empty deck")
            return None
        return self._cards.pop(0)

    def add_card(self, card: Card) -> None:
        """
        Put a card at the bottom of the deck.

        Raises:
            MissingArgumentError: When card is None
        """
        if card is None:
            raise MissingArgumentError("Cannot add None card to deck")
        self._cards.append(card)

    def shuffle(self) -> None:
        """Shuffle the deck in place with the Fisher-Yates algorithm."""
        cards = self._cards
        for i in range(len(cards) - 1, 0, -1):
            j = self._rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]
        logger.debug("Shuffled %d cards", len(cards))

    def reshuffle(self, cards: Optional[Iterable[Optional[Card]]]) -> None:
        """
        Add the given cards to the bottom, skipping None entries, then shuffle.

        Raises:
            MissingArgumentError: When cards is None
        """
        if cards is None:
            raise MissingArgumentError("Card list cannot be None")
        for card in cards:
            if card is not None:
                self.add_card(card)
        self.shuffle()

    def peek_top(self) -> Optional[Card]:
        """Return the top card without drawing it, or None when empty."""
        return self._cards[0] if self._cards else None

    @property
    def cards(self) -> Tuple[Card, ...]:
        """Snapshot of the deck contents, top card first."""
        return tuple(self._cards)

    @property
    def size(self) -> int:
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return "[" + ", ".join(str(card) for card in self._cards) + "]"

    def __repr__(self) -> str:
        return f"Deck(size={len(self._cards)})"


class DiscardPile:
    """
    An unordered bag of discarded cards.

    Duplicates are allowed. Removal takes the first card equal to the
    requested one, scanning in insertion order.
    """

    def __init__(self) -> None:
        self._pile: List[Card] = []

    @classmethod
    def from_cards(cls, cards: Optional[Iterable[Optional[Card]]]) -> "DiscardPile":
        """
        Create a pile from the given cards, skipping None entries.

        Raises:
            InvalidArgumentError: When cards is None
        """
        if cards is None:
            raise InvalidArgumentError("Card list cannot be None")
        pile = cls()
        for card in cards:
            if card is not None:
                pile.add_card(card)
        return pile

    def add_card(self, card: Card) -> None:
        """
        Add a card to the pile.

        Raises:
            InvalidArgumentError: When card is None
        """
        if card is None:
            raise InvalidArgumentError("Cannot add None card to discard pile")
        self._pile.append(card)

    def remove_card(self, card: Card) -> Optional[Card]:
        """
        Remove the first card equal to the given one.

        Args:
            card: Card value to look for

        Returns:
            Optional[Card]: The removed card, or None when no equal card is in the pile

        Raises:
            InvalidArgumentError: When card is None
        """
        if card is None:
            raise InvalidArgumentError("Cannot remove None card from discard pile")
        for index, held in enumerate(self._pile):
            if held == card:
                return self._pile.pop(index)
        return None

    def remove_all(self) -> List[Card]:
        """Remove and return every card, leaving the pile empty."""
        drained = self._pile
        self._pile = []
        return drained

    @property
    def cards(self) -> Tuple[Card, ...]:
        """Snapshot of the pile contents in insertion order."""
        return tuple(self._pile)

    @property
    def size(self) -> int:
        return len(self._pile)

    @property
    def is_empty(self) -> bool:
        return not self._pile

    def __len__(self) -> int:
        return len(self._pile)

    def __str__(self) -> str:
        if not self._pile:
            return ""
        return ", ".join(str(card) for card in self._pile) + "."

    def __repr__(self) -> str:
        return f"DiscardPile(size={len(self._pile)})"
