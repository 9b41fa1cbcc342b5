"""
Player state for the high card game.

A player owns a hand of cards. Cards enter the hand by drawing from a deck and
leave it by being discarded to a pile or returned to a deck; every move
removes the card from its source before adding it to its target.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from .cards import Card, Deck, DiscardPile
from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class Player:
    """
    A named player and the cards in their hand.

    The hand is stored bottom-to-top: drawn cards are appended and therefore
    land on top. ``hand`` presents the cards top-to-bottom.
    """

    def __init__(self, name: str, age: int, starting_hand: Optional[Iterable[Optional[Card]]] = None):
        """
        Create a player.

        Args:
            name: Player name, trimmed; must not be blank
            age: Player age; must not be negative
            starting_hand: Initial cards, top card first; None entries are skipped

        Raises:
            InvalidArgumentError: When name is None or blank, or age is negative
        """
        if name is None:
            raise InvalidArgumentError("Player name cannot be None")
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError("Player name cannot be empty")
        if isinstance(age, bool) or not isinstance(age, int):
            raise InvalidArgumentError(f"Player age must be an integer: {age!r}")
        if age < 0:
            raise InvalidArgumentError(f"Player age cannot be negative: {age}")

        self._name = name.strip()
        self._age = age
        self._cards: List[Card] = []
        if starting_hand is not None:
            self._cards = [card for card in reversed(list(starting_hand)) if card is not None]

    @property
    def name(self) -> str:
        return self._name

    @property
    def age(self) -> int:
        return self._age

    @property
    def hand(self) -> Tuple[Card, ...]:
        """Cards in the hand, top to bottom."""
        return tuple(reversed(self._cards))

    @property
    def size(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def has_card(self, card: Card) -> bool:
        """Return True if a card equal to the given one is in the hand."""
        return card in self._cards

    def draw(self, deck: Deck) -> Optional[Card]:
        """
        Draw the top card of the deck into the hand.

        Args:
            deck: Deck to draw from

        Returns:
            Optional[Card]: The drawn card, or None when the deck was empty and
            the hand is unchanged

        Raises:
            InvalidArgumentError: When deck is None
        """
        if deck is None:
            raise InvalidArgumentError("Deck cannot be None")
        pulled = deck.draw()
        if pulled is not None:
            self._cards.append(pulled)
        return pulled

    def discard_card(self, card: Card, pile: DiscardPile) -> bool:
        """
        Move a card from the hand to a discard pile.

        Returns:
            bool: True if the card was in the hand and has been moved, False if
            it was not held; neither container changes in that case

        Raises:
            InvalidArgumentError: When card or pile is None
        """
        if card is None:
            raise InvalidArgumentError("Card cannot be None")
        if pile is None:
            raise InvalidArgumentError("Discard pile cannot be None")
        if not self._take(card):
            return False
        pile.add_card(card)
        logger.debug("%s discarded %s", self._name, card)
        return True

    def return_card(self, card: Card, deck: Deck) -> bool:
        """
        Move a card from the hand to the bottom of a deck.

        Returns:
            bool: True if the card was in the hand and has been moved, False if
            it was not held; neither container changes in that case

        Raises:
            InvalidArgumentError: When card or deck is None
        """
        if card is None:
            raise InvalidArgumentError("Card cannot be None")
        if deck is None:
            raise InvalidArgumentError("Deck cannot be None")
        if not self._take(card):
            return False
        deck.add_card(card)
        logger.debug("%s returned %s to the deck", self._name, card)
        return True

    def _take(self, card: Card) -> bool:
        try:
            self._cards.remove(card)
        except ValueError:
            return False
        return True

    def __str__(self) -> str:
        parts = [self._name, str(self._age)]
        parts.extend(str(card) for card in self.hand)
        return ", ".join(parts) + "."

    def __repr__(self) -> str:
        return f"Player(name={self._name!r}, age={self._age}, cards={len(self._cards)})"
