"""
Round engine for the high card game.

Each round both players play the highest card in their hand and the higher
rank_value wins the round.
"""

from typing import Sequence, Union

from .cards import Card
from .enums import RoundOutcome
from .exceptions import EmptyHandError, MissingArgumentError
from .player import Player


def highest_card(hand: Union[Player, Sequence[Card]]) -> Card:
    """
    Pick the card with the highest rank_value.

    Ties go to the card met first in top-to-bottom order.

    Args:
        hand: A player, or their cards listed top to bottom

    Returns:
        Card: The highest card

    Raises:
        EmptyHandError: When there are no cards to choose from
    """
    cards = hand.hand if isinstance(hand, Player) else hand
    if not cards:
        raise EmptyHandError("Cannot pick the highest card of an empty hand")

    best = cards[0]
    for card in cards[1:]:
        if card.rank_value > best.rank_value:
            best = card
    return best


def compare_round(card_a: Card, card_b: Card) -> RoundOutcome:
    """
    Compare the two cards played in a round.

    Returns:
        RoundOutcome: WIN_A or WIN_B for the strictly higher card, TIE otherwise
    """
    if card_a is None or card_b is None:
        raise MissingArgumentError("Both played cards are required")
    if card_a.rank_value > card_b.rank_value:
        return RoundOutcome.WIN_A
    if card_b.rank_value > card_a.rank_value:
        return RoundOutcome.WIN_B
    return RoundOutcome.TIE
