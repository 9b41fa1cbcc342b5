"""
Integration tests: complete games through the public API.
"""

import pytest

from highcard.controller import HighCardController
from highcard.core import (
    Card, DiscardPile, GameConfig, RoundOutcome,
    compare_round, create_player, highest_card, new_deck
)


@pytest.mark.integration
class TestFullGame:
    """End-to-end games."""

    def test_manual_game_loop(self):
        """Drive a game with the core API only, the way the controller does."""
        deck = new_deck(seed=2024)
        ann = create_player("Ann", 30)
        bob = create_player("Bob", 25)
        for _ in range(5):
            ann.draw(deck)
            bob.draw(deck)
        assert len(deck) == 42

        points = {"Ann": 0, "Bob": 0}
        for _ in range(5):
            card_a = highest_card(ann)
            card_b = highest_card(bob)
            outcome = compare_round(card_a, card_b)
            if outcome == RoundOutcome.WIN_A:
                points["Ann"] += 1
            elif outcome == RoundOutcome.WIN_B:
                points["Bob"] += 1
            assert ann.return_card(card_a, deck)
            assert bob.return_card(card_b, deck)

        assert len(deck) == 52
        assert len(set(deck.cards)) == 52
        assert points["Ann"] + points["Bob"] <= 5

    def test_discard_instead_of_return(self):
        deck = new_deck(shuffle=False)
        pile = DiscardPile()
        ann = create_player("Ann", 30)
        for _ in range(3):
            ann.draw(deck)
        while len(ann):
            assert ann.discard_card(highest_card(ann), pile)
        assert str(pile) == "3 of Hearts, 2 of Hearts, Ace of Hearts."
        assert len(deck) == 49

    def test_unshuffled_new_deck(self):
        deck = new_deck(shuffle=False)
        assert deck.draw() == Card("Ace", "Hearts", 1)

    @pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
    def test_controller_games(self, seed):
        config = GameConfig.default_heads_up("Ann", 30, "Bob", 25)
        config.random_seed = seed
        controller = HighCardController(config)
        result = controller.play_game()
        ties = sum(1 for r in result.rounds if r.outcome == RoundOutcome.TIE)
        assert result.score_a + result.score_b + ties == 5
        assert len(controller.deck) == 52
        assert len(set(controller.deck.cards)) == 52
