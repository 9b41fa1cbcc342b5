"""
High Card - a two-player card game.

This package contains the deck/hand state machine (cards, deck, discard pile,
player hands), the round engine, a controller that runs a full game, and a
command line interface on top of it.
"""

__version__ = "0.1.0"
__author__ = "High Card Development Team"
