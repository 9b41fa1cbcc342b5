"""
Controller layer for the high card game.

Bridges the core game logic and the user interface: runs the game and hands
out DTO snapshots.
"""

from .game_controller import HighCardController
from .dto import PlayerSnapshot, GameSnapshot, RoundResult, GameResult
from .decorators import logged_action

__all__ = [
    'HighCardController',
    'PlayerSnapshot', 'GameSnapshot', 'RoundResult', 'GameResult',
    'logged_action'
]
