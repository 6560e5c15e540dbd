"""
Othello (Reversi) rules engine with a greedy computer opponent.
"""

from .game import (
    Board,
    CellState,
    IllegalMoveError,
    NoLegalMoveError,
    OthelloError,
    OthelloGame,
    OutOfBoundsError,
    Position,
    TurnState,
)
from .ai import GreedyPlayer, select_move

__all__ = [
    'Board',
    'CellState',
    'Position',
    'OthelloGame',
    'TurnState',
    'OthelloError',
    'OutOfBoundsError',
    'IllegalMoveError',
    'NoLegalMoveError',
    'GreedyPlayer',
    'select_move',
]
