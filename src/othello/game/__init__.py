"""
Othello game module.
This package contains the rules engine: board, capture rules and turn order.
"""

from .board import BOARD_SIZE, DIRECTIONS, SIZE, Board, CellState, Position
from .errors import IllegalMoveError, NoLegalMoveError, OthelloError, OutOfBoundsError
from .game import Move, MoveRecord, OthelloGame, TurnState, initial_turn_state, next_turn_state

__all__ = [
    'BOARD_SIZE',
    'DIRECTIONS',
    'SIZE',
    'Board',
    'CellState',
    'Position',
    'OthelloError',
    'OutOfBoundsError',
    'IllegalMoveError',
    'NoLegalMoveError',
    'Move',
    'MoveRecord',
    'OthelloGame',
    'TurnState',
    'initial_turn_state',
    'next_turn_state',
]
