"""
Error types raised by the Othello engine.
"""


class OthelloError(Exception):
    """Base class for all engine errors."""


class OutOfBoundsError(OthelloError, IndexError):
    """A row or column outside the 8x8 grid was requested."""

    def __init__(self, row: int, col: int):
        super().__init__(f"Invalid cell position: ({row}, {col})")
        self.row = row
        self.col = col


class IllegalMoveError(OthelloError, ValueError):
    """A move was attempted that the rules do not allow."""


class NoLegalMoveError(OthelloError, ValueError):
    """The move heuristic was asked to move for a side with no legal moves."""
