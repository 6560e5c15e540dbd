"""
Board module for Othello.
Handles the 8x8 grid, move legality, stone capture and final scoring.
The grid is stored as a flat numpy array indexed by row * 8 + col.
"""
import logging
import operator
from enum import IntEnum
from typing import Dict, List, NamedTuple, Optional, Set, Tuple

import numpy as np

from .errors import IllegalMoveError, OutOfBoundsError

logger = logging.getLogger(__name__)

SIZE = 8
BOARD_SIZE = SIZE * SIZE

# Directions: N, NE, E, SE, S, SW, W, NW
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, 0), (-1, 1), (0, 1), (1, 1),
    (1, 0), (1, -1), (0, -1), (-1, -1),
)


class CellState(IntEnum):
    """Contents of a single cell. BLACK and WHITE double as the two players."""
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> 'CellState':
        if self is CellState.BLACK:
            return CellState.WHITE
        if self is CellState.WHITE:
            return CellState.BLACK
        raise ValueError("EMPTY is not a player and has no opponent")

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS: Dict[CellState, str] = {
    CellState.EMPTY: '.',
    CellState.BLACK: 'B',
    CellState.WHITE: 'W',
}
_STATES_BY_SYMBOL: Dict[str, CellState] = {v: k for k, v in _SYMBOLS.items()}


class Position(NamedTuple):
    """A (row, col) coordinate on the board."""
    row: int
    col: int


INITIAL_SETUP: Tuple[Tuple[int, int, CellState], ...] = (
    (3, 3, CellState.WHITE),
    (3, 4, CellState.BLACK),
    (4, 3, CellState.BLACK),
    (4, 4, CellState.WHITE),
)


def _require_player(state: CellState) -> CellState:
    state = CellState(state)
    if state is CellState.EMPTY:
        raise ValueError("A move must be made by BLACK or WHITE, not EMPTY")
    return state


class Board:
    """
    Represents the Othello board.

    Cells hold CellState values. ``place`` is the only operation that changes
    the board; everything else is a query over the current contents.
    """

    SIZE = SIZE

    def __init__(self):
        """Create a board with the standard opening layout."""
        self._cells = np.full(BOARD_SIZE, CellState.EMPTY, dtype=np.int8)
        for row, col, state in INITIAL_SETUP:
            self._cells[row * SIZE + col] = state

    @classmethod
    def from_string(cls, text: str) -> 'Board':
        """
        Build a board from its text form.

        Args:
            text: Eight lines of eight symbols each ('B', 'W' or '.').
                Whitespace inside a line is ignored, so the output of
                ``str(board)`` is accepted.

        Returns:
            A new Board holding exactly the given cells.
        """
        rows = [''.join(line.split()) for line in text.strip().splitlines()]
        rows = [row for row in rows if row]
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError(f"Expected {SIZE} rows of {SIZE} cells")

        board = cls()
        for i, row in enumerate(rows):
            for j, symbol in enumerate(row.upper()):
                if symbol not in _STATES_BY_SYMBOL:
                    raise ValueError(f"Unknown cell symbol {symbol!r} at ({i}, {j})")
                board._cells[i * SIZE + j] = _STATES_BY_SYMBOL[symbol]
        return board

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board()
        new_board._cells = self._cells.copy()
        return new_board

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        return 0 <= row < SIZE and 0 <= col < SIZE

    def _index(self, row: int, col: int) -> int:
        try:
            r, c = operator.index(row), operator.index(col)
        except TypeError:
            raise OutOfBoundsError(row, col) from None
        if not self.in_bounds(r, c):
            raise OutOfBoundsError(row, col)
        return r * SIZE + c

    def cell_at(self, row: int, col: int) -> CellState:
        """Return the contents of a cell, raising OutOfBoundsError off the grid."""
        return CellState(int(self._cells[self._index(row, col)]))

    def stone_count(self, state: CellState) -> int:
        """Count the cells holding ``state``. The three counts always sum to 64."""
        return int(np.count_nonzero(self._cells == CellState(state)))

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_count, white_count)
        """
        return self.stone_count(CellState.BLACK), self.stone_count(CellState.WHITE)

    def get_board_state(self) -> np.ndarray:
        """
        Get a snapshot of the board for rendering.

        Returns:
            An 8x8 numpy array copy; changing it does not touch the board.
        """
        return self._cells.reshape(SIZE, SIZE).copy()

    def _bracketed_run(self, row: int, col: int, dr: int, dc: int,
                       player: CellState) -> List[Position]:
        """
        Walk from (row, col) along (dr, dc) over opponent stones.

        Returns the run if it ends on one of the player's stones, else [].
        """
        opponent = player.opponent
        run = []
        r, c = row + dr, col + dc
        while self.in_bounds(r, c) and self._cells[r * SIZE + c] == opponent:
            run.append(Position(r, c))
            r += dr
            c += dc

        # An empty run, an empty cell or the board edge all fail the bracket
        if run and self.in_bounds(r, c) and self._cells[r * SIZE + c] == player:
            return run
        return []

    def captured_positions(self, row: int, col: int, state: CellState) -> Set[Position]:
        """
        Get the stones that placing ``state`` at (row, col) would flip.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)
            state: The player making the move (BLACK or WHITE)

        Returns:
            Union of the bracketed runs over all eight directions. Empty when
            the move is illegal, including when the cell is occupied.
        """
        player = _require_player(state)
        if self.cell_at(row, col) != CellState.EMPTY:
            return set()

        captured: Set[Position] = set()
        for dr, dc in DIRECTIONS:
            captured.update(self._bracketed_run(row, col, dr, dc, player))
        return captured

    def is_legal_move(self, row: int, col: int, state: CellState) -> bool:
        """Check whether ``state`` may play at (row, col)."""
        player = _require_player(state)
        if self.cell_at(row, col) != CellState.EMPTY:
            return False
        return any(self._bracketed_run(row, col, dr, dc, player) for dr, dc in DIRECTIONS)

    def place(self, row: int, col: int, state: CellState) -> Set[Position]:
        """
        Place a stone and flip every bracketed run.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)
            state: The player making the move (BLACK or WHITE)

        Returns:
            The set of flipped positions

        Raises:
            IllegalMoveError: if the move is not legal for ``state``
        """
        player = _require_player(state)
        captured = self.captured_positions(row, col, player)
        if not captured:
            raise IllegalMoveError(f"Illegal move for {player.name} at ({row}, {col})")

        self._cells[self._index(row, col)] = player
        for r, c in captured:
            self._cells[r * SIZE + c] = player

        logger.debug("%s placed at (%d, %d), flipped %d", player.name, row, col, len(captured))
        return captured

    def legal_moves(self, state: CellState) -> List[Position]:
        """
        Get all legal moves for the given player.

        Returns:
            List of positions in row-major order
        """
        player = _require_player(state)
        return [
            Position(row, col)
            for row in range(SIZE)
            for col in range(SIZE)
            if self.is_legal_move(row, col, player)
        ]

    def has_legal_move(self, state: CellState) -> bool:
        player = _require_player(state)
        return any(
            self.is_legal_move(row, col, player)
            for row in range(SIZE)
            for col in range(SIZE)
        )

    def is_terminal(self) -> bool:
        """The game is over when neither side has a legal move."""
        return not self.has_legal_move(CellState.BLACK) and not self.has_legal_move(CellState.WHITE)

    def winner(self) -> Optional[CellState]:
        """
        Determine the winner based on stone counts.

        Returns:
            CellState.BLACK or CellState.WHITE, or None for a tie
        """
        black_count, white_count = self.get_score()
        if black_count > white_count:
            return CellState.BLACK
        if white_count > black_count:
            return CellState.WHITE
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    __hash__ = None

    def __str__(self) -> str:
        """Return a string representation of the board."""
        rows = []
        for i in range(SIZE):
            row = [CellState(int(v)).symbol for v in self._cells[i * SIZE:(i + 1) * SIZE]]
            rows.append(' '.join(row))
        return "\n".join(rows)

    def __repr__(self) -> str:
        black_count, white_count = self.get_score()
        return f"Board(black={black_count}, white={white_count})"
