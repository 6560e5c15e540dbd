"""
Othello game module.
Sequences turns over a Board and applies the forced-pass rule.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from .board import Board, CellState, Position
from .errors import IllegalMoveError

logger = logging.getLogger(__name__)


class TurnState(Enum):
    BLACK_TO_MOVE = "black_to_move"
    WHITE_TO_MOVE = "white_to_move"
    GAME_OVER = "game_over"

    @property
    def player(self) -> Optional[CellState]:
        """The side to move, or None once the game is over."""
        if self is TurnState.BLACK_TO_MOVE:
            return CellState.BLACK
        if self is TurnState.WHITE_TO_MOVE:
            return CellState.WHITE
        return None

    @classmethod
    def to_move(cls, player: CellState) -> 'TurnState':
        if player == CellState.BLACK:
            return cls.BLACK_TO_MOVE
        if player == CellState.WHITE:
            return cls.WHITE_TO_MOVE
        raise ValueError("EMPTY is not a player")


@dataclass(frozen=True)
class Move:
    position: Position
    player: CellState

    @property
    def row(self) -> int:
        return self.position.row

    @property
    def col(self) -> int:
        return self.position.col


@dataclass(frozen=True)
class MoveRecord:
    """A completed move, the stones it flipped and the turn that followed."""
    move: Move
    flipped: Tuple[Position, ...]
    next_turn: TurnState

    @property
    def opponent_passed(self) -> bool:
        return self.next_turn.player == self.move.player


def next_turn_state(board: Board, mover: CellState) -> TurnState:
    """
    Work out whose turn it is after ``mover`` has completed a move.

    The opponent moves next if it can; otherwise the mover goes again
    (a forced pass). When neither side can move the game is over.
    """
    opponent = CellState(mover).opponent
    if board.has_legal_move(opponent):
        return TurnState.to_move(opponent)
    if board.has_legal_move(mover):
        return TurnState.to_move(mover)
    return TurnState.GAME_OVER


def initial_turn_state(board: Board) -> TurnState:
    """Black moves first unless it cannot, in which case White does."""
    if board.has_legal_move(CellState.BLACK):
        return TurnState.BLACK_TO_MOVE
    if board.has_legal_move(CellState.WHITE):
        return TurnState.WHITE_TO_MOVE
    return TurnState.GAME_OVER


class OthelloGame:
    """
    Main game class for Othello that manages the board and turn order.
    """

    def __init__(self, board: Optional[Board] = None):
        """
        Initialize a new Othello game.

        Args:
            board: Position to start from (default: the standard opening)
        """
        self._board = board if board is not None else Board()
        self._turn_state = initial_turn_state(self._board)
        self.move_history: List[MoveRecord] = []

    @property
    def board(self) -> Board:
        """A copy of the board; placing stones on it does not affect the game."""
        return self._board.copy()

    @property
    def turn_state(self) -> TurnState:
        return self._turn_state

    @property
    def current_player(self) -> Optional[CellState]:
        return self._turn_state.player

    def reset(self) -> None:
        """Discard the current board and start again from the opening."""
        self._board = Board()
        self._turn_state = TurnState.BLACK_TO_MOVE
        self.move_history = []

    def make_move(self, row: int, col: int, player: Optional[CellState] = None) -> MoveRecord:
        """
        Make a move for the side to move.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)
            player: If given, must match the side to move

        Returns:
            The record of the completed move

        Raises:
            IllegalMoveError: if the game is over, it is not ``player``'s
                turn, or the move itself is illegal
        """
        current = self.current_player
        if current is None:
            raise IllegalMoveError("The game is over")
        if player is not None and CellState(player) != current:
            raise IllegalMoveError(f"It is {current.name}'s turn, not {CellState(player).name}'s")

        flipped = self._board.place(row, col, current)

        # Legality can change for both sides after a capture
        self._turn_state = next_turn_state(self._board, current)
        record = MoveRecord(
            move=Move(Position(row, col), current),
            flipped=tuple(sorted(flipped)),
            next_turn=self._turn_state,
        )
        self.move_history.append(record)

        if self._turn_state is TurnState.GAME_OVER:
            black, white = self.get_score()
            logger.info("Game over after %d moves: Black %d, White %d",
                        len(self.move_history), black, white)
        elif record.opponent_passed:
            logger.info("%s has no legal move and passes", current.opponent.name)
        return record

    def play_computer_move(self, rng: Optional[np.random.Generator] = None) -> MoveRecord:
        """Let the greedy heuristic choose and play a move for the side to move."""
        from ..ai.greedy import select_move

        current = self.current_player
        if current is None:
            raise IllegalMoveError("The game is over")
        row, col = select_move(self._board, current, rng)
        return self.make_move(row, col)

    def cell_at(self, row: int, col: int) -> CellState:
        return self._board.cell_at(row, col)

    def is_legal_move(self, row: int, col: int, state: CellState) -> bool:
        return self._board.is_legal_move(row, col, state)

    def get_board_state(self) -> np.ndarray:
        return self._board.get_board_state()

    def get_valid_moves(self) -> List[Position]:
        """
        Get all valid moves for the side to move.

        Returns:
            List of positions, empty once the game is over
        """
        current = self.current_player
        if current is None:
            return []
        return self._board.legal_moves(current)

    def is_game_over(self) -> bool:
        return self._turn_state is TurnState.GAME_OVER

    def get_winner(self) -> Optional[CellState]:
        """
        Get the winner of the game.

        Returns:
            CellState.BLACK or CellState.WHITE, None for a draw or while the
            game is still running
        """
        return self._board.winner() if self.is_game_over() else None

    def get_score(self) -> Tuple[int, int]:
        return self._board.get_score()

    def status_message(self) -> str:
        if self.is_game_over():
            winner = self._board.winner()
            if winner is None:
                return "Draw!"
            return f"{winner.name.title()} wins!"
        return f"{self.current_player.name.title()} to move"

    def __str__(self) -> str:
        """String representation of the game state."""
        black, white = self.get_score()
        return "\n".join([
            str(self._board),
            self.status_message(),
            f"Score - Black: {black}, White: {white}",
        ])
