"""
Greedy move selection for the computer player.
Picks the legal move that flips the most stones, breaking ties at random.
"""
import logging
from typing import Dict, List, Optional

import numpy as np

from ..game.board import Board, CellState, Position
from ..game.errors import IllegalMoveError, NoLegalMoveError
from ..game.game import OthelloGame

logger = logging.getLogger(__name__)


def capture_counts(board: Board, state: CellState) -> Dict[Position, int]:
    """
    Score every legal move by the number of stones it flips.

    Returns:
        Mapping of position to flip count, in row-major order
    """
    return {
        position: len(board.captured_positions(position.row, position.col, state))
        for position in board.legal_moves(state)
    }


def select_move(board: Board, state: CellState,
                rng: Optional[np.random.Generator] = None) -> Position:
    """
    Choose a move for ``state`` with a one-ply greedy search.

    Args:
        board: Board to move on (left unchanged)
        state: The player to move for
        rng: Random generator used for the tie-break. A fresh unseeded
            generator is created when omitted.

    Returns:
        A position whose flip count equals the best available

    Raises:
        NoLegalMoveError: if ``state`` has no legal move
    """
    counts = capture_counts(board, state)
    if not counts:
        raise NoLegalMoveError(f"{CellState(state).name} has no legal move")

    best_count = 0
    best: List[Position] = []
    for position, count in counts.items():
        if count > best_count:
            best_count = count
            best = [position]
        elif count == best_count:
            best.append(position)

    if rng is None:
        rng = np.random.default_rng()
    choice = best[int(rng.integers(len(best)))]
    logger.debug("%s chose %s flipping %d (%d tied)",
                 CellState(state).name, tuple(choice), best_count, len(best))
    return choice


class GreedyPlayer:
    """Computer player that always plays the greedy move for one colour."""

    def __init__(self, color: CellState, seed: Optional[int] = None):
        self.color = CellState(color)
        if self.color is CellState.EMPTY:
            raise ValueError("A player colour must be BLACK or WHITE")
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def reset(self) -> None:
        self.rng = np.random.default_rng(self.seed)

    def get_move(self, game: OthelloGame) -> Position:
        if game.current_player != self.color:
            raise IllegalMoveError(f"It is not {self.color.name}'s turn")
        return select_move(game.board, self.color, self.rng)


def play_greedy_game(rng: Optional[np.random.Generator] = None,
                     board: Optional[Board] = None) -> OthelloGame:
    """
    Play both sides with the greedy heuristic until the game ends.

    Args:
        rng: Random generator shared by both sides
        board: Starting position (default: the standard opening)

    Returns:
        The finished game
    """
    if rng is None:
        rng = np.random.default_rng()
    game = OthelloGame(board)
    while not game.is_game_over():
        game.play_computer_move(rng)
    return game
