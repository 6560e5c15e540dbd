"""
Test script for the Othello turn sequencer.
"""
import logging
import sys
from pathlib import Path

import numpy as np
import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.absolute() / "src"))

from othello.game import (
    Board,
    CellState,
    IllegalMoveError,
    OthelloGame,
    TurnState,
    initial_turn_state,
    next_turn_state,
)

B, W = CellState.BLACK, CellState.WHITE

# Black can capture on row 0 and row 7; White can never capture.
FORCED_PASS = """
.WBBBBBB
........
........
........
........
........
........
.WBBBBBB
"""


def test_new_game_starts_with_black():
    game = OthelloGame()
    assert game.turn_state is TurnState.BLACK_TO_MOVE
    assert game.current_player == B
    assert game.get_valid_moves() == [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert game.status_message() == "Black to move"


def test_make_move():
    """Test making moves and capturing pieces."""
    game = OthelloGame()

    record = game.make_move(2, 3)

    assert game.board.cell_at(2, 3) == B, "Move should place black piece"
    assert game.board.cell_at(3, 3) == B, "Should capture white piece"
    assert record.flipped == ((3, 3),)
    assert game.turn_state is TurnState.WHITE_TO_MOVE, "Should be white's turn"
    assert not record.opponent_passed
    assert len(game.move_history) == 1


def test_illegal_move_keeps_turn():
    game = OthelloGame()
    with pytest.raises(IllegalMoveError):
        game.make_move(0, 0)
    with pytest.raises(IllegalMoveError):
        game.make_move(3, 3)
    assert game.turn_state is TurnState.BLACK_TO_MOVE
    assert game.move_history == []


def test_wrong_player_rejected():
    game = OthelloGame()
    with pytest.raises(IllegalMoveError):
        game.make_move(2, 4, player=W)
    game.make_move(2, 3, player=B)
    assert game.current_player == W


def test_forced_pass_returns_turn_to_mover(caplog):
    game = OthelloGame(Board.from_string(FORCED_PASS))
    assert game.turn_state is TurnState.BLACK_TO_MOVE
    assert game.board.legal_moves(W) == []

    with caplog.at_level(logging.INFO, logger="othello"):
        record = game.make_move(0, 0)

    assert game.board.legal_moves(W) == []
    assert game.board.legal_moves(B) == [(7, 0)]
    assert game.turn_state is TurnState.BLACK_TO_MOVE, "White must pass, game continues"
    assert record.opponent_passed
    assert "WHITE has no legal move and passes" in caplog.text


def test_game_over_when_nobody_can_move():
    game = OthelloGame(Board.from_string(FORCED_PASS))
    game.make_move(0, 0)
    record = game.make_move(7, 0)

    assert record.next_turn is TurnState.GAME_OVER
    assert game.is_game_over()
    assert game.current_player is None
    assert game.get_valid_moves() == []
    assert game.get_winner() == B
    assert game.status_message() == "Black wins!"


def test_game_over_rejects_moves():
    game = OthelloGame(Board.from_string(FORCED_PASS))
    game.make_move(0, 0)
    game.make_move(7, 0)
    with pytest.raises(IllegalMoveError):
        game.make_move(1, 1)
    with pytest.raises(IllegalMoveError):
        game.play_computer_move(np.random.default_rng(0))


def test_next_turn_state_transitions():
    board = Board()
    assert next_turn_state(board, B) is TurnState.WHITE_TO_MOVE
    assert next_turn_state(board, W) is TurnState.BLACK_TO_MOVE

    passing = Board.from_string(FORCED_PASS)
    assert next_turn_state(passing, B) is TurnState.BLACK_TO_MOVE

    full = Board.from_string("\n".join(["BBBBBBBB"] * 8))
    assert next_turn_state(full, B) is TurnState.GAME_OVER
    assert next_turn_state(full, W) is TurnState.GAME_OVER


def test_initial_turn_state_for_injected_boards():
    assert initial_turn_state(Board()) is TurnState.BLACK_TO_MOVE
    assert initial_turn_state(Board.from_string("\n".join(["BBB.WWWW"] * 8))) is TurnState.GAME_OVER

    white_only = Board.from_string("""
        WB......
        ........
        ........
        ........
        ........
        ........
        ........
        ........
    """)
    assert initial_turn_state(white_only) is TurnState.WHITE_TO_MOVE
    assert OthelloGame(white_only).current_player == W


def test_draw_has_no_winner():
    rows = ["BBBBBBBB"] * 4 + ["WWWWWWWW"] * 4
    game = OthelloGame(Board.from_string("\n".join(rows)))
    assert game.is_game_over()
    assert game.get_winner() is None
    assert game.status_message() == "Draw!"


def test_winner_hidden_until_game_over():
    game = OthelloGame()
    game.make_move(2, 3)
    assert game.board.winner() == B
    assert game.get_winner() is None


def test_reset():
    game = OthelloGame()
    game.make_move(2, 3)
    game.reset()
    assert game.board == Board()
    assert game.turn_state is TurnState.BLACK_TO_MOVE
    assert game.move_history == []


def test_str_includes_status_and_score():
    text = str(OthelloGame())
    assert "Black to move" in text
    assert "Score - Black: 2, White: 2" in text


def test_board_returned_by_game_is_detached():
    """Placing stones on the returned board must not move the game on."""
    game = OthelloGame()
    outside = game.board
    outside.place(2, 3, B)

    assert game.cell_at(2, 3) == CellState.EMPTY
    assert game.board == Board()
    assert game.turn_state is TurnState.BLACK_TO_MOVE
    assert game.move_history == []

    # The game still only accepts moves legal on its own board
    with pytest.raises(IllegalMoveError):
        game.make_move(5, 5)
    record = game.make_move(2, 3)
    assert game.current_player == W
    assert record.next_turn is TurnState.WHITE_TO_MOVE


def test_turn_state_is_read_only():
    game = OthelloGame()
    with pytest.raises(AttributeError):
        game.turn_state = TurnState.WHITE_TO_MOVE
    assert game.turn_state is TurnState.BLACK_TO_MOVE


def test_read_only_views():
    game = OthelloGame()
    assert game.cell_at(3, 3) == W
    assert game.is_legal_move(2, 3, B)
    snapshot = game.get_board_state()
    snapshot[2, 3] = B
    assert game.cell_at(2, 3) == CellState.EMPTY
