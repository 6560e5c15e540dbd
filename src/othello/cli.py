"""
Terminal front end for playing Othello.
Renders the board as text, reads moves from the keyboard and drives the
computer opponent. All rules come from the engine.
"""
import argparse
import os
import time
from typing import Callable, List, Optional

import numpy as np

from .config import Config, GAME_MODES, LOG_LEVELS, get_default_config
from .game import SIZE, CellState, OthelloGame, Position
from .logger import setup_logger

COLUMN_LABELS = "abcdefgh"
QUIT_WORDS = {"q", "quit", "exit"}


def parse_move(raw: str) -> Optional[Position]:
    """
    Parse a move typed by a player.

    Accepts "row col" with 0-based numbers (e.g. "2 3") or algebraic
    notation with a column letter and 1-based row (e.g. "d3").

    Returns:
        The position, or None if the player asked to quit

    Raises:
        ValueError: if the input is not a move on the board
    """
    s = raw.strip().lower()
    if s in QUIT_WORDS:
        return None

    parts = s.replace(",", " ").split()
    if len(parts) == 2 and all(p.lstrip("-").isdigit() for p in parts):
        row, col = int(parts[0]), int(parts[1])
    elif len(s) == 2 and s[0] in COLUMN_LABELS and s[1].isdigit():
        row, col = int(s[1]) - 1, COLUMN_LABELS.index(s[0])
    else:
        raise ValueError("Invalid input. Enter 'row col', a square like d3, or q.")

    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise ValueError(f"Row and column must be between 0 and {SIZE - 1}.")
    return Position(row, col)


def format_position(position: Position) -> str:
    return f"{COLUMN_LABELS[position.col]}{position.row + 1}"


def render(game: OthelloGame, show_moves: bool = True) -> str:
    """Draw the board with '*' on the legal moves of the side to move."""
    hints = set(game.get_valid_moves()) if show_moves else set()
    cells = game.get_board_state()
    lines = ["  " + " ".join(COLUMN_LABELS)]
    for row in range(SIZE):
        symbols = []
        for col in range(SIZE):
            if (row, col) in hints:
                symbols.append("*")
            else:
                symbols.append(CellState(int(cells[row, col])).symbol)
        lines.append(f"{row + 1} " + " ".join(symbols))

    black, white = game.get_score()
    lines.append(f"Black: {black}  White: {white}")
    lines.append(game.status_message())
    return "\n".join(lines)


def run_game(config: Config,
             read: Callable[[str], str] = input,
             write: Callable[[str], None] = print,
             sleep: Callable[[float], None] = time.sleep,
             rng: Optional[np.random.Generator] = None) -> OthelloGame:
    """
    Play one game in the terminal.

    Args:
        config: Game settings (mode, computer colour, seed, delay)
        read: Prompt function used for human moves
        write: Output function
        sleep: Used for the computer's thinking pause
        rng: Tie-break generator for the computer (default: seeded from config)

    Returns:
        The game as it stood when play stopped; check ``is_game_over()`` to
        tell a finished game from a quit.
    """
    game = OthelloGame()
    computer = None
    if config.game.mode == "ai":
        computer = CellState[config.game.computer_color.upper()]
    if rng is None:
        rng = np.random.default_rng(config.game.seed)

    header = "Two-player mode" if computer is None else "Versus computer mode"
    write(header)

    while True:
        write(render(game))
        if game.is_game_over():
            return game

        player = game.current_player
        if player == computer:
            if config.game.think_delay > 0:
                write("Computer is thinking...")
                sleep(config.game.think_delay)
            record = game.play_computer_move(rng)
            write(f"Computer plays {format_position(record.move.position)}")
        else:
            try:
                raw = read(f"{player.name.title()} move: ")
            except EOFError:
                raw = "q"
            try:
                position = parse_move(raw)
            except ValueError as e:
                write(str(e))
                continue
            if position is None:
                write("Game quit.")
                return game
            if not game.is_legal_move(position.row, position.col, player):
                write(f"{format_position(position)} is not a legal move.")
                continue
            record = game.make_move(position.row, position.col)

        if record.opponent_passed:
            write(f"{player.opponent.name.title()} has no legal move and passes.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Play Othello in the terminal')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to a JSON config file')
    parser.add_argument('--mode', choices=GAME_MODES, default=None,
                        help='pvp for two players, ai to play the computer')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the computer player')
    parser.add_argument('--no-delay', action='store_true',
                        help='Skip the computer thinking pause')
    parser.add_argument('--log-level', choices=LOG_LEVELS, default=None,
                        help='Logging level')
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Load the config file if there is one and apply command line overrides."""
    if args.config and os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        if args.config:
            print(f"Config file {args.config} not found, using default configuration")
        config = get_default_config()

    if args.mode is not None:
        config.game.mode = args.mode
    if args.seed is not None:
        config.game.seed = args.seed
    if args.no_delay:
        config.game.think_delay = 0.0
    if args.log_level is not None:
        config.logging.log_level = args.log_level
    return config.validate()


def main(argv: Optional[List[str]] = None,
         read: Callable[[str], str] = input,
         write: Callable[[str], None] = print) -> int:
    """Run games until the player declines a rematch."""
    args = build_parser().parse_args(argv)
    config = load_config(args)
    # Passes and results are already shown on screen; keep routine INFO lines off the console
    logger = setup_logger(config, console_level=args.log_level or "WARNING")
    rng = np.random.default_rng(config.game.seed)

    try:
        while True:
            game = run_game(config, read=read, write=write, rng=rng)
            if not game.is_game_over():
                break
            logger.log_game_result(game)
            try:
                answer = read("Play again? [y/N] ")
            except EOFError:
                break
            if not answer.strip().lower().startswith("y"):
                break
    except KeyboardInterrupt:
        write("\nGame interrupted.")
    finally:
        logger.close()
    return 0
