"""
Tests for logging setup.
"""
import logging
import sys
from pathlib import Path

import numpy as np

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.absolute() / "src"))

from othello.ai import play_greedy_game
from othello.config import get_default_config
from othello.logger import setup_logger


def test_file_logging(tmp_path):
    config = get_default_config()
    config.logging.log_to_file = True
    config.logging.log_dir = str(tmp_path)

    logger = setup_logger(config)
    try:
        game = play_greedy_game(np.random.default_rng(8))
        logger.log_game_result(game)
    finally:
        logger.close()

    log_files = list(tmp_path.glob("othello_*.log"))
    assert len(log_files) == 1
    text = log_files[0].read_text()
    assert "Game over after" in text
    assert "Result:" in text


def test_close_removes_handlers():
    othello_logger = logging.getLogger("othello")
    before = list(othello_logger.handlers)

    logger = setup_logger(get_default_config())
    assert len(othello_logger.handlers) == len(before) + 1
    logger.close()

    assert othello_logger.handlers == before


def test_close_restores_previous_level():
    othello_logger = logging.getLogger("othello")
    othello_logger.setLevel(logging.ERROR)
    try:
        config = get_default_config()
        config.logging.log_level = "DEBUG"
        logger = setup_logger(config)
        assert othello_logger.level == logging.DEBUG
        logger.close()
        assert othello_logger.level == logging.ERROR
    finally:
        othello_logger.setLevel(logging.NOTSET)


def test_console_level_separate_from_file_level(tmp_path):
    config = get_default_config()
    config.logging.log_to_file = True
    config.logging.log_dir = str(tmp_path)

    logger = setup_logger(config, console_level="WARNING")
    try:
        assert logger.console.level == logging.WARNING
        assert logging.getLogger("othello").level == logging.INFO
        play_greedy_game(np.random.default_rng(8))
    finally:
        logger.close()

    text = next(tmp_path.glob("othello_*.log")).read_text()
    assert "Game over after" in text
