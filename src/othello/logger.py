"""
Logging utilities for the Othello engine.
"""
import os
import logging
from datetime import datetime
from typing import List, Optional

from .config import Config
from .game import OthelloGame

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Logger:
    """Sets up console and file logging for the ``othello`` package."""

    def __init__(self, config: Config, log_dir: Optional[str] = None,
                 console_level: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
            console_level: Level for console output (default: config.logging.log_level)
        """
        self._handlers: List[logging.Handler] = []
        self.logger = logging.getLogger('othello')
        self._previous_level = self.logger.level
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.log_file: Optional[str] = None
        level = getattr(logging, config.logging.log_level.upper())
        formatter = logging.Formatter(LOG_FORMAT)

        # Set up console logging
        self.console = logging.StreamHandler()
        self.console.setLevel(getattr(logging, console_level.upper()) if console_level else level)
        self.console.setFormatter(formatter)
        self._handlers.append(self.console)

        # Set up file logging
        if config.logging.log_to_file:
            os.makedirs(self.log_dir, exist_ok=True)
            self.log_file = os.path.join(self.log_dir, f'{self.run_name}.log')
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self._handlers.append(file_handler)

        self.logger.setLevel(level)
        for handler in self._handlers:
            self.logger.addHandler(handler)

    def log_game_result(self, game: OthelloGame):
        """Log the final score of a finished game."""
        black, white = game.get_score()
        self.logger.info(
            "Result: %s Black=%d White=%d moves=%d",
            game.status_message(), black, white, len(game.move_history)
        )

    def close(self):
        """Close the logger and flush all pending logs."""
        # Only remove our own handlers so repeated setups don't duplicate output
        for handler in self._handlers:
            self.logger.removeHandler(handler)
            handler.close()
        if self._handlers:
            self.logger.setLevel(self._previous_level)
        self._handlers = []

    def __del__(self):
        """Ensure resources are properly released."""
        self.close()


def setup_logger(config: Config, console_level: Optional[str] = None) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object
        console_level: Level for console output (default: config.logging.log_level)

    Returns:
        Logger instance
    """
    return Logger(config, console_level=console_level)
