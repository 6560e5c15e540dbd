"""
Configuration parameters for the Othello engine and its terminal front end.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, Optional
import json

GAME_MODES = ("pvp", "ai")
PLAYER_COLORS = ("black", "white")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class GameConfig:
    """Configuration for a game session."""
    mode: str = "ai"  # "pvp" for two humans, "ai" for human vs computer
    computer_color: str = "white"
    seed: Optional[int] = None  # Seed for the computer's tie-breaks
    think_delay: float = 1.0  # Cosmetic pause before each computer move, in seconds


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = False


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "othello"
    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> 'Config':
        """Raise ValueError if any setting is out of range."""
        if self.game.mode not in GAME_MODES:
            raise ValueError(f"Unknown game mode {self.game.mode!r}, expected one of {GAME_MODES}")
        if self.game.computer_color not in PLAYER_COLORS:
            raise ValueError(f"Unknown computer colour {self.game.computer_color!r}")
        if self.game.think_delay < 0:
            raise ValueError("think_delay must not be negative")
        if self.logging.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {self.logging.log_level!r}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        config = cls(
            project_name=config_dict.get('project_name', 'othello'),
            game=GameConfig(**config_dict.get('game', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )
        return config.validate()

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
