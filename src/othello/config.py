"""
Configuration parameters for the Othello engine.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any
import json

from .game.board import Side
from .search.alphabeta import SearchBudget


@dataclass
class SearchConfig:
    """Configuration for the alpha-beta search."""
    max_depth: int = 11
    time_limit: float = 5.0  # seconds per move

    def to_budget(self) -> SearchBudget:
        return SearchBudget(max_depth=self.max_depth, time_limit=self.time_limit)


@dataclass
class GameConfig:
    """Configuration for a human vs engine game."""
    human_side: str = "black"

    def get_human_side(self) -> Side:
        """Resolve `human_side` to a Side."""
        try:
            return Side[self.human_side.upper()]
        except KeyError:
            raise ValueError(f"human_side must be 'black' or 'white', got {self.human_side!r}") from None


@dataclass
class TournamentConfig:
    """Configuration for engine tournaments."""
    rounds: int = 2
    k_factor: float = 32.0
    initial_rating: float = 1500.0
    output_dir: str = "tournament_results"
    elo_file: str = "elo_ratings.json"


@dataclass
class LoggingConfig:
    """Configuration for logging and visualization."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    use_tensorboard: bool = False
    verbose: bool = True


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello-AlphaBeta"
    seed: int = 42
    search: SearchConfig = field(default_factory=SearchConfig)
    game: GameConfig = field(default_factory=GameConfig)
    tournament: TournamentConfig = field(default_factory=TournamentConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

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
        return cls(
            project_name=config_dict.get('project_name', 'Othello-AlphaBeta'),
            seed=config_dict.get('seed', 42),
            search=SearchConfig(**config_dict.get('search', {})),
            game=GameConfig(**config_dict.get('game', {})),
            tournament=TournamentConfig(**config_dict.get('tournament', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
