"""
Logging utilities for the Othello engine.
"""
import os
import json
import logging
from dataclasses import asdict
from datetime import datetime
from typing import Dict, Any, Optional

from .config import Config
from .search.alphabeta import SearchResult


class Logger:
    """Run logger for games, searches and tournaments."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.run_dir = os.path.join(self.log_dir, self.run_name)

        os.makedirs(self.run_dir, exist_ok=True)

        self.writer = None
        if config.logging.use_tensorboard:
            from torch.utils.tensorboard import SummaryWriter
            self.writer = SummaryWriter(log_dir=os.path.join(self.run_dir, 'tensorboard'))

        level = getattr(logging, config.logging.log_level.upper(), logging.INFO)
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        self._handlers = [logging.FileHandler(os.path.join(self.run_dir, 'game.log'))]
        if config.logging.verbose:
            self._handlers.append(logging.StreamHandler())

        # Configure root logger so module loggers propagate here
        self.logger = logging.getLogger()
        self.logger.setLevel(level)
        for handler in self._handlers:
            handler.setLevel(level)
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

        self.save_config()

    def save_config(self):
        """Save the configuration to a JSON file."""
        config_path = os.path.join(self.run_dir, 'config.json')
        with open(config_path, 'w') as f:
            json.dump(asdict(self.config), f, indent=2)

    def log_metrics(self, metrics: Dict[str, Any], step: int, prefix: str = ''):
        """
        Log metrics to the log handlers and TensorBoard.

        Args:
            metrics: Dictionary of metrics to log
            step: Current step (move number, game number, ...)
            prefix: Prefix for metric names (e.g., 'search/', 'tournament/')
        """
        log_str = f"Step {step}:"
        for name, value in metrics.items():
            if isinstance(value, float):
                log_str += f" {prefix}{name}={value:.4f}"
            else:
                log_str += f" {prefix}{name}={value}"
        self.logger.info(log_str)

        if self.writer is not None:
            for name, value in metrics.items():
                if isinstance(value, (int, float)) and not isinstance(value, bool):
                    self.writer.add_scalar(f"{prefix}{name}", value, step)

    def log_search(self, result: SearchResult, step: int, prefix: str = 'search/'):
        """Log the statistics of one engine decision."""
        self.log_metrics({
            'score': result.score,
            'depth': result.depth,
            'nodes': result.nodes,
            'elapsed': result.elapsed,
        }, step, prefix=prefix)

    def log_depth(self, result: SearchResult, ply: int):
        """Log one completed iterative-deepening pass of the decision at `ply`."""
        self.log_metrics({
            'ply': ply,
            'move': result.move,
            'score': result.score,
            'nodes': result.nodes,
            'elapsed': result.elapsed,
        }, result.depth, prefix='search/depth/')

    def close(self):
        """Flush pending logs and detach the handlers this logger added."""
        if self.writer is not None:
            self.writer.flush()
            self.writer.close()
            self.writer = None

        for handler in self._handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self._handlers = []


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
