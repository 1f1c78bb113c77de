"""
Othello game module.
This package contains the board model and the game driver.
"""

from .board import (
    Board,
    Move,
    Side,
    apply_move,
    count,
    evaluate,
    is_game_over,
    new_board,
    valid_moves,
)
from .game import ReversiGame
from .notation import coord_to_str, parse_coord

__all__ = [
    'Board', 'Move', 'Side', 'ReversiGame',
    'new_board', 'valid_moves', 'apply_move', 'is_game_over', 'count', 'evaluate',
    'parse_coord', 'coord_to_str',
]
