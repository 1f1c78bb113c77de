"""
Othello engine: board model and time-bounded alpha-beta search.
"""
from .game import (
    Board,
    Side,
    apply_move,
    count,
    is_game_over,
    new_board,
    valid_moves,
)
from .search import get_best_move

__all__ = [
    'Board', 'Side',
    'new_board', 'valid_moves', 'apply_move', 'is_game_over', 'count', 'get_best_move',
]
