"""
Alpha-beta search for Othello.
"""
from .alphabeta import AlphaBetaSearch, SearchBudget, SearchResult, get_best_move, INF

__all__ = ['AlphaBetaSearch', 'SearchBudget', 'SearchResult', 'get_best_move', 'INF']
