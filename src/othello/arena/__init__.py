"""
Arena module for running matches and tournaments between players.
"""
from .arena import Arena, ELORatingSystem, Player, RandomPlayer, SearchPlayer

__all__ = ['Arena', 'ELORatingSystem', 'Player', 'RandomPlayer', 'SearchPlayer']
