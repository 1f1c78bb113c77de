"""
Coordinate notation helpers.
Columns are letters A-H, rows are numbers 1-8, so "D3" is (row 2, col 3).
"""
from typing import Optional

from .board import Board, Move


def parse_coord(text: str) -> Optional[Move]:
    """
    Parse a move such as "d3" or "D3" into a 0-based (row, col) pair.

    Returns:
        The coordinate, or None if the text is not a square on the board
    """
    s = text.strip().upper()
    if len(s) < 2:
        return None
    col_char, row_str = s[0], s[1:]
    if not ('A' <= col_char <= 'Z') or not row_str.isdigit():
        return None
    row = int(row_str) - 1
    col = ord(col_char) - ord('A')
    if not Board.in_bounds(row, col):
        return None
    return row, col


def coord_to_str(move: Move) -> str:
    """Format a (row, col) pair as "A1" style text."""
    row, col = move
    return f"{chr(ord('A') + col)}{row + 1}"
