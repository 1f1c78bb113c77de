"""
Board module for Othello.
Handles the 8x8 grid, move legality, capture flips, terminal detection
and the static evaluation used by the search.
"""
from enum import IntEnum
from typing import List, Optional, Sequence, Tuple
import numpy as np

Move = Tuple[int, int]


class Side(IntEnum):
    """The two contestants. Cell values on the board use the same integers."""

    BLACK = 1
    WHITE = 2

    def opponent(self) -> 'Side':
        """Return the other side."""
        return Side(3 - self)


class Board:
    """
    Represents the Othello board as an 8x8 numpy array.
    Each cell holds EMPTY or the integer value of the owning Side.
    """

    # Board dimensions
    SIZE = 8

    EMPTY = 0

    # Evaluation weights
    DISC_VALUE = 10
    CORNER_BONUS = 25
    CORNERS = ((0, 0), (0, 7), (7, 0), (7, 7))

    DIRECTIONS = ((-1, -1), (-1, 0), (-1, 1),
                  (0, -1),           (0, 1),
                  (1, -1),  (1, 0),  (1, 1))

    _SYMBOLS = {EMPTY: '.', Side.BLACK: 'B', Side.WHITE: 'W'}

    def __init__(self):
        """Initialize a board in the standard starting position."""
        self._board = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
        self._board[3, 3] = Side.WHITE
        self._board[4, 4] = Side.WHITE
        self._board[3, 4] = Side.BLACK
        self._board[4, 3] = Side.BLACK

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """
        Build a board from eight strings of eight characters each.

        Args:
            rows: Row strings using '.' for empty, 'B' for black and 'W' for white.
                  Spaces are ignored so the output of str(board) can be pasted back.

        Returns:
            A new Board holding that position
        """
        rows = [row.replace(' ', '') for row in rows]
        if len(rows) != cls.SIZE or any(len(row) != cls.SIZE for row in rows):
            raise ValueError("Expected 8 rows of 8 cells")

        lookup = {symbol: value for value, symbol in cls._SYMBOLS.items()}
        board = cls()
        for r, row in enumerate(rows):
            for c, symbol in enumerate(row.upper()):
                if symbol not in lookup:
                    raise ValueError(f"Unknown cell symbol {symbol!r} at ({r}, {c})")
                board._board[r, c] = lookup[symbol]
        return board

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board.__new__(Board)
        new_board._board = self._board.copy()
        return new_board

    @classmethod
    def in_bounds(cls, row: int, col: int) -> bool:
        return 0 <= row < cls.SIZE and 0 <= col < cls.SIZE

    def get_cell(self, row: int, col: int) -> Optional[Side]:
        """Return the side owning (row, col), or None if the cell is empty."""
        if not self.in_bounds(row, col):
            raise IndexError(f"({row}, {col}) is off the board")
        value = int(self._board[row, col])
        return Side(value) if value != self.EMPTY else None

    def _run_to_flip(self, side: Side, row: int, col: int, dr: int, dc: int) -> List[Move]:
        """
        Walk from (row, col) in direction (dr, dc) and return the opponent discs
        that a disc of `side` at (row, col) would capture along that line.

        The line captures only if one or more opponent discs are followed directly
        by a disc of `side`. Otherwise the result is empty.
        """
        opponent = side.opponent()
        run = []
        r, c = row + dr, col + dc
        while 0 <= r < self.SIZE and 0 <= c < self.SIZE:
            cell = self._board[r, c]
            if cell == opponent:
                run.append((r, c))
            elif cell == side:
                return run
            else:
                break
            r += dr
            c += dc
        return []

    def is_valid_move(self, side: Side, row: int, col: int) -> bool:
        """Check whether `side` may place a disc at (row, col)."""
        if not self.in_bounds(row, col) or self._board[row, col] != self.EMPTY:
            return False

        for dr, dc in self.DIRECTIONS:
            if self._run_to_flip(side, row, col, dr, dc):
                return True
        return False

    def get_valid_moves(self, side: Side) -> List[Move]:
        """
        Get all legal moves for `side`.

        Returns:
            List of (row, col) tuples in row-major order
        """
        moves = []
        for row in range(self.SIZE):
            for col in range(self.SIZE):
                if self._board[row, col] == self.EMPTY and self.is_valid_move(side, row, col):
                    moves.append((row, col))
        return moves

    def has_any_valid_move(self, side: Side) -> bool:
        """Check if `side` has at least one legal move."""
        return any(self.is_valid_move(side, row, col)
                   for row in range(self.SIZE)
                   for col in range(self.SIZE))

    def apply_move(self, side: Side, row: int, col: int) -> bool:
        """
        Place a disc for `side` at (row, col) and flip every captured run.

        Args:
            side: The side making the move
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Returns:
            bool: True if the move was legal and applied, False otherwise (board unchanged)
        """
        return self.apply_move_with_flips(side, row, col) is not None

    def apply_move_with_flips(self, side: Side, row: int, col: int) -> Optional[List[Move]]:
        """Like apply_move, but return the flipped coordinates, or None if illegal."""
        if not self.is_valid_move(side, row, col):
            return None

        self._board[row, col] = side
        flipped = []
        # Each direction is judged from the single placement, independently of the others
        for dr, dc in self.DIRECTIONS:
            run = self._run_to_flip(side, row, col, dr, dc)
            for r, c in run:
                self._board[r, c] = side
            flipped.extend(run)
        return flipped

    def is_game_over(self) -> bool:
        """The game ends only when neither side has a legal move."""
        return not self.has_any_valid_move(Side.BLACK) and not self.has_any_valid_move(Side.WHITE)

    def count(self, side: Side) -> int:
        """Number of discs owned by `side`."""
        return int(np.count_nonzero(self._board == side))

    def empty_count(self) -> int:
        return int(np.count_nonzero(self._board == self.EMPTY))

    def evaluate(self, side: Side) -> int:
        """
        Static evaluation from the point of view of `side`.

        Every own disc scores +10 and every opponent disc -10. Corner discs add
        another 25 with the same sign. Higher is better for `side`.
        """
        own = self._board == side
        theirs = self._board == side.opponent()
        score = self.DISC_VALUE * (int(np.count_nonzero(own)) - int(np.count_nonzero(theirs)))
        for r, c in self.CORNERS:
            if own[r, c]:
                score += self.CORNER_BONUS
            elif theirs[r, c]:
                score -= self.CORNER_BONUS
        return score

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current disc count.

        Returns:
            Tuple of (black_count, white_count)
        """
        return self.count(Side.BLACK), self.count(Side.WHITE)

    def get_board_state(self) -> np.ndarray:
        """Return a copy of the underlying 8x8 array."""
        return self._board.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._board, other._board))

    def __str__(self) -> str:
        """Return a string representation of the board."""
        rows = []
        for i in range(self.SIZE):
            rows.append(' '.join(self._SYMBOLS[int(v)] for v in self._board[i]))
        black, white = self.get_score()
        rows.append(f"Score - Black: {black}, White: {white}")
        return "\n".join(rows)


def new_board() -> Board:
    """Board in the canonical starting configuration."""
    return Board()


def valid_moves(board: Board, side: Side) -> List[Move]:
    return board.get_valid_moves(side)


def apply_move(board: Board, side: Side, row: int, col: int) -> bool:
    return board.apply_move(side, row, col)


def is_game_over(board: Board) -> bool:
    return board.is_game_over()


def count(board: Board, side: Side) -> int:
    return board.count(side)


def evaluate(board: Board, side: Side) -> int:
    return board.evaluate(side)
