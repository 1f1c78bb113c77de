"""
Othello game module.
Handles turn order, forced passes and the move record on top of the Board.
"""
from typing import List, Tuple, Optional, Dict, Any

from .board import Board, Move, Side


class ReversiGame:
    """
    Game state for one match: the board, the side to move and the history.
    """

    def __init__(self):
        """Initialize a new game with Black to move."""
        self.board = Board()
        self.current_player = Side.BLACK
        self.move_history: List[Dict[str, Any]] = []

    def reset(self) -> None:
        """Reset the game to its initial state."""
        self.board = Board()
        self.current_player = Side.BLACK
        self.move_history = []

    def make_move(self, row: int, col: int) -> bool:
        """
        Play a disc for the side to move.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Returns:
            bool: True if the move was legal and made, False otherwise
        """
        flipped = self.board.apply_move_with_flips(self.current_player, row, col)
        if flipped is None:
            return False

        self.move_history.append({
            'player': self.current_player,
            'move': (row, col),
            'flipped': flipped,
        })
        self.current_player = self.current_player.opponent()
        return True

    def pass_turn(self) -> bool:
        """
        Skip the turn of the side to move.

        Only allowed when that side has no legal move. The board is not touched.

        Returns:
            bool: True if the pass was taken, False if the side still has a move
        """
        if self.board.has_any_valid_move(self.current_player):
            return False

        self.move_history.append({
            'player': self.current_player,
            'move': None,
            'flipped': [],
        })
        self.current_player = self.current_player.opponent()
        return True

    def get_valid_moves(self) -> List[Move]:
        """Legal moves for the side to move, in row-major order."""
        return self.board.get_valid_moves(self.current_player)

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self.board.is_game_over()

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).
        """
        return self.board.get_score()

    def get_winner(self) -> Optional[Side]:
        """
        Get the winner of the game.

        Returns:
            The side with more discs, or None for a draw or an unfinished game
        """
        if not self.is_game_over():
            return None
        black, white = self.get_score()
        if black > white:
            return Side.BLACK
        if white > black:
            return Side.WHITE
        return None

    def get_current_player(self) -> Side:
        return self.current_player

    def get_move_history(self) -> List[Dict[str, Any]]:
        return self.move_history.copy()

    def copy(self) -> 'ReversiGame':
        """Create a deep copy of the game."""
        new_game = ReversiGame()
        new_game.board = self.board.copy()
        new_game.current_player = self.current_player
        new_game.move_history = self.move_history.copy()
        return new_game

    def __str__(self) -> str:
        """String representation of the game state."""
        result = str(self.board)
        if self.is_game_over():
            winner = self.get_winner()
            if winner is None:
                result += "\nGame over! It's a draw!"
            else:
                result += f"\nGame over! {winner.name.capitalize()} wins!"
        else:
            result += f"\nCurrent player: {self.current_player.name.capitalize()}"
        return result
