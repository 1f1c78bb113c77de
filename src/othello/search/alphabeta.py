"""
Minimax search with alpha-beta pruning, driven by iterative deepening
under a wall-clock budget.
"""
import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from ..game.board import Board, Move, Side

logger = logging.getLogger(__name__)

INF = 1000000


@dataclass(frozen=True)
class SearchBudget:
    """How deep and how long a single search may run."""
    max_depth: int
    time_limit: float  # seconds

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")
        if self.time_limit < 0:
            raise ValueError(f"time_limit must not be negative, got {self.time_limit}")


@dataclass
class SearchResult:
    """Outcome of one iterative-deepening search."""
    move: Optional[Move] = None
    score: int = -INF
    depth: int = 0  # deepest pass that scanned every root move
    nodes: int = 0
    elapsed: float = 0.0


class AlphaBetaSearch:
    """
    Depth- and time-bounded adversarial search.

    The clock is injectable so tests can drive the deadline deterministically.
    The caller's board is never mutated; every explored node works on its own copy.
    """

    def __init__(self, budget: SearchBudget, clock: Callable[[], float] = time.monotonic,
                 on_depth: Optional[Callable[[SearchResult], None]] = None):
        """
        Initialize the search.

        Args:
            budget: Maximum depth and time limit per search
            clock: Monotonic time source in seconds
            on_depth: Called with a snapshot of the result after each completed depth
        """
        self.budget = budget
        self.clock = clock
        self.on_depth = on_depth
        self.nodes = 0

    def minimax(self, board: Board, depth: int, alpha: int, beta: int,
                maximizing: bool, root_side: Side, deadline: float) -> int:
        """
        Alpha-beta minimax value of `board`.

        Args:
            board: Position to evaluate (not modified)
            depth: Remaining plies
            alpha: Lower bound the maximizer is already assured of
            beta: Upper bound the minimizer is already assured of
            maximizing: True when `root_side` is to move at this layer
            root_side: Side whose perspective every evaluation is taken from
            deadline: Clock value at which the search stops expanding

        Returns:
            The backed-up evaluation, always from `root_side`'s point of view
        """
        self.nodes += 1
        if depth == 0 or board.is_game_over() or self.clock() >= deadline:
            return board.evaluate(root_side)

        to_move = root_side if maximizing else root_side.opponent()
        moves = board.get_valid_moves(to_move)
        if not moves:
            # Forced pass: same board, same depth, other layer
            return self.minimax(board, depth, alpha, beta, not maximizing, root_side, deadline)

        if maximizing:
            best = -INF
            for row, col in moves:
                child = board.copy()
                child.apply_move(to_move, row, col)
                value = self.minimax(child, depth - 1, alpha, beta, False, root_side, deadline)
                best = max(best, value)
                alpha = max(alpha, value)
                if beta <= alpha:
                    break
            return best

        best = INF
        for row, col in moves:
            child = board.copy()
            child.apply_move(to_move, row, col)
            value = self.minimax(child, depth - 1, alpha, beta, True, root_side, deadline)
            best = min(best, value)
            beta = min(beta, value)
            if beta <= alpha:
                break
        return best

    def search(self, board: Board, side: Side) -> SearchResult:
        """
        Run iterative deepening from depth 1 up to the budget's max depth.

        The best move only changes on a strictly higher score, so among equal
        scores the first move found (row-major, shallowest depth) is kept.
        A pass cut short by the deadline can still improve the incumbent but
        never discards it.

        Returns:
            SearchResult whose move is None only when `side` has no legal move
        """
        result = SearchResult()
        moves = board.get_valid_moves(side)
        if not moves:
            logger.debug(f"{side.name} has no legal move")
            return result

        self.nodes = 0
        start = self.clock()
        deadline = start + self.budget.time_limit

        for depth in range(1, self.budget.max_depth + 1):
            scanned = 0
            for row, col in moves:
                child = board.copy()
                child.apply_move(side, row, col)
                score = self.minimax(child, depth - 1, -INF, INF, False, side, deadline)
                if score > result.score:
                    result.score = score
                    result.move = (row, col)
                scanned += 1
                if self.clock() >= deadline:
                    break

            if scanned == len(moves):
                result.depth = depth
                result.nodes = self.nodes
                result.elapsed = self.clock() - start
                logger.debug(f"depth {depth}: move={result.move} score={result.score} "
                             f"nodes={self.nodes} elapsed={result.elapsed:.3f}s")
                if self.on_depth is not None:
                    self.on_depth(SearchResult(**vars(result)))

            if self.clock() >= deadline:
                break

        result.nodes = self.nodes
        result.elapsed = self.clock() - start
        logger.info(f"{side.name} chooses {result.move} (score {result.score}, "
                    f"depth {result.depth}, {result.nodes} nodes, {result.elapsed:.2f}s)")
        return result

    def get_best_move(self, board: Board, side: Side) -> Optional[Move]:
        """Best move for `side`, or None if it has no legal move."""
        return self.search(board, side).move


def get_best_move(board: Board, side: Side, time_limit: float, max_depth: int,
                  clock: Callable[[], float] = time.monotonic) -> Optional[Move]:
    """
    Choose a move for `side` within `time_limit` seconds, searching at most `max_depth` plies.

    Returns:
        (row, col) of the chosen move, or None if `side` has no legal move
    """
    search = AlphaBetaSearch(SearchBudget(max_depth=max_depth, time_limit=time_limit), clock=clock)
    return search.get_best_move(board, side)
