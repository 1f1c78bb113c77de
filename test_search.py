"""
Tests for the alpha-beta search and iterative deepening driver.
"""
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from othello.game import Board, Side, apply_move, new_board, valid_moves
from othello.search import INF, AlphaBetaSearch, SearchBudget, get_best_move


class FakeClock:
    """Clock that advances by `step` seconds every time it is read."""

    def __init__(self, step: float = 0.0):
        self.now = 0.0
        self.step = step
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        value = self.now
        self.now += self.step
        return value


def plain_minimax(board, depth, maximizing, root_side):
    """Unpruned reference minimax with the same cutoff and pass rules."""
    if depth == 0 or board.is_game_over():
        return board.evaluate(root_side)
    to_move = root_side if maximizing else root_side.opponent()
    moves = valid_moves(board, to_move)
    if not moves:
        return plain_minimax(board, depth, not maximizing, root_side)
    values = []
    for row, col in moves:
        child = board.copy()
        apply_move(child, to_move, row, col)
        values.append(plain_minimax(child, depth - 1, not maximizing, root_side))
    return max(values) if maximizing else min(values)


def plain_best_move(board, side, max_depth):
    best_move, best_score = None, -INF
    for depth in range(1, max_depth + 1):
        for row, col in valid_moves(board, side):
            child = board.copy()
            apply_move(child, side, row, col)
            score = plain_minimax(child, depth - 1, False, side)
            if score > best_score:
                best_move, best_score = (row, col), score
    return best_move, best_score


def midgame_positions():
    """A few positions reached by fixed openings."""
    lines = [
        [],
        [(2, 3), (2, 2)],
        [(2, 3), (2, 4), (3, 5), (4, 2), (5, 3)],
        [(4, 5), (5, 3), (4, 2), (3, 5), (2, 4), (5, 5)],
    ]
    for line in lines:
        board = new_board()
        side = Side.BLACK
        for row, col in line:
            assert apply_move(board, side, row, col)
            side = side.opponent()
        yield board, side


def test_budget_validation():
    with pytest.raises(ValueError):
        SearchBudget(max_depth=0, time_limit=1.0)
    with pytest.raises(ValueError):
        SearchBudget(max_depth=3, time_limit=-0.5)


def test_no_legal_move_returns_none():
    board = Board.from_rows(["WB......"] + ["........"] * 7)
    assert get_best_move(board, Side.BLACK, time_limit=1.0, max_depth=3) is None
    assert get_best_move(board, Side.WHITE, time_limit=1.0, max_depth=3) == (0, 2)


def test_zero_time_limit_returns_first_evaluated_move():
    assert get_best_move(new_board(), Side.BLACK, time_limit=0, max_depth=8) == (2, 3)

    clock = FakeClock(step=0.0)
    search = AlphaBetaSearch(SearchBudget(max_depth=8, time_limit=0), clock=clock)
    result = search.search(new_board(), Side.BLACK)
    assert result.move == (2, 3)
    assert result.depth == 0
    assert clock.calls < 10


def test_deadline_stops_deepening():
    clock = FakeClock(step=1.0)
    search = AlphaBetaSearch(SearchBudget(max_depth=60, time_limit=50), clock=clock)
    result = search.search(new_board(), Side.BLACK)

    assert result.move in valid_moves(new_board(), Side.BLACK)
    assert 1 <= result.depth < 60
    assert result.elapsed >= 50


def test_completes_all_depths_with_ample_time():
    completed = []
    search = AlphaBetaSearch(SearchBudget(max_depth=3, time_limit=600),
                             clock=FakeClock(step=0.0), on_depth=completed.append)
    result = search.search(new_board(), Side.BLACK)

    assert [r.depth for r in completed] == [1, 2, 3]
    assert result.depth == 3
    assert result.nodes > 0


def test_equal_scores_keep_first_move():
    # All four opening moves are symmetric, so the first in row-major order wins
    search = AlphaBetaSearch(SearchBudget(max_depth=2, time_limit=600), clock=FakeClock())
    assert search.get_best_move(new_board(), Side.BLACK) == (2, 3)


def test_prefers_corner():
    board = Board.from_rows([
        "...BW...",
        "........",
        "........",
        "........",
        "........",
        "........",
        "........",
        ".....BW.",
    ])
    assert valid_moves(board, Side.BLACK) == [(0, 5), (7, 7)]
    assert get_best_move(board, Side.BLACK, time_limit=600, max_depth=1) == (7, 7)


def test_search_does_not_mutate_board():
    board = new_board()
    apply_move(board, Side.BLACK, 2, 3)
    before = board.copy()
    get_best_move(board, Side.WHITE, time_limit=600, max_depth=3)
    assert board == before


def test_minimax_passes_without_consuming_depth():
    board = Board.from_rows(["WB......"] + ["........"] * 7)
    search = AlphaBetaSearch(SearchBudget(max_depth=1, time_limit=600))
    # Black cannot move, White takes (0, 2) at the same depth
    value = search.minimax(board, 1, -INF, INF, True, Side.BLACK, float('inf'))
    assert value == -55


def test_minimax_cutoff_evaluates_from_root_side():
    board = new_board()
    apply_move(board, Side.BLACK, 2, 3)
    search = AlphaBetaSearch(SearchBudget(max_depth=1, time_limit=600))
    assert search.minimax(board, 0, -INF, INF, False, Side.BLACK, float('inf')) == 30
    assert search.minimax(board, 0, -INF, INF, True, Side.WHITE, float('inf')) == -30


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_pruning_matches_plain_minimax(depth):
    for board, side in midgame_positions():
        search = AlphaBetaSearch(SearchBudget(max_depth=depth, time_limit=600), clock=FakeClock())
        result = search.search(board, side)
        expected_move, expected_score = plain_best_move(board, side, depth)
        assert result.move == expected_move
        assert result.score == expected_score
