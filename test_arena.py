"""
Tests for the arena, players and ELO ratings.
"""
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from othello.arena import Arena, ELORatingSystem, RandomPlayer, SearchPlayer
from othello.game import Board, ReversiGame, Side


def test_elo_update_is_zero_sum():
    elo = ELORatingSystem(k=32, initial_rating=1500.0)
    delta = elo.record_game("a", "b", 1.0)

    assert delta == pytest.approx(16.0)
    assert elo.ratings["a"] == pytest.approx(1516.0)
    assert elo.ratings["b"] == pytest.approx(1484.0)
    assert elo.history[-1] == {'black': "a", 'white': "b", 'black_score': 1.0, 'delta': delta}
    assert [p['player_id'] for p in elo.get_leaderboard()] == ["a", "b"]


def test_elo_expected_score_favours_higher_rating():
    elo = ELORatingSystem()
    elo.ratings = {"strong": 1900.0, "weak": 1500.0}
    assert elo.expected_score("strong", "weak") == pytest.approx(10 / 11)
    assert elo.expected_score("weak", "strong") == pytest.approx(1 / 11)


def test_elo_draw_between_equals_keeps_ratings():
    elo = ELORatingSystem()
    assert elo.record_game("a", "b", 0.5) == pytest.approx(0.0)
    assert elo.ratings["a"] == pytest.approx(1500.0)
    assert elo.games_played == {"a": 1, "b": 1}


def test_elo_save_and_load(tmp_path):
    elo = ELORatingSystem(k=16)
    elo.record_game("a", "b", 0.0)
    path = tmp_path / "elo.json"
    elo.save_ratings(str(path))

    loaded = ELORatingSystem.load_ratings(str(path))
    assert loaded.k == 16
    assert loaded.ratings == pytest.approx(elo.ratings)
    assert loaded.games_played == elo.games_played
    assert loaded.history == elo.history


def test_random_player_passes_only_without_moves():
    player = RandomPlayer(seed=1)
    game = ReversiGame()
    assert player.get_move(game) in game.get_valid_moves()

    game.board = Board.from_rows(["WB......"] + ["........"] * 7)
    assert player.get_move(game) is None


def test_search_player_reports_results():
    results = []
    player = SearchPlayer("ab", max_depth=2, time_limit=10.0, on_search=results.append)
    move = player.get_move(ReversiGame())

    assert move == (2, 3)
    assert results[0].move == move
    assert results[0].depth == 2


def test_play_game_runs_to_completion():
    arena = Arena()
    arena.add_player(RandomPlayer("random", seed=7))
    arena.add_player(SearchPlayer("ab", max_depth=1, time_limit=10.0))

    score = arena.play_game("ab", "random")
    assert score in (0.0, 0.5, 1.0)


def test_play_game_unknown_player():
    arena = Arena()
    arena.add_player(RandomPlayer("random"))
    with pytest.raises(ValueError):
        arena.play_game("random", "nobody")


def test_tournament_alternates_colours():
    arena = Arena()
    arena.add_player(RandomPlayer("r1", seed=1))
    arena.add_player(RandomPlayer("r2", seed=2))

    results = arena.run_tournament(rounds=2)
    matchup = results['matchups']["r1_vs_r2"]

    assert results['games_played'] == 2
    assert matchup['wins1'] + matchup['wins2'] + matchup['draws'] == 2
    assert [p['games_played'] for p in results['leaderboard']] == [2, 2]
    history = arena.elo.history
    assert (history[0]['black'], history[1]['black']) == ("r1", "r2")


def test_tournament_needs_two_players():
    arena = Arena()
    arena.add_player(RandomPlayer("solo"))
    with pytest.raises(ValueError):
        arena.run_tournament(rounds=1)
