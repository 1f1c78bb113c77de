"""
Arena for matches and tournaments between Othello players, with ELO rating.
"""
import json
import logging
import random
import time
from typing import Callable, Dict, List, Optional

from tqdm import tqdm

from ..game import Move, ReversiGame, Side
from ..search import AlphaBetaSearch, SearchBudget, SearchResult

logger = logging.getLogger(__name__)


class ELORatingSystem:
    """ELO ratings of the arena players, updated after every game."""

    def __init__(self, k: float = 32, initial_rating: float = 1500.0):
        self.k = k
        self.initial_rating = initial_rating
        self.ratings: Dict[str, float] = {}
        self.games_played: Dict[str, int] = {}
        self.history: List[Dict] = []

    def add_player(self, player_id: str):
        self.ratings.setdefault(player_id, self.initial_rating)
        self.games_played.setdefault(player_id, 0)

    def expected_score(self, player_id: str, opponent_id: str) -> float:
        """Expected score of `player_id` against `opponent_id`."""
        gap = self.ratings[opponent_id] - self.ratings[player_id]
        return 1.0 / (1.0 + 10.0 ** (gap / 400.0))

    def record_game(self, black_id: str, white_id: str, black_score: float) -> float:
        """
        Apply the result of one game.

        Args:
            black_id: Player that had Black
            white_id: Player that had White
            black_score: 1.0 Black win, 0.5 draw, 0.0 White win

        Returns:
            Rating points Black gained (White lost the same amount)
        """
        self.add_player(black_id)
        self.add_player(white_id)

        delta = self.k * (black_score - self.expected_score(black_id, white_id))
        self.ratings[black_id] += delta
        self.ratings[white_id] -= delta
        self.games_played[black_id] += 1
        self.games_played[white_id] += 1

        self.history.append({
            'black': black_id,
            'white': white_id,
            'black_score': black_score,
            'delta': delta,
        })
        return delta

    def get_leaderboard(self) -> List[Dict]:
        """Players sorted by rating, best first."""
        leaderboard = [
            {'player_id': player_id, 'rating': rating, 'games_played': self.games_played[player_id]}
            for player_id, rating in self.ratings.items()
        ]
        leaderboard.sort(key=lambda x: x['rating'], reverse=True)
        return leaderboard

    def save_ratings(self, filepath: str):
        with open(filepath, 'w') as f:
            json.dump({
                'k': self.k,
                'initial_rating': self.initial_rating,
                'ratings': self.ratings,
                'games_played': self.games_played,
                'history': self.history,
            }, f, indent=2)

    @classmethod
    def load_ratings(cls, filepath: str) -> 'ELORatingSystem':
        with open(filepath, 'r') as f:
            data = json.load(f)

        elo = cls(k=data['k'], initial_rating=data['initial_rating'])
        elo.ratings = {k: float(v) for k, v in data['ratings'].items()}
        elo.games_played = {k: int(v) for k, v in data['games_played'].items()}
        elo.history = data.get('history', [])
        return elo


class Player:
    """Something that picks moves for the side to move in a game."""

    def __init__(self, player_id: str):
        self.player_id = player_id

    def get_move(self, game: ReversiGame) -> Optional[Move]:
        """Return a legal move for the side to move, or None to pass."""
        raise NotImplementedError

    def reset(self):
        """Reset any per-game state."""


class RandomPlayer(Player):
    """Plays a uniformly random legal move."""

    def __init__(self, player_id: str = "random", seed: Optional[int] = None):
        super().__init__(player_id)
        self.seed = seed
        self.rng = random.Random(seed)

    def get_move(self, game: ReversiGame) -> Optional[Move]:
        valid_moves = game.get_valid_moves()
        return self.rng.choice(valid_moves) if valid_moves else None

    def reset(self):
        self.rng = random.Random(self.seed)


class SearchPlayer(Player):
    """Plays the move chosen by the alpha-beta search."""

    def __init__(self, player_id: str, max_depth: int, time_limit: float,
                 on_search: Optional[Callable[[SearchResult], None]] = None):
        """
        Initialize a search player.

        Args:
            player_id: Unique identifier for the player
            max_depth: Maximum iterative-deepening depth
            time_limit: Seconds per move
            on_search: Called with the SearchResult of every decision
        """
        super().__init__(player_id)
        self.search = AlphaBetaSearch(SearchBudget(max_depth=max_depth, time_limit=time_limit))
        self.on_search = on_search

    def get_move(self, game: ReversiGame) -> Optional[Move]:
        result = self.search.search(game.board, game.current_player)
        if self.on_search is not None:
            self.on_search(result)
        return result.move


class Arena:
    """Arena for running matches and tournaments between players."""

    def __init__(self, elo_system: Optional[ELORatingSystem] = None):
        """
        Initialize the arena.

        Args:
            elo_system: Optional ELO rating system to use
        """
        self.elo = elo_system if elo_system is not None else ELORatingSystem()
        self.players: Dict[str, Player] = {}

    def add_player(self, player: Player):
        """Add a player to the arena."""
        self.players[player.player_id] = player
        self.elo.add_player(player.player_id)

    def play_game(self, black_id: str, white_id: str, verbose: bool = False) -> float:
        """
        Play a single game.

        Args:
            black_id: ID of the player taking Black (moves first)
            white_id: ID of the player taking White
            verbose: Whether to print the board after every move

        Returns:
            1.0 if Black wins, 0.5 for a draw, 0.0 if White wins
        """
        if black_id not in self.players or white_id not in self.players:
            raise ValueError(f"One or both players not found: {black_id}, {white_id}")

        seats = {Side.BLACK: self.players[black_id], Side.WHITE: self.players[white_id]}
        for player in seats.values():
            player.reset()

        game = ReversiGame()
        if verbose:
            print(f"Starting game: {black_id} (Black) vs {white_id} (White)")
            print(game)

        while not game.is_game_over():
            current = seats[game.current_player]
            move = current.get_move(game)

            if move is None:
                if not game.pass_turn():
                    raise RuntimeError(f"{current.player_id} passed with legal moves available")
                logger.debug(f"{current.player_id} passes")
                continue

            if not game.make_move(*move):
                raise RuntimeError(f"{current.player_id} played illegal move {move}")
            if verbose:
                print(f"{current.player_id} plays at {move}")
                print(game)

        black_count, white_count = game.get_score()
        logger.info(f"{black_id} (Black) {black_count} - {white_count} {white_id} (White)")

        if black_count > white_count:
            return 1.0
        if white_count > black_count:
            return 0.0
        return 0.5

    def run_tournament(self, rounds: int = 1, verbose: bool = False) -> Dict:
        """
        Run a round-robin tournament between all players.

        Each pair meets once per round; colours alternate between rounds.

        Args:
            rounds: Number of rounds to play
            verbose: Whether to print game progress

        Returns:
            Dictionary with per-matchup results and the final leaderboard
        """
        player_ids = list(self.players.keys())
        if len(player_ids) < 2:
            raise ValueError("Need at least 2 players for a tournament")

        pairs = [(player_ids[i], player_ids[j])
                 for i in range(len(player_ids))
                 for j in range(i + 1, len(player_ids))]

        results = {
            'games_played': 0,
            'matchups': {
                f"{p1}_vs_{p2}": {'player1': p1, 'player2': p2, 'wins1': 0, 'wins2': 0, 'draws': 0}
                for p1, p2 in pairs
            },
            'start_time': time.time(),
        }

        with tqdm(total=rounds * len(pairs), desc="Tournament", disable=verbose) as progress:
            for round_num in range(rounds):
                for p1, p2 in pairs:
                    black, white = (p1, p2) if round_num % 2 == 0 else (p2, p1)
                    score = self.play_game(black, white, verbose=verbose)
                    self.elo.record_game(black, white, score)

                    matchup = results['matchups'][f"{p1}_vs_{p2}"]
                    score_p1 = score if black == p1 else 1.0 - score
                    if score_p1 == 1.0:
                        matchup['wins1'] += 1
                    elif score_p1 == 0.0:
                        matchup['wins2'] += 1
                    else:
                        matchup['draws'] += 1
                    results['games_played'] += 1
                    progress.update(1)

        results['end_time'] = time.time()
        results['duration'] = results['end_time'] - results['start_time']
        results['leaderboard'] = self.elo.get_leaderboard()
        return results

    def print_leaderboard(self):
        """Print the current leaderboard."""
        leaderboard = self.elo.get_leaderboard()
        print("\nCurrent Leaderboard:")
        print("Rank  Player ID               Rating  Games Played")
        print("----  ---------------------  -------  ------------")

        for i, player in enumerate(leaderboard, 1):
            print(f"{i:4d}  {player['player_id']:22s}  {player['rating']:7.1f}  {player['games_played']:12d}")
