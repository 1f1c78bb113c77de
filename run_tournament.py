"""
Script for running tournaments between alpha-beta engines of different strength.
"""
import os
import sys
import argparse
import itertools
import json
from datetime import datetime
from pathlib import Path

sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from othello.arena import Arena, ELORatingSystem, RandomPlayer, SearchPlayer
from othello.config import Config, get_default_config
from othello.logger import setup_logger


def search_logger(run_logger, player_id: str):
    """on_search callback that logs each decision of `player_id` as its own series."""
    steps = itertools.count()
    return lambda result: run_logger.log_search(result, next(steps), prefix=f'{player_id}/')


def main():
    parser = argparse.ArgumentParser(description='Run a tournament between Othello engines')

    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--depths', type=int, nargs='+', default=[1, 2, 3],
                        help='Search depths to enter, one engine per depth')
    parser.add_argument('--time-limit', type=float, default=1.0,
                        help='Seconds per move for every engine')
    parser.add_argument('--rounds', type=int, default=None,
                        help='Number of rounds to play (overrides config)')
    parser.add_argument('--no-random', action='store_true',
                        help='Do not enter the random baseline player')
    parser.add_argument('--verbose', action='store_true',
                        help='Print every move of every game')

    args = parser.parse_args()

    config = Config.load(args.config) if os.path.exists(args.config) else get_default_config()
    if args.rounds is not None:
        config.tournament.rounds = args.rounds

    run_logger = setup_logger(config)
    os.makedirs(config.tournament.output_dir, exist_ok=True)

    elo_file = os.path.join(config.tournament.output_dir, config.tournament.elo_file)
    if os.path.exists(elo_file):
        print(f"Loading ELO ratings from {elo_file}")
        elo = ELORatingSystem.load_ratings(elo_file)
    else:
        print("Starting new ELO rating system")
        elo = ELORatingSystem(k=config.tournament.k_factor,
                              initial_rating=config.tournament.initial_rating)

    arena = Arena(elo_system=elo)
    if not args.no_random:
        arena.add_player(RandomPlayer("random", seed=config.seed))
    for depth in args.depths:
        player_id = f"alphabeta_d{depth}"
        arena.add_player(SearchPlayer(player_id, max_depth=depth, time_limit=args.time_limit,
                                      on_search=search_logger(run_logger, player_id)))

    if len(arena.players) < 2:
        print("Need at least 2 players to start a tournament")
        run_logger.close()
        return

    print("\nTournament Participants:")
    for i, player_id in enumerate(arena.players.keys(), 1):
        print(f"{i}. {player_id}")

    print(f"\nStarting tournament with {config.tournament.rounds} rounds...")
    results = arena.run_tournament(rounds=config.tournament.rounds, verbose=args.verbose)
    for step, entry in enumerate(results['leaderboard']):
        run_logger.log_metrics({'player': entry['player_id'], 'rating': entry['rating']},
                               step, prefix='tournament/')

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    results_file = os.path.join(config.tournament.output_dir, f'tournament_{timestamp}.json')
    with open(results_file, 'w') as f:
        json.dump({
            'timestamp': timestamp,
            'rounds': config.tournament.rounds,
            'participants': list(arena.players.keys()),
            'matchups': results['matchups'],
            'leaderboard': [{'player': p['player_id'], 'rating': p['rating']}
                            for p in results['leaderboard']]
        }, f, indent=2)

    arena.elo.save_ratings(elo_file)

    print(f"\nTournament completed! Results saved to {results_file}")
    print("\nFinal Leaderboard:")
    arena.print_leaderboard()
    run_logger.close()


if __name__ == '__main__':
    main()
