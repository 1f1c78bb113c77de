"""
Play Othello against the alpha-beta engine in the terminal.
"""
import os
import sys
from pathlib import Path

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from othello.config import Config, get_default_config
from othello.game import ReversiGame, Side, coord_to_str, parse_coord
from othello.logger import setup_logger
from othello.search import AlphaBetaSearch


def render(game: ReversiGame) -> str:
    """Board with A-H column labels and 1-8 row labels."""
    symbols = {None: '.', Side.BLACK: 'B', Side.WHITE: 'W'}
    lines = ["   " + " ".join(chr(ord('A') + c) for c in range(8))]
    for r in range(8):
        cells = " ".join(symbols[game.board.get_cell(r, c)] for c in range(8))
        lines.append(f"{r + 1:>2} {cells}")
    black, white = game.get_score()
    lines.append(f"Black: {black}  White: {white}")
    return "\n".join(lines)


def human_turn(game: ReversiGame) -> None:
    """Prompt until the human enters a legal move."""
    moves = game.get_valid_moves()
    print("Legal moves:", ", ".join(coord_to_str(m) for m in moves))
    while True:
        text = input(f"{game.current_player.name.capitalize()} to move (e.g. D3, q to quit): ")
        if text.strip().lower() in {"q", "quit", "exit"}:
            raise KeyboardInterrupt
        coord = parse_coord(text)
        if coord is None:
            print("Invalid input. Please use format like D3.")
            continue
        if game.make_move(*coord):
            print(f"You placed at {coord_to_str(coord)}")
            return
        print("Invalid move. Try again.")


def play(game: ReversiGame, human: Side, engine: AlphaBetaSearch, run_logger) -> bool:
    """
    Alternate human and engine turns until the game ends.

    Returns:
        True if the game was played to the end, False if the human quit
    """
    ply = 0
    engine.on_depth = lambda result: run_logger.log_depth(result, ply)
    try:
        while not game.is_game_over():
            print("\nCurrent board:")
            print(render(game))

            if not game.get_valid_moves():
                print(f"No valid moves for {game.current_player.name.capitalize()}. Passing turn.")
                game.pass_turn()
                continue

            if game.current_player == human:
                human_turn(game)
            else:
                print("Engine is thinking...")
                result = engine.search(game.board, game.current_player)
                run_logger.log_search(result, ply)
                game.make_move(*result.move)
                print(f"Engine placed at {coord_to_str(result.move)}")
            ply += 1
    except (KeyboardInterrupt, EOFError):
        print("\nGame aborted.")
        return False
    return True


def main():
    """Run a human vs engine game with the specified configuration."""
    import argparse

    parser = argparse.ArgumentParser(description='Play Othello against the alpha-beta engine')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--side', type=str, default=None, choices=['black', 'white'],
                        help='Side the human plays (overrides config)')
    parser.add_argument('--time-limit', type=float, default=None,
                        help='Engine thinking time per move in seconds (overrides config)')
    parser.add_argument('--max-depth', type=int, default=None,
                        help='Maximum search depth (overrides config)')
    args = parser.parse_args()

    if os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        config = get_default_config()
    if args.side is not None:
        config.game.human_side = args.side
    if args.time_limit is not None:
        config.search.time_limit = args.time_limit
    if args.max_depth is not None:
        config.search.max_depth = args.max_depth

    human = config.game.get_human_side()
    run_logger = setup_logger(config)
    engine = AlphaBetaSearch(config.search.to_budget())

    game = ReversiGame()
    try:
        if not play(game, human, engine, run_logger):
            return
    finally:
        run_logger.close()

    print("\nGame over!")
    print(render(game))
    winner = game.get_winner()
    if winner is None:
        print("It's a tie!")
    elif winner == human:
        print("You win!")
    else:
        print("Engine wins!")


if __name__ == "__main__":
    main()
