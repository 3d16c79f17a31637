"""
Launcher for TicTacToe with time travel.

Run this script to play in a Tkinter window:
    python main.py [--reversed] [--log-level DEBUG]
"""

import argparse
import logging

from tictactoe import GameConfig, GameState


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def parse_args(argv=None):
    """Parse command line options."""
    parser = argparse.ArgumentParser(description="TicTacToe with time travel")
    parser.add_argument(
        "--reversed",
        action="store_true",
        help="List the move history newest first"
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=logging.getLevelName(GameConfig.LOG_LEVEL),
        help="Logging level (default: %(default)s)"
    )
    return parser.parse_args(argv)


def build_game(args) -> GameState:
    """Create the game the window will show."""
    game_state = GameState.create()
    if args.reversed:
        game_state.toggle_order()
    return game_state


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format=GameConfig.LOG_FORMAT)

    from tictactoe.ui import TicTacToeUI
    ui = TicTacToeUI(game_state=build_game(args))
    try:
        ui.run()
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Interrupted by user")


if __name__ == "__main__":
    main()
