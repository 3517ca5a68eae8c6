"""
Gurdle - Main Entry Point

Starts one game and serves it, either over HTTP/WebSocket (default) or in
the terminal with --console. An optional first argument chooses the secret
word of the first game.
"""

import argparse
import sys

from gurdle import create_app
from gurdle.config import Config, WORD_SIZE
from gurdle.console import run_console
from gurdle.models.game import InvalidSecretError
from gurdle.services.game_model import GameModel
from gurdle.services.word_source import WordList
from gurdle.utils.game_logger import game_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='gurdle', description='Play a Wordle-style word game.')
    parser.add_argument(
        'secret', nargs='?', default=None,
        help=f'secret word for the first game ({WORD_SIZE} letters)'
    )
    parser.add_argument(
        '--console', action='store_true',
        help='play in the terminal instead of starting the server'
    )
    return parser


def initialize_model(secret=None, word_list_path=None) -> GameModel:
    """
    Build the game model and start the first game.

    Raises:
        InvalidSecretError: If ``secret`` is not WORD_SIZE letters long
    """
    model = GameModel(WordList.from_file(word_list_path))
    model.new_game(secret)
    return model


def main(argv=None) -> int:
    """Main function to initialize the game and start the chosen front end."""
    args = build_parser().parse_args(argv)

    try:
        model = initialize_model(args.secret, Config.WORD_LIST_PATH)
    except InvalidSecretError as e:
        game_logger.logger.error(f"Startup failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.console:
        game_logger.logger.info("Gurdle console starting")
        run_console(model)
        return 0

    try:
        app, socketio = create_app(Config, model=model)

        game_logger.logger.info("Gurdle server starting")
        print(f"Starting Gurdle server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Gurdle server shutting down (KeyboardInterrupt)")
    except Exception as e:
        game_logger.logger.error(f"Error starting server: {e}")
        raise

    return 0


if __name__ == '__main__':
    sys.exit(main())
