"""
Infinite Wordle - Main Entry Point

Plays archived daily puzzles back to back in the terminal, or serves the same
rounds over the HTTP API with ``serve``.
"""

import argparse
import sys
from infinite_wordle import __version__, create_app
from infinite_wordle.config import Config, validate_word_list_integrity, word_predicate_for
from infinite_wordle.models.errors import PuzzleFetchError
from infinite_wordle.services.puzzle_service import NytPuzzleSource
from infinite_wordle.services.round_service import initialize_round_service
from infinite_wordle.terminal import play_session
from infinite_wordle.utils.game_logger import game_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='infinite-wordle', description="Infinite wordle, in your terminal")
    parser.add_argument('command', nargs='?', choices=['play', 'serve'], default='play',
                        help="play in the terminal (default) or serve the HTTP API")
    parser.add_argument('-g', '--guesses', type=int, default=Config.MAX_ATTEMPTS,
                        help="maximum attempts before failing")
    parser.add_argument('-d', '--debug', action='store_true',
                        help="add debug output. CHEAT")
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    return parser


def serve(max_attempts: int, debug: bool) -> None:
    """Initialize services and start the HTTP server."""
    validate_word_list_integrity()
    initialize_round_service(NytPuzzleSource(), max_attempts, word_predicate_for)
    print("✓ Round service initialized successfully")

    app = create_app(Config)
    game_logger.logger.info("Infinite Wordle Server Starting")

    print(f"\nStarting Infinite Wordle Server on {Config.HOST}:{Config.PORT}")
    print(f"Debug mode: {debug or Config.DEBUG}")
    print("=" * 50)

    app.run(host=Config.HOST, port=Config.PORT, debug=debug or Config.DEBUG)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.guesses < 1:
        print("--guesses must be at least 1", file=sys.stderr)
        return 2

    try:
        if args.command == 'serve':
            serve(args.guesses, args.debug)
        else:
            play_session(NytPuzzleSource(), args.guesses, debug=args.debug)
    except (KeyboardInterrupt, EOFError):
        print()
        game_logger.logger.info("Infinite Wordle shutting down")
    except PuzzleFetchError as e:
        game_logger.log_error(None, e, 'fetch_puzzle')
        print(f"Error getting a puzzle: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
