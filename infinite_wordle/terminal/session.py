"""
Terminal Session

Drives interactive rounds: one freshly fetched puzzle and one fresh round
state per iteration, until the player quits.
"""

import random
from typing import Callable, Optional

from ..config.game_settings import ENCOURAGEMENTS, word_predicate_for
from ..models.errors import PuzzleFetchError
from ..models.game import OutcomeKind, Puzzle, RoundState
from ..services.puzzle_service import PuzzleSource, random_puzzle
from ..services.round_service import advance_round, new_round
from ..utils.game_logger import game_logger
from .renderer import TerminalRenderer

ReadLine = Callable[[str], str]


def play_round(puzzle: Puzzle,
               max_attempts: int,
               read_line: ReadLine,
               renderer: TerminalRenderer,
               rng: random.Random,
               debug: bool = False) -> RoundState:
    """
    Play one puzzle to a win or a loss.

    Args:
        puzzle: The puzzle to play
        max_attempts: Attempts allowed before the solution is revealed
        read_line: Called with the prompt, returns the player's input
        renderer: Output sink
        rng: Used to pick the win message
        debug: Print the full puzzle record before the first guess

    Returns:
        The terminal RoundState
    """
    renderer.header(puzzle)
    if debug:
        renderer.debug(puzzle)

    encouragement = rng.choice(ENCOURAGEMENTS)
    is_valid_word = word_predicate_for(puzzle.solution)
    state = new_round(puzzle.solution, max_attempts)
    game_logger.log_game_event(
        None, 'round_started', 'terminal',
        puzzle_id=puzzle.identifier, print_date=puzzle.print_date, max_attempts=max_attempts
    )

    while not state.terminal:
        renderer.keyboard(state.keyboard)
        attempt = state.attempt
        state, classification, outcome = advance_round(
            state, read_line(renderer.prompt(attempt)), is_valid_word
        )

        if outcome.kind == OutcomeKind.RETRY:
            renderer.rejection(outcome.error)
            game_logger.log_game_event(None, 'guess_rejected', 'terminal', reason=str(outcome.error))
            continue

        guess = state.guesses[-1]
        game_logger.log_game_event(
            None, 'guess_accepted', 'terminal', attempt=attempt, outcome=outcome.kind.value
        )

        if outcome.kind == OutcomeKind.WON:
            renderer.win(outcome.attempts, guess, encouragement)
            game_logger.log_game_event(
                None, 'game_won', 'terminal', puzzle_id=puzzle.identifier, attempts_used=outcome.attempts
            )
            break

        renderer.guess_row(attempt, guess, classification)
        if outcome.kind == OutcomeKind.LOST:
            renderer.loss(outcome.solution)
            game_logger.log_game_event(
                None, 'game_lost', 'terminal', puzzle_id=puzzle.identifier, target_word=outcome.solution
            )

    return state


def play_session(puzzle_source: PuzzleSource,
                 max_attempts: int,
                 read_line: ReadLine = input,
                 renderer: Optional[TerminalRenderer] = None,
                 rng: Optional[random.Random] = None,
                 debug: bool = False,
                 rounds: Optional[int] = None) -> int:
    """
    Play rounds back to back, each with a random archived puzzle.

    Runs forever unless ``rounds`` is given; quitting is the caller's
    business (EOF or Ctrl-C from ``read_line``).

    Returns:
        Number of rounds completed

    Raises:
        PuzzleFetchError: If a puzzle could not be fetched for the next round
    """
    renderer = renderer or TerminalRenderer()
    rng = rng or random.Random()

    played = 0
    while rounds is None or played < rounds:
        try:
            puzzle = random_puzzle(puzzle_source, rng)
        except PuzzleFetchError as e:
            game_logger.log_game_event(None, 'puzzle_fetch_failed', 'terminal', error=str(e))
            raise

        play_round(puzzle, max_attempts, read_line, renderer, rng, debug)
        played += 1

    return played
