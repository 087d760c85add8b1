"""
Round Service

Contains the round state machine and the in-memory session store used by the
HTTP API.
"""

import random
import threading
import time
import uuid
from dataclasses import replace
from typing import Callable, Dict, Optional, Tuple

from ..config.app_config import Config
from ..models.errors import RoundOverError, ValidationError
from ..models.game import (
    Classification, GameState, OutcomeKind, Puzzle, RoundOutcome, RoundState, RoundStatus
)
from ..utils.game_logger import game_logger
from .evaluation import classify, merge_keyboard_state, new_keyboard_state
from .puzzle_service import PuzzleSource, random_puzzle_date

WordPredicate = Callable[[str], bool]


def new_round(solution: str, max_attempts: int) -> RoundState:
    """Start a round with attempt 1 and an all-UNKNOWN keyboard."""
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be positive, got {max_attempts}")
    return RoundState(
        solution=solution.lower(),
        max_attempts=max_attempts,
        keyboard=new_keyboard_state(),
    )


def normalize_guess(guess: str) -> str:
    return guess.strip().lower()


def validate_guess(guess: str, solution: str, is_valid_word: WordPredicate) -> None:
    """
    Validates a normalized guess for a round.

    Raises:
        ValidationError: If the guess has the wrong length or is not a word
    """
    if len(guess) < len(solution):
        raise ValidationError("Too short!")
    if len(guess) > len(solution):
        raise ValidationError("Too long!")
    if not is_valid_word(guess):
        raise ValidationError("Not a word!")


def advance_round(state: RoundState,
                  guess: str,
                  is_valid_word: WordPredicate) -> Tuple[RoundState, Optional[Classification], RoundOutcome]:
    """
    Submits one guess to a round.

    Invalid guesses return the unchanged state with a RETRY outcome and do
    not consume an attempt. Valid guesses are classified, merged into a new
    keyboard and counted.

    Args:
        state: Current round state
        guess: Raw player input
        is_valid_word: Dictionary membership predicate

    Returns:
        Tuple of (new state, classification or None, outcome)

    Raises:
        RoundOverError: If the round is already won or lost
    """
    if state.terminal:
        raise RoundOverError(f"Round is already over ({state.status.value})")

    normalized_guess = normalize_guess(guess)
    try:
        validate_guess(normalized_guess, state.solution, is_valid_word)
    except ValidationError as error:
        return state, None, RoundOutcome.retry(error)

    classification = classify(normalized_guess, state.solution)
    keyboard = merge_keyboard_state(state.keyboard, classification, normalized_guess)
    attempts_used = state.attempt

    if normalized_guess == state.solution:
        status = RoundStatus.WON
        outcome = RoundOutcome.won(attempts_used)
    elif attempts_used + 1 > state.max_attempts:
        status = RoundStatus.LOST
        outcome = RoundOutcome.lost(state.solution)
    else:
        status = RoundStatus.AWAITING_GUESS
        outcome = RoundOutcome.continuing()

    new_state = replace(
        state,
        keyboard=keyboard,
        attempt=attempts_used + 1,
        status=status,
        guesses=state.guesses + (normalized_guess,),
        classifications=state.classifications + (classification,),
    )
    return new_state, classification, outcome

class RoundService:
    """
    Round session manager for the HTTP API.

    This class handles:
    - Round creation from freshly fetched puzzles under unique game IDs
    - Guess submission through the round state machine
    - Client-facing state that hides the solution until the round is over
    - Eviction of finished rounds once they are older than ``finished_ttl`` seconds

    All access to ``games`` goes through one lock; the HTTP server handles
    requests on several threads.
    """

    def __init__(self,
                 puzzle_source: PuzzleSource,
                 max_attempts: int,
                 word_predicate_factory: Callable[[str], WordPredicate],
                 rng: Optional[random.Random] = None,
                 finished_ttl: float = Config.FINISHED_GAME_TTL_SECONDS,
                 clock: Callable[[], float] = time.monotonic):
        self.games: Dict[str, Dict] = {}  # Store active rounds by game_id
        self.puzzle_source = puzzle_source
        self.max_attempts = max_attempts
        self.word_predicate_factory = word_predicate_factory
        self.rng = rng or random.Random()
        self.finished_ttl = finished_ttl
        self.clock = clock
        self._lock = threading.RLock()

    def create_new_game(self, max_attempts: Optional[int] = None) -> str:
        """
        Creates a new round from a random archived puzzle.

        Raises:
            PuzzleFetchError: If no puzzle could be fetched
        """
        with self._lock:
            puzzle_date = random_puzzle_date(self.rng)
        # Network call happens outside the lock
        puzzle = self.puzzle_source.fetch(puzzle_date)
        game_id = str(uuid.uuid4())
        round_state = new_round(puzzle.solution, max_attempts or self.max_attempts)

        with self._lock:
            self.evict_finished_games()
            self.games[game_id] = {
                "puzzle": puzzle,
                "round": round_state,
                "is_valid_word": self.word_predicate_factory(puzzle.solution),
                "last_outcome": None,
                "finished_at": None,
            }

        game_logger.log_game_event(
            game_id, 'round_started', 'api',
            puzzle_id=puzzle.identifier, max_attempts=round_state.max_attempts
        )
        return game_id

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """Returns the client-facing state, or None if the game is unknown."""
        with self._lock:
            if game_id not in self.games:
                return None

            game = self.games[game_id]
            round_state: RoundState = game["round"]
            puzzle: Puzzle = game["puzzle"]
            outcome: Optional[RoundOutcome] = game["last_outcome"]

        return GameState(
            game_id=game_id,
            puzzle_id=puzzle.identifier,
            label=puzzle.label,
            attempt=round_state.attempt,
            max_attempts=round_state.max_attempts,
            status=round_state.status.value,
            game_over=round_state.terminal,
            won=round_state.won,
            guesses=list(round_state.guesses),
            guess_results=[
                [(letter, state.value) for letter, state in zip(guess, classification)]
                for guess, classification in zip(round_state.guesses, round_state.classifications)
            ],
            letter_status={letter: state.value for letter, state in round_state.keyboard.items()},
            answer=round_state.solution if round_state.terminal else None,
            outcome=_outcome_payload(outcome),
        )

    def make_guess(self, game_id: str, guess: str) -> Optional[GameState]:
        """
        Processes a guess and updates the round.

        Returns:
            Updated GameState or None if the game is unknown

        Raises:
            ValidationError: If the guess was rejected
            RoundOverError: If the round has already finished
        """
        with self._lock:
            if game_id not in self.games:
                return None

            game = self.games[game_id]
            round_state, _, outcome = advance_round(game["round"], guess, game["is_valid_word"])

            if outcome.kind != OutcomeKind.RETRY:
                game["round"] = round_state
                game["last_outcome"] = outcome
                if round_state.terminal:
                    game["finished_at"] = self.clock()
                state = self.get_game_state(game_id)

        if outcome.kind == OutcomeKind.RETRY:
            game_logger.log_game_event(game_id, 'guess_rejected', 'api', reason=str(outcome.error))
            raise outcome.error

        game_logger.log_game_event(
            game_id, 'guess_accepted', 'api',
            attempt=round_state.attempt - 1, outcome=outcome.kind.value
        )
        return state

    def delete_game(self, game_id: str) -> bool:
        """Removes a round from memory. Returns False if it was not found."""
        with self._lock:
            if game_id in self.games:
                del self.games[game_id]
                return True
            return False

    def evict_finished_games(self) -> int:
        """Drops rounds that finished more than ``finished_ttl`` seconds ago."""
        with self._lock:
            cutoff = self.clock() - self.finished_ttl
            expired = [
                game_id for game_id, game in self.games.items()
                if game["finished_at"] is not None and game["finished_at"] <= cutoff
            ]
            for game_id in expired:
                del self.games[game_id]

        if expired:
            game_logger.log_game_event(None, 'games_evicted', 'api', count=len(expired))
        return len(expired)

    def active_game_count(self) -> int:
        with self._lock:
            return len(self.games)


def _outcome_payload(outcome: Optional[RoundOutcome]) -> Dict[str, object]:
    if outcome is None:
        return {}
    payload: Dict[str, object] = {"kind": outcome.kind.value}
    if outcome.attempts is not None:
        payload["attempts"] = outcome.attempts
    if outcome.solution is not None:
        payload["solution"] = outcome.solution
    return payload


# Global service instance
_round_service = None


def get_round_service() -> Optional[RoundService]:
    """Get the global round service instance."""
    return _round_service


def initialize_round_service(puzzle_source: PuzzleSource,
                             max_attempts: int,
                             word_predicate_factory: Callable[[str], WordPredicate],
                             rng: Optional[random.Random] = None,
                             finished_ttl: float = Config.FINISHED_GAME_TTL_SECONDS) -> RoundService:
    """Initialize the global round service instance."""
    global _round_service
    _round_service = RoundService(puzzle_source, max_attempts, word_predicate_factory, rng, finished_ttl)
    return _round_service
