"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .errors import ValidationError


class LetterState(Enum):
    """Letter evaluation status for a single position or keyboard key."""
    UNKNOWN = "UNKNOWN"
    INCORRECT = "INCORRECT"
    MISPLACED = "MISPLACED"
    CORRECT = "CORRECT"


Classification = Tuple[LetterState, ...]
KeyboardState = Dict[str, LetterState]


class RoundStatus(Enum):
    AWAITING_GUESS = "AWAITING_GUESS"
    WON = "WON"
    LOST = "LOST"


class OutcomeKind(Enum):
    CONTINUE = "CONTINUE"
    RETRY = "RETRY"
    WON = "WON"
    LOST = "LOST"


@dataclass(frozen=True)
class RoundOutcome:
    """Tagged result of submitting one guess to a round."""
    kind: OutcomeKind
    attempts: Optional[int] = None  # WON only
    solution: Optional[str] = None  # LOST only
    error: Optional[ValidationError] = None  # RETRY only

    @classmethod
    def continuing(cls) -> "RoundOutcome":
        return cls(OutcomeKind.CONTINUE)

    @classmethod
    def retry(cls, error: ValidationError) -> "RoundOutcome":
        return cls(OutcomeKind.RETRY, error=error)

    @classmethod
    def won(cls, attempts: int) -> "RoundOutcome":
        return cls(OutcomeKind.WON, attempts=attempts)

    @classmethod
    def lost(cls, solution: str) -> "RoundOutcome":
        return cls(OutcomeKind.LOST, solution=solution)

    @property
    def terminal(self) -> bool:
        return self.kind in (OutcomeKind.WON, OutcomeKind.LOST)


@dataclass(frozen=True)
class Puzzle:
    """A single archived daily puzzle."""
    solution: str
    identifier: int
    label: str
    print_date: str = ""
    days_since_launch: Optional[int] = None


@dataclass(frozen=True)
class RoundState:
    """
    State of one round.

    The keyboard belongs to this round alone; advancing a round always builds
    a new RoundState with a new keyboard mapping.
    """
    solution: str
    max_attempts: int
    keyboard: KeyboardState
    attempt: int = 1
    status: RoundStatus = RoundStatus.AWAITING_GUESS
    guesses: Tuple[str, ...] = ()
    classifications: Tuple[Classification, ...] = ()

    @property
    def terminal(self) -> bool:
        return self.status != RoundStatus.AWAITING_GUESS

    @property
    def won(self) -> bool:
        return self.status == RoundStatus.WON


@dataclass
class GameState:
    """Client-facing round representation for the HTTP API."""
    game_id: str
    puzzle_id: int
    label: str
    attempt: int
    max_attempts: int
    status: str
    game_over: bool
    won: bool
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # Letter status as string for JSON serialization
    letter_status: Dict[str, str]
    answer: Optional[str] = None  # Only included when the round is over
    outcome: Dict[str, object] = field(default_factory=dict)
