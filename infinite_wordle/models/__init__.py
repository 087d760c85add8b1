"""
Data Models Package

Contains all data models and errors used throughout the application.
"""

from .errors import (
    WordleError, ValidationError, ClassificationPrecondition, RoundOverError, PuzzleFetchError
)
from .game import (
    Classification, GameState, KeyboardState, LetterState, OutcomeKind, Puzzle,
    RoundOutcome, RoundState, RoundStatus
)

__all__ = [
    'WordleError', 'ValidationError', 'ClassificationPrecondition', 'RoundOverError',
    'PuzzleFetchError', 'Classification', 'GameState', 'KeyboardState', 'LetterState',
    'OutcomeKind', 'Puzzle', 'RoundOutcome', 'RoundState', 'RoundStatus'
]
