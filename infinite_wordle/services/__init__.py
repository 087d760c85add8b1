"""
Services Package

Contains the round engine and its collaborators.
"""

from .evaluation import classify, merge_keyboard_state, new_keyboard_state, letters_in_state
from .puzzle_service import NytPuzzleSource, PuzzleSource, random_puzzle, random_puzzle_date
from .round_service import (
    RoundService, advance_round, new_round, get_round_service, initialize_round_service
)

__all__ = [
    'classify', 'merge_keyboard_state', 'new_keyboard_state', 'letters_in_state',
    'NytPuzzleSource', 'PuzzleSource', 'random_puzzle', 'random_puzzle_date',
    'RoundService', 'advance_round', 'new_round', 'get_round_service', 'initialize_round_service'
]
