"""
Guess Evaluation

Letter classification for a single guess and the keyboard merge rule that
folds classifications into the per-round keyboard summary.
"""

from typing import List, Sequence

from ..config.game_settings import ALPHABET
from ..models.errors import ClassificationPrecondition
from ..models.game import Classification, KeyboardState, LetterState


def classify(guess: str, solution: str) -> Classification:
    """
    Classify every position of a guess against the solution.

    A letter found anywhere in the solution is MISPLACED regardless of how
    many times it occurs there, so a repeated guess letter can be marked
    MISPLACED more than once.

    Raises:
        ClassificationPrecondition: If guess and solution lengths differ
    """
    if len(guess) != len(solution):
        raise ClassificationPrecondition(
            f"Guess length {len(guess)} does not match solution length {len(solution)}"
        )

    result = []
    for guessed_letter, solution_letter in zip(guess, solution):
        if guessed_letter == solution_letter:
            result.append(LetterState.CORRECT)
        elif guessed_letter in solution:
            result.append(LetterState.MISPLACED)
        else:
            result.append(LetterState.INCORRECT)
    return tuple(result)


def new_keyboard_state() -> KeyboardState:
    return {letter: LetterState.UNKNOWN for letter in ALPHABET}


def merge_keyboard_state(current: KeyboardState,
                         classification: Classification,
                         guess: Sequence[str]) -> KeyboardState:
    """
    Returns a copy of ``current`` updated with one guess' classification.

    CORRECT always wins, MISPLACED never downgrades a CORRECT key, and
    INCORRECT is written unconditionally.
    """
    keyboard = dict(current)
    for letter, new_state in zip(guess, classification):
        if new_state == LetterState.CORRECT:
            keyboard[letter] = LetterState.CORRECT
        elif new_state == LetterState.MISPLACED:
            if keyboard.get(letter) != LetterState.CORRECT:
                keyboard[letter] = LetterState.MISPLACED
        else:
            keyboard[letter] = LetterState.INCORRECT
    return keyboard


def letters_in_state(keyboard: KeyboardState, state: LetterState) -> List[str]:
    """Sorted letters currently holding ``state``."""
    return sorted(letter for letter, letter_state in keyboard.items() if letter_state == state)
