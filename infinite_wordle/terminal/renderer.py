"""
Terminal Renderer

Draws puzzles, the keyboard summary and guess feedback with ANSI escape
sequences. The prompt and the keyboard share one line: the keyboard is drawn
from column 11 and the prompt is written over the start of the line.
"""

import sys
from dataclasses import asdict
from typing import Optional, TextIO

from ..models.errors import ValidationError
from ..models.game import Classification, KeyboardState, LetterState, Puzzle
from ..services.evaluation import letters_in_state


class Ansi:
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CLEAR_LINE = "\033[2K"
    LINE_START = "\033[0G"
    KEYBOARD_COLUMN = "\033[11G"
    PREVIOUS_LINE = "\033[1F"


LETTER_COLORS = {
    LetterState.CORRECT: Ansi.GREEN,
    LetterState.MISPLACED: Ansi.YELLOW,
    LetterState.INCORRECT: Ansi.RED,
}


class TerminalRenderer:
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def header(self, puzzle: Puzzle) -> None:
        self._write(f"Wordle #{puzzle.identifier} by {puzzle.label}\n")

    def debug(self, puzzle: Puzzle) -> None:
        self._write(f"{asdict(puzzle)}\n")

    def keyboard(self, keyboard: KeyboardState) -> None:
        """Correct letters in green, then misplaced in yellow, then unknown."""
        correct = "".join(letters_in_state(keyboard, LetterState.CORRECT))
        misplaced = "".join(letters_in_state(keyboard, LetterState.MISPLACED))
        unknown = "".join(letters_in_state(keyboard, LetterState.UNKNOWN))
        self._write(
            f"{Ansi.CLEAR_LINE}{Ansi.KEYBOARD_COLUMN}"
            f"{Ansi.GREEN}{correct}{Ansi.YELLOW}{misplaced}{Ansi.RESET}{unknown}"
        )

    def prompt(self, attempt: int) -> str:
        return f"{Ansi.LINE_START}{attempt} > "

    def rejection(self, error: ValidationError) -> None:
        self._write(f"{Ansi.CLEAR_LINE}{error}{Ansi.PREVIOUS_LINE}")

    def guess_row(self, attempt: int, guess: str, classification: Classification) -> None:
        letters = "".join(
            f"{LETTER_COLORS[state]}{letter}" for letter, state in zip(guess, classification)
        )
        self._write(
            f"{Ansi.CLEAR_LINE}{Ansi.PREVIOUS_LINE}{Ansi.CLEAR_LINE}"
            f"{attempt} > {letters}{Ansi.RESET}\n"
        )

    def win(self, attempts: int, guess: str, encouragement: str) -> None:
        tries = "try" if attempts == 1 else "tries"
        self._write(
            f"{Ansi.CLEAR_LINE}{Ansi.PREVIOUS_LINE}{Ansi.CLEAR_LINE}"
            f"{attempts} > {Ansi.GREEN}{guess}{Ansi.RESET}\n"
            f"{encouragement} took {attempts} {tries}!\n"
        )

    def loss(self, solution: str) -> None:
        self._write(f"Solution was {solution}\n")
