"""
Game Errors

Exception hierarchy shared by the round engine and its collaborators.
"""


class WordleError(Exception):
    """Base class for all game errors."""


class ValidationError(WordleError):
    """A guess was rejected before evaluation (wrong length or not a word).

    Recovered by asking the player for another guess; never consumes an attempt.
    """


class ClassificationPrecondition(WordleError):
    """Guess and solution lengths differ when classifying."""


class RoundOverError(WordleError):
    """A guess was submitted to a round that has already been won or lost."""


class PuzzleFetchError(WordleError):
    """The puzzle service could not provide a puzzle."""
