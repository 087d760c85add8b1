"""
Game Configuration Constants Module

This module defines all game configuration constants and the guess dictionary.
All game parameters are centralized here to enable easy modification.
"""

import json
import os
from typing import Callable, FrozenSet, List, Final

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""Number of letters in every solution and every accepted guess."""

MAX_ROUNDS: Final[int] = 6
"""
Default number of guess attempts allowed per round.
Type: Final[int] - Immutable to prevent accidental modification
"""

ALPHABET: Final[str] = "abcdefghijklmnopqrstuvwxyz"

ENCOURAGEMENTS: Final[List[str]] = [
    "Great job!",
    "Nice!",
    "Hell yeah!",
    "Solid,",
    "Damn right!",
    "Clean,",
]


# Load word list from JSON file
def _load_word_list() -> List[str]:
    """
    Load word list from wordles.json file.

    Returns:
        List[str]: List of lowercase 5-letter words

    Raises:
        FileNotFoundError: If wordles.json file is not found
        ValueError: If the file is malformed, empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'wordles.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in wordles.json: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    lowercase_words = [word.lower() for word in word_list]

    for word in lowercase_words:
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' is not {WORD_LENGTH} characters long")
        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")

    return lowercase_words


# Curated Word Database loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()
WORD_SET: Final[FrozenSet[str]] = frozenset(WORD_LIST)


def is_valid_word(word: str) -> bool:
    """Dictionary membership check for a normalized guess."""
    return word in WORD_SET


def word_predicate_for(solution: str) -> Callable[[str], bool]:
    """
    Build the dictionary predicate for one round.

    Historical answers are not guaranteed to be in the bundled list, so the
    round's own solution is always accepted.
    """
    solution = solution.lower()

    def predicate(word: str) -> bool:
        return word == solution or is_valid_word(word)

    return predicate


def validate_word_list_integrity() -> bool:
    """
    Validates the integrity and consistency of the word database.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly WORD_LENGTH characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent lowercase formatting

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not WORD_LIST:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(WORD_LIST):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(WORD_LIST) != len(WORD_SET):
        duplicates = sorted({word for word in WORD_LIST if WORD_LIST.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics() -> dict:
    """
    Analyzes the word list and returns statistical information.

    Returns:
        dict: total_words, avg_vowel_count and the five most common letters
    """
    if not WORD_LIST:
        return {"error": "Word list is empty"}

    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in WORD_LIST)

    letter_frequency = {}
    for word in WORD_LIST:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(WORD_LIST),
        "avg_vowel_count": round(total_vowels / len(WORD_LIST), 2),
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
