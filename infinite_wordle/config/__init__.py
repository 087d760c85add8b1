"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: application configuration (environment-based)
- game_settings.py: game rules, constants and the guess dictionary
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    ALPHABET, ENCOURAGEMENTS, MAX_ROUNDS, WORD_LENGTH, WORD_LIST,
    is_valid_word, word_predicate_for, validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'ALPHABET', 'ENCOURAGEMENTS', 'MAX_ROUNDS', 'WORD_LENGTH', 'WORD_LIST',
    'is_valid_word', 'word_predicate_for', 'validate_word_list_integrity', 'get_word_statistics'
]
