"""
Utilities Package

Contains utility modules shared by the terminal game and the HTTP API.
"""

from .game_logger import GameLogger, game_logger

__all__ = ['GameLogger', 'game_logger']
