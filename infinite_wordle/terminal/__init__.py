"""
Terminal Package

Contains the ANSI renderer and the interactive session driver.
"""

from .renderer import TerminalRenderer
from .session import play_round, play_session

__all__ = ['TerminalRenderer', 'play_round', 'play_session']
