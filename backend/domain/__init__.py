"""
Domain entities for the snake game core.

This module contains the game state machine and the snake body model,
independent of rendering, input polling and the event loop.
"""

from .constants import (
    Direction,
    Key,
    KEY_DIRECTIONS,
    GamePhase,
    MOVING_PERIOD,
    RESTART_TIME,
)
from .snake import Snake
from .game_state import GameState
from .game import Game

__all__ = [
    'Direction', 'Key', 'KEY_DIRECTIONS', 'GamePhase',
    'MOVING_PERIOD', 'RESTART_TIME',
    'Snake',
    'GameState',
    'Game',
]
