"""
Player implementations for the snake driver.

This module contains the input-source abstraction and implementations
that decide which key to press each frame.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
