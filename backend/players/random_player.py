"""
Random player implementation - presses random safe keys.
"""

import random
from typing import List, Optional

from domain.constants import Key, KEY_DIRECTIONS
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a key press avoiding the border, its own body
    and reversals. Most frames it presses nothing and lets the snake coast.
    """

    def __init__(self, rng: Optional[random.Random] = None, turn_chance: float = 0.2):
        self.rng = rng or random.Random()
        self.turn_chance = turn_chance

    def safe_keys(self, game_state: GameState) -> List[Key]:
        snake_positions = game_state.snake_positions
        head_x, head_y = snake_positions[0]
        reverse = game_state.direction.opposite()

        # Filter out keys that:
        # 1. Reverse the heading (ignored by the game)
        # 2. Hit the border
        # 3. Hit own body (except tail, which moves unless growing)
        body = snake_positions if game_state.growing else snake_positions[:-1]
        safe: List[Key] = []
        for key, direction in KEY_DIRECTIONS.items():
            if direction == reverse:
                continue
            dx, dy = direction.offset
            new_x, new_y = head_x + dx, head_y + dy
            if not game_state.is_interior(new_x, new_y):
                continue
            if (new_x, new_y) in body:
                continue
            safe.append(key)
        return safe

    def get_key(self, game_state: GameState) -> Optional[Key]:
        if game_state.game_over:
            return None

        safe = self.safe_keys(game_state)
        heading_key = next(k for k, d in KEY_DIRECTIONS.items() if d == game_state.direction)

        # Keep going straight while it is safe, turning now and then
        if heading_key in safe and self.rng.random() >= self.turn_chance:
            return None

        # If no safe keys, just press a random one (we'll die anyway)
        if not safe:
            return self.rng.choice(list(KEY_DIRECTIONS))

        return self.rng.choice(safe)
