"""
Snake entity for the game core.
"""

from collections import deque
from typing import List, Tuple, Optional

from .constants import Direction, SNAKE_COLOR


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        direction: current heading of the head
        growing: one-shot flag; the next move keeps the tail
    """

    def __init__(self, positions: List[Tuple[int, int]], direction: Direction = Direction.RIGHT):
        if not positions:
            raise ValueError("Snake needs at least one segment.")
        self.positions = deque(positions)
        self.direction = direction
        self.growing = False

    @classmethod
    def at(cls, x: int, y: int) -> "Snake":
        """Two-segment snake with its head at (x, y), heading right."""
        return cls([(x, y), (x - 1, y)], Direction.RIGHT)

    def head_direction(self) -> Direction:
        return self.direction

    def head_position(self) -> Tuple[int, int]:
        return self.positions[0]

    def next_head(self, intent: Optional[Direction] = None) -> Tuple[int, int]:
        """
        Cell the head would occupy after one step.

        Uses `intent` when given, otherwise the current heading. Reversals are
        not rejected here; callers validate intents.
        """
        dx, dy = (intent or self.direction).offset
        head_x, head_y = self.positions[0]
        return head_x + dx, head_y + dy

    def overlap_tail(self, x: int, y: int) -> bool:
        """
        True if (x, y) is covered by the body, ignoring the tail cell that
        the next move vacates. A pending growth keeps the tail in place, so
        it counts then.
        """
        body = list(self.positions)
        if not self.growing:
            body = body[:-1]
        return (x, y) in body

    def occupies(self, x: int, y: int) -> bool:
        return (x, y) in self.positions

    def add_block_tail(self):
        self.growing = True

    def move_forward(self, intent: Optional[Direction] = None):
        if intent is not None:
            self.direction = intent
        self.positions.appendleft(self.next_head())
        if self.growing:
            self.growing = False
        else:
            self.positions.pop()

    def draw(self, renderer):
        for x, y in self.positions:
            renderer.draw_block(SNAKE_COLOR, x, y)

    def __len__(self):
        return len(self.positions)

    def __repr__(self):
        return f"<Snake head={self.head_position()} length={len(self.positions)} direction={self.direction.value}>"
