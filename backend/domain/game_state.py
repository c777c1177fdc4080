"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Tuple, Optional

from .constants import Direction, GamePhase


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        snake_positions: list of (x, y), head first
        direction: heading of the snake
        food: (x, y) of the food, or None when no food is placed
        width, height: board dimensions, border included
        game_over: whether the round has ended
        waiting_time: seconds since the last step (or since game over)
        foods_eaten: foods consumed since the last restart
        growing: the next step keeps the tail in place
    """

    def __init__(
        self,
        snake_positions: List[Tuple[int, int]],
        direction: Direction,
        food: Optional[Tuple[int, int]],
        width: int,
        height: int,
        game_over: bool = False,
        waiting_time: float = 0.0,
        foods_eaten: int = 0,
        growing: bool = False
    ):
        self.snake_positions = snake_positions
        self.direction = direction
        self.food = food
        self.width = width
        self.height = height
        self.game_over = game_over
        self.waiting_time = waiting_time
        self.foods_eaten = foods_eaten
        self.growing = growing

    @property
    def phase(self) -> GamePhase:
        return GamePhase.GAME_OVER if self.game_over else GamePhase.PLAYING

    def is_interior(self, x: int, y: int) -> bool:
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        # = border
        . = empty space
        A = food
        H = snake head
        T = snake body
        Rows run from y=0 at the top, x-axis labels at the bottom.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        for y in range(self.height):
            for x in range(self.width):
                if not self.is_interior(x, y):
                    board[y][x] = '#'

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'A'

        for pos_idx, (x, y) in enumerate(self.snake_positions):
            if not (0 <= x < self.width and 0 <= y < self.height):
                continue
            board[y][x] = 'H' if pos_idx == 0 else 'T'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(self.height)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState phase={self.phase.value}, food={self.food}, "
            f"length={len(self.snake_positions)}, foods_eaten={self.foods_eaten}>"
        )
