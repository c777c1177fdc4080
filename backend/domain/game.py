"""
Game entity - the state machine driving a single snake round after round.
"""

import logging
import random
from typing import List, Optional, Tuple

from .constants import (
    Direction,
    GamePhase,
    KEY_DIRECTIONS,
    MOVING_PERIOD,
    RESTART_TIME,
    START_X,
    START_Y,
    START_FOOD,
    MIN_BOARD_SIZE,
    FOOD_COLOR,
    BORDER_COLOR,
    GAME_OVER_COLOR,
)
from .game_state import GameState
from .snake import Snake

logger = logging.getLogger(__name__)


class Game:
    """
    Manages:
      - Board (width, height, one-cell lethal border)
      - The snake
      - Food placement and consumption
      - Movement timing and the game-over / restart countdown

    Events arrive one at a time from an external driver: `key_pressed` for
    input and `update` for elapsed time.
    """

    def __init__(
        self,
        width: int,
        height: int,
        rng: Optional[random.Random] = None,
        moving_period: float = MOVING_PERIOD,
        restart_time: float = RESTART_TIME
    ):
        if width < MIN_BOARD_SIZE or height < MIN_BOARD_SIZE:
            raise ValueError(
                f"Board must be at least {MIN_BOARD_SIZE}x{MIN_BOARD_SIZE}, got {width}x{height}."
            )
        if moving_period <= 0 or restart_time <= 0:
            raise ValueError("moving_period and restart_time must be positive.")

        self.board_width = width
        self.board_height = height
        self.moving_period = moving_period
        self.restart_time = restart_time
        self.rng = rng or random.Random()

        self._reset()

    @property
    def phase(self) -> GamePhase:
        return GamePhase.GAME_OVER if self.game_over else GamePhase.PLAYING

    def key_pressed(self, key):
        if self.game_over:
            return
        direction = KEY_DIRECTIONS.get(key)
        if direction is None:
            return
        if direction == self.snake.head_direction().opposite():
            return
        self.update_snake(direction)

    def in_interior(self, x: int, y: int) -> bool:
        return 0 < x < self.board_width - 1 and 0 < y < self.board_height - 1

    def free_cells(self) -> List[Tuple[int, int]]:
        """Interior cells not covered by the snake."""
        return [
            (x, y)
            for y in range(1, self.board_height - 1)
            for x in range(1, self.board_width - 1)
            if not self.snake.occupies(x, y)
        ]

    def add_food(self):
        """
        Place food on a uniformly random interior cell clear of the snake.

        Rejection sampling is capped at one attempt per board cell; after
        that the free cells are enumerated. A full board ends the round.
        """
        for _ in range(self.board_width * self.board_height):
            x = self.rng.randrange(1, self.board_width - 1)
            y = self.rng.randrange(1, self.board_height - 1)
            if not self.snake.occupies(x, y):
                self._place_food(x, y)
                return

        free = self.free_cells()
        if not free:
            logger.info("Board is full at length %d; ending round.", len(self.snake))
            self.food_exists = False
            self.game_over = True
            self.waiting_time = 0.0
            return
        self._place_food(*self.rng.choice(free))

    def _place_food(self, x: int, y: int):
        self.food_position = (x, y)
        self.food_exists = True
        logger.debug("Food placed at %s", self.food_position)

    def eating_food(self):
        if self.food_exists and self.snake.head_position() == self.food_position:
            self.food_exists = False
            self.foods_eaten += 1
            self.snake.add_block_tail()
            logger.debug("Food eaten at %s (total %d)", self.food_position, self.foods_eaten)

    def is_snake_alive(self, direction: Optional[Direction] = None) -> bool:
        """
        Verify the snake survives one step: the next head must not hit its
        own body and must stay inside the border.
        """
        next_x, next_y = self.snake.next_head(direction)
        if self.snake.overlap_tail(next_x, next_y):
            return False
        return self.in_interior(next_x, next_y)

    def update_snake(self, direction: Optional[Direction] = None):
        if self.is_snake_alive(direction):
            self.snake.move_forward(direction)
            self.eating_food()
            logger.debug("Snake moved to %s", self.snake.head_position())
        else:
            self.game_over = True
            logger.info(
                "Game over: head %s heading %s, length %d, foods eaten %d",
                self.snake.head_position(),
                (direction or self.snake.direction).value,
                len(self.snake),
                self.foods_eaten,
            )
        self.waiting_time = 0.0

    def update(self, delta_time: float):
        if delta_time < 0:
            raise ValueError(f"delta_time must be non-negative, got {delta_time}.")

        self.waiting_time += delta_time
        if self.game_over:
            if self.waiting_time > self.restart_time:
                self.restart()
            return

        if not self.food_exists:
            self.add_food()
            if self.game_over:
                return

        if self.waiting_time > self.moving_period:
            self.update_snake(None)

    def _reset(self):
        self.snake: Snake = Snake.at(START_X, START_Y)
        self.waiting_time = 0.0
        self.game_over = False
        self.foods_eaten = 0
        self.food_position: Tuple[int, int] = START_FOOD
        if self.in_interior(*START_FOOD) and not self.snake.occupies(*START_FOOD):
            self._place_food(*START_FOOD)
        else:
            self.food_exists = False
            self.add_food()

    def restart(self):
        self._reset()
        logger.info("New round on a %dx%d board", self.board_width, self.board_height)

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            snake_positions=list(self.snake.positions),
            direction=self.snake.direction,
            food=self.food_position if self.food_exists else None,
            width=self.board_width,
            height=self.board_height,
            game_over=self.game_over,
            waiting_time=self.waiting_time,
            foods_eaten=self.foods_eaten,
            growing=self.snake.growing
        )

    def draw(self, renderer):
        """Draw the snake, the food, the border and, after a death, the game-over overlay."""
        self.snake.draw(renderer)

        if self.food_exists:
            renderer.draw_block(FOOD_COLOR, *self.food_position)

        width, height = self.board_width, self.board_height
        renderer.draw_rectangle(BORDER_COLOR, 0, 0, width, 1)  # Upper border
        renderer.draw_rectangle(BORDER_COLOR, 0, height - 1, width, 1)  # Lower border
        renderer.draw_rectangle(BORDER_COLOR, 0, 0, 1, height)  # Left border
        renderer.draw_rectangle(BORDER_COLOR, width - 1, 0, 1, height)  # Right border

        if self.game_over:
            renderer.draw_rectangle(GAME_OVER_COLOR, 0, 0, width, height)
