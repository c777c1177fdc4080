"""
Game constants for the snake core.
"""

from enum import Enum


class Direction(Enum):
    """Heading of the snake's head. Up decreases y, Down increases it."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def offset(self):
        return _OFFSETS[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class Key(Enum):
    """Key identifiers delivered by the input source."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    OTHER = "OTHER"


KEY_DIRECTIONS = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


class GamePhase(Enum):
    PLAYING = "PLAYING"
    GAME_OVER = "GAME_OVER"


# Timing (seconds)
MOVING_PERIOD = 0.1
RESTART_TIME = 1.0

# Start layout
START_X = 2
START_Y = 2
START_FOOD = (6, 4)
MIN_BOARD_SIZE = 4

# Colours (#RRGGBBAA)
SNAKE_COLOR = "#00CC00FF"
FOOD_COLOR = "#CC0000FF"
BORDER_COLOR = "#000000FF"
GAME_OVER_COLOR = "#E6000080"
