"""
Base player interface for the game driver.
"""

from typing import Optional

from domain.constants import Key
from domain.game_state import GameState


class Player:
    """
    Base class/interface for an input source.

    Each player looks at the current game state and returns the key it
    presses this frame, or None to let the snake keep its heading.
    """

    def get_key(self, game_state: GameState) -> Optional[Key]:
        """
        Return a key press given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            A Key, or None for no key press
        """
        raise NotImplementedError
