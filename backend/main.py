import argparse
import json
import logging
import random
from typing import Any, Dict, Optional

from config import GameConfig
from domain.game import Game
from players.base import Player
from players.random_player import RandomPlayer
from services.renderer import ImageRenderer, Renderer
from services.video_generator import SnakeVideoGenerator

logger = logging.getLogger(__name__)


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(
    game_params: argparse.Namespace,
    player: Optional[Player] = None,
    renderer: Optional[Renderer] = None,
    video: Optional[SnakeVideoGenerator] = None
) -> Dict[str, Any]:
    """
    Drives a single-player snake session headlessly.

    Each frame delivers the player's key press (if any) and then one tick of
    1/fps seconds, so events reach the game strictly one at a time.

    Args:
        game_params: An object (like argparse.Namespace) with width, height,
                     seconds, fps and optionally seed, moving_period, restart_time.
        player: input source; defaults to a RandomPlayer sharing the seed.
        renderer: optional renderer drawn once per frame.
        video: optional video generator receiving every rendered frame.

    Returns:
        A dictionary summarizing the session.
    """
    seed = getattr(game_params, 'seed', None)
    game = Game(
        width=game_params.width,
        height=game_params.height,
        rng=random.Random(seed),
        moving_period=getattr(game_params, 'moving_period', GameConfig.moving_period),
        restart_time=getattr(game_params, 'restart_time', GameConfig.restart_time)
    )
    if player is None:
        player = RandomPlayer(rng=random.Random(None if seed is None else seed + 1))
    if video is not None and renderer is None:
        renderer = ImageRenderer()

    delta = 1.0 / game_params.fps
    total_frames = int(game_params.seconds * game_params.fps)

    deaths = 0
    restarts = 0
    foods_eaten = 0
    max_length = len(game.snake)

    for frame in range(total_frames):
        was_over = game.game_over
        eaten_before = game.foods_eaten

        key = player.get_key(game.get_current_state())
        if key is not None:
            game.key_pressed(key)
        game.update(delta)

        if game.foods_eaten > eaten_before:
            foods_eaten += game.foods_eaten - eaten_before
        if not was_over and game.game_over:
            deaths += 1
            logger.info("Frame %d: snake died at length %d", frame, len(game.snake))
        elif was_over and not game.game_over:
            restarts += 1
        max_length = max(max_length, len(game.snake))

        if renderer is not None:
            if isinstance(renderer, ImageRenderer):
                image = renderer.render(game)
                if video is not None:
                    video.add_frame(image)
            else:
                game.draw(renderer)

    result = {
        "frames": total_frames,
        "deaths": deaths,
        "restarts": restarts,
        "foods_eaten": foods_eaten,
        "max_length": max_length,
        "final_board": game.get_current_state().print_board()
    }

    if video is not None:
        result["video_path"] = video.generate_video(getattr(game_params, 'video', None))

    return result


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main(argv=None):
    config = GameConfig.from_env()

    parser = argparse.ArgumentParser(
        description="Run a headless single-player Snake session with a random player."
    )
    parser.add_argument("--width", type=int, default=config.width,
                        help="Width of the board, border included")
    parser.add_argument("--height", type=int, default=config.height,
                        help="Height of the board, border included")
    parser.add_argument("--seconds", type=float, default=30.0,
                        help="Simulated play time in seconds")
    parser.add_argument("--fps", type=int, default=config.fps,
                        help="Ticks per simulated second")
    parser.add_argument("--seed", type=int, default=config.seed,
                        help="Random seed for food placement and the player")
    parser.add_argument("--video", type=str, default=None,
                        help="Write an MP4 of the session to this path")
    parser.add_argument("--print-board", action="store_true",
                        help="Print the final board")

    args = parser.parse_args(argv)
    args.moving_period = config.moving_period
    args.restart_time = config.restart_time

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    video = SnakeVideoGenerator(fps=args.fps) if args.video else None
    result = run_simulation(args, video=video)

    board = result.pop("final_board")
    if args.print_board:
        print("\n" + board + "\n")

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
