"""Entry point for the pygame based client."""

from __future__ import annotations

import argparse
import logging
from typing import Optional

import pygame

from slither import constants
from slither.loop import GameLoop, InvalidNameError
from slither.world import World

from .input import InputManager
from .render import Renderer


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Slither Solo")
    parser.add_argument("--name", default="", help="Player nickname (prefills the start screen)")
    parser.add_argument("--width", type=int, default=1280, help="Window width")
    parser.add_argument("--height", type=int, default=720, help="Window height")
    parser.add_argument("--bots", type=int, default=constants.BOT_COUNT, help="Number of AI snakes")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible world")
    parser.add_argument("--fps", type=int, default=constants.TICK_RATE, help="Frames per second")
    parser.add_argument(
        "--headless",
        type=int,
        metavar="TICKS",
        default=None,
        help="Simulate TICKS frames without a window and log the leaderboard",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser.parse_args(argv)


def run_headless(loop: GameLoop, name: str, ticks: int) -> None:
    loop.start(name or "Player")
    frames = loop.run(max_frames=ticks)
    logging.info("Simulated %d frames", frames)
    for position, (entry_name, score) in enumerate(loop.leaderboard(), start=1):
        logging.info("%d. %s: %s", position, entry_name, score)


def run_client(loop: GameLoop, args: argparse.Namespace) -> None:
    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Slither Solo")
    renderer = Renderer(screen)
    clock = pygame.time.Clock()
    input_manager = InputManager(args.name)
    loop.world.camera.viewport = screen.get_size()
    message: Optional[str] = None
    running = True

    while running:
        playing = loop.running
        state = input_manager.process(pygame.event.get(), loop.world, playing)
        if state.quit:
            running = False
            continue

        if not playing and state.submit:
            try:
                loop.start(input_manager.name)
                message = None
            except InvalidNameError as exc:
                message = str(exc)

        loop.frame()

        renderer.clear()
        if loop.running or loop.game_over:
            renderer.draw_world(loop.world, loop.leaderboard())
        if loop.game_over and not loop.running:
            renderer.draw_game_over(loop.world.player)
        elif not loop.running:
            renderer.draw_start_screen(input_manager.name, message)
        renderer.present()
        clock.tick(args.fps)

    pygame.quit()


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="[%(levelname)s] %(message)s")
    world = World(bot_count=args.bots, seed=args.seed, viewport=(args.width, args.height))
    loop = GameLoop(world)
    if args.headless is not None:
        run_headless(loop, args.name, args.headless)
        return
    run_client(loop, args)


if __name__ == "__main__":
    main()
