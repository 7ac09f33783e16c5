"""Frame loop driver and start control."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from . import constants
from .leaderboard import rank
from .snake import Snake
from .world import World


class InvalidNameError(ValueError):
    """Raised when a game is started without a usable display name."""


def validate_name(name: str) -> str:
    """Return the cleaned display name or raise :class:`InvalidNameError`."""

    cleaned = (name or "").strip()
    if not cleaned:
        raise InvalidNameError("Please enter a username")
    return cleaned[: constants.NAME_MAX_LENGTH]


class GameLoop:
    """Owns the world for the life of the process and drives it frame by frame.

    One frame is a single ``World.step``. Rendering and waiting for the next
    frame are left to the caller (or passed to :meth:`run`), so the same loop
    serves the pygame client and headless runs.
    """

    def __init__(
        self,
        world: Optional[World] = None,
        on_game_over: Optional[Callable[[Snake], None]] = None,
    ) -> None:
        self.world = world if world is not None else World()
        self.on_game_over = on_game_over
        self.running = False
        self.game_over = False

    def start(self, name: str) -> Snake:
        """Validate ``name``, reset the world and start running."""

        player_name = validate_name(name)
        player = self.world.reset(player_name)
        self.running = True
        self.game_over = False
        logging.info("Game started for %s", player_name)
        return player

    def stop(self) -> None:
        self.running = False

    def frame(self) -> bool:
        """Advance one tick if running. Returns whether the loop keeps going."""

        if not self.running:
            return False
        self.world.step()
        if self.world.player_dead:
            self.running = False
            self.game_over = True
            player = self.world.player
            logging.info("Game over for %s at tick %d (mass %.1f)", player.name, self.world.tick, player.mass)
            if self.on_game_over is not None:
                self.on_game_over(player)
        return self.running

    def leaderboard(self) -> List[Tuple[str, int]]:
        return rank(self.world.snakes)

    def run(
        self,
        render: Optional[Callable[[World], None]] = None,
        wait: Optional[Callable[[], object]] = None,
        max_frames: Optional[int] = None,
    ) -> int:
        """Step, render and wait until the loop stops. Returns frames stepped."""

        frames = 0
        while self.running and (max_frames is None or frames < max_frames):
            self.frame()
            frames += 1
            if render is not None:
                render(self.world)
            if wait is not None:
                wait()
        return frames
