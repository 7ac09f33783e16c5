"""Steering policies that supply a snake's heading each tick."""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import TYPE_CHECKING, Optional

from . import constants

if TYPE_CHECKING:
    from .snake import Snake
    from .world import World


class Steering:
    """Interface for anything that steers a snake before its update."""

    def steer(self, snake: "Snake", world: "World") -> None:
        raise NotImplementedError


class ManualSteering(Steering):
    """Player steering; the input adapter writes the heading directly."""

    def steer(self, snake: "Snake", world: "World") -> None:
        return None


@dataclass
class ScriptedSteering(Steering):
    """Bot policy: chase the nearest consumable, boost now and then.

    Target selection is a full scan over every food, pellet and drop in the
    world. There is no spatial index, which is fine for a few hundred items
    but grows linearly with the world's population.
    """

    boost_cooldown: int = 0

    def choose_heading(self, snake: "Snake", world: "World") -> Optional[float]:
        """Return the angle towards the nearest consumable, or ``None``."""

        head = snake.position
        nearest = None
        best = math.inf
        for item in world.consumables():
            distance = head.distance_sq(item.position, world.world_size)
            if distance < best:
                best = distance
                nearest = item
        if nearest is None:
            return None
        return head.angle_to(nearest.position, world.world_size)

    def steer(self, snake: "Snake", world: "World") -> None:
        angle = self.choose_heading(snake, world)
        if angle is not None:
            snake.set_direction(angle)

        if self.boost_cooldown > 0:
            self.boost_cooldown -= 1
        if (
            snake.mass > constants.BOT_BOOST_MIN_MASS
            and self.boost_cooldown <= 0
            and world.rng.random() < constants.BOT_BOOST_CHANCE
        ):
            snake.start_boost()
            self.boost_cooldown = constants.BOT_BOOST_COOLDOWN
