"""Food and pellet entity definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
import itertools
import random
from typing import ClassVar

from . import constants, utils

_id_counter = itertools.count(1)


@dataclass
class Food:
    """Ambient food scattered over the world."""

    position: utils.Vec2
    color: tuple[int, int, int] = (255, 255, 255)
    id: int = field(default_factory=lambda: next(_id_counter))

    size: ClassVar[float] = constants.FOOD_SIZE
    value: ClassVar[float] = constants.FOOD_VALUE
    pickup_radius: ClassVar[float] = constants.FOOD_PICKUP_RADIUS

    @classmethod
    def spawn_random(cls, rng: random.Random, world_size: float = constants.WORLD_SIZE):
        """Create an item at a uniformly random position."""

        return cls(
            position=utils.random_point_in_world(rng, world_size),
            color=utils.random_color(rng),
        )

    @classmethod
    def from_position(cls, position: utils.Vec2, color: tuple[int, int, int] = (255, 255, 255)):
        """Create an item at a specific ``position``."""

        return cls(position=position.copy(), color=color)


@dataclass
class Pellet(Food):
    """A small consumable, either ambient or dropped by a dying snake."""

    size: ClassVar[float] = constants.PELLET_SIZE
    value: ClassVar[float] = constants.PELLET_VALUE
    pickup_radius: ClassVar[float] = constants.PELLET_PICKUP_RADIUS
