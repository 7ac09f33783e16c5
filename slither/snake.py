"""Snake entity implementation."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
import itertools
import math
import random
from typing import Deque, List

from . import constants, utils
from .pellet import Pellet
from .steering import ManualSteering, Steering

_id_counter = itertools.count(1)


@dataclass
class Snake:
    """A player or bot snake.

    Both variants share this record; what differs is the ``steering`` object
    that supplies the heading each tick. The body is the list of historical
    head positions, most recent first, and doubles as collision geometry.
    """

    name: str
    color: tuple[int, int, int]
    position: utils.Vec2
    angle: float = 0.0
    mass: float = constants.START_MASS
    is_player: bool = False
    steering: Steering = field(default_factory=ManualSteering)
    boosting: bool = False
    boost_timer: int = 0
    dead: bool = False
    id: int = field(default_factory=lambda: next(_id_counter))

    def __post_init__(self) -> None:
        if self.mass < constants.MIN_MASS:
            raise ValueError(f"Snake mass must be at least {constants.MIN_MASS}, got {self.mass}")
        self.position = self.position.copy()
        self.heading = utils.Vec2.from_angle(self.angle)
        self.segments: Deque[utils.Vec2] = deque([self.position.copy()])

    @property
    def length(self) -> int:
        """Number of body segments retained for the current mass."""

        return math.floor(self.mass / 2)

    @property
    def score(self) -> int:
        return math.floor(self.mass)

    @property
    def head(self) -> utils.Vec2:
        return self.segments[0]

    @property
    def tail(self) -> utils.Vec2:
        return self.segments[-1]

    @property
    def speed(self) -> float:
        """Distance travelled per tick at the current mass and boost state."""

        speed = constants.BASE_SPEED + constants.SPEED_LOG_FACTOR * math.log(self.mass)
        if self.boosting:
            speed *= constants.BOOST_MULTIPLIER
        return speed

    def body(self) -> List[utils.Vec2]:
        """Return the non-head segments, the part other snakes can strike."""

        return list(itertools.islice(self.segments, 1, None))

    def set_direction(self, angle: float) -> None:
        """Point the snake along ``angle`` without moving it."""

        self.angle = angle
        self.heading = utils.Vec2.from_angle(angle)

    def start_boost(self) -> bool:
        """Begin a boost; refused while dead or at minimum mass."""

        if self.dead or self.mass <= constants.MIN_MASS:
            return False
        self.boosting = True
        self.boost_timer = 0
        return True

    def stop_boost(self) -> None:
        self.boosting = False

    def grow(self, amount: float) -> None:
        self.mass += amount

    def _clamp_mass(self) -> None:
        if self.mass < constants.MIN_MASS:
            self.mass = constants.MIN_MASS

    def update(self, world_size: float = constants.WORLD_SIZE) -> None:
        """Advance the snake by one tick."""

        if self.dead:
            return

        if self.boosting and (
            self.boost_timer >= constants.BOOST_MAX_TICKS or self.mass <= constants.MIN_MASS
        ):
            self.boosting = False

        speed = self.speed
        if self.boosting:
            self.mass -= constants.BOOST_DRAIN_PER_TICK
            self.boost_timer += 1
            self._clamp_mass()

        if self.mass > constants.MIN_MASS:
            self.mass -= constants.PASSIVE_DECAY
            self._clamp_mass()

        self.position = utils.wrap_position(self.position + self.heading * speed, world_size)
        self.segments.appendleft(self.position.copy())
        while len(self.segments) > self.length:
            self.segments.pop()

    def die(self, rng: random.Random, world_size: float = constants.WORLD_SIZE) -> List[Pellet]:
        """Mark the snake dead and return the ring of pellets it leaves behind.

        ``floor(mass / 2)`` pellets are spread evenly on a circle whose radius
        is drawn from ``[DEATH_RING_MIN_RADIUS, DEATH_RING_MAX_RADIUS]``. The
        snake stays in its owner's collection; removing it is the caller's job.
        """

        if self.dead:
            return []
        self.dead = True
        self.boosting = False

        count = self.length
        radius = rng.uniform(constants.DEATH_RING_MIN_RADIUS, constants.DEATH_RING_MAX_RADIUS)
        pellets: List[Pellet] = []
        for index in range(count):
            offset = utils.Vec2.from_angle(2 * math.pi * index / count) * radius
            position = utils.wrap_position(self.position + offset, world_size)
            pellets.append(Pellet.from_position(position, self.color))
        return pellets
