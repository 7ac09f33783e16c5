"""Collision helpers for the simulation step.

Every detector here only reads snake state, so callers can run them all
against the same pre-pass positions and apply the outcomes afterwards.
Distances are measured on the torus of side ``world_size``, so contacts
across the world seam count.
"""

from __future__ import annotations

from typing import Iterable, List, NamedTuple, Sequence, Tuple, TypeVar

from . import constants, utils
from .pellet import Food
from .snake import Snake

ItemT = TypeVar("ItemT", bound=Food)


class Engulf(NamedTuple):
    """A predator swallowing a smaller prey, with the mass it gains."""

    predator: Snake
    prey: Snake
    gain: float


def _live(snakes: Iterable[Snake]) -> List[Snake]:
    return [snake for snake in snakes if not snake.dead]


def consumed_items(
    head: utils.Vec2, items: Sequence[ItemT], world_size: float = constants.WORLD_SIZE
) -> List[int]:
    """Return the indices of ``items`` within pickup range of ``head``."""

    return [
        index
        for index, item in enumerate(items)
        if utils.within(head, item.position, item.pickup_radius, world_size)
    ]


def detect_strikes(
    snakes: Iterable[Snake], world_size: float = constants.WORLD_SIZE
) -> List[Tuple[Snake, Snake]]:
    """Return ``(attacker, victim)`` pairs where the attacker's head hit the victim's body.

    The attacker is the one that dies; relative mass does not matter.
    """

    snakes = _live(snakes)
    strikes: List[Tuple[Snake, Snake]] = []
    for attacker in snakes:
        head = attacker.head
        for victim in snakes:
            if attacker is victim:
                continue
            if any(
                utils.within(head, segment, constants.STRIKE_RADIUS, world_size)
                for segment in victim.body()
            ):
                strikes.append((attacker, victim))
    return strikes


def detect_engulfs(snakes: Iterable[Snake], world_size: float = constants.WORLD_SIZE) -> List[Engulf]:
    """Return every predator close enough to a smaller snake's tail to swallow it."""

    snakes = _live(snakes)
    engulfs: List[Engulf] = []
    for predator in snakes:
        for prey in snakes:
            if predator is prey:
                continue
            if predator.mass <= prey.mass * constants.ENGULF_MASS_RATIO:
                continue
            if utils.within(predator.head, prey.tail, constants.ENGULF_RADIUS, world_size):
                engulfs.append(Engulf(predator, prey, prey.mass * constants.ENGULF_GAIN))
    return engulfs
