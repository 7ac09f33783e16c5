"""Ranked view of the live snakes."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from . import constants
from .snake import Snake


def rank(snakes: Iterable[Snake], limit: int = constants.LEADERBOARD_SIZE) -> List[Tuple[str, int]]:
    """Return ``(name, score)`` pairs, best first, at most ``limit`` long.

    ``sorted`` is stable, so snakes with equal scores keep their input order.
    """

    entries = [(snake.name, snake.score) for snake in snakes if not snake.dead]
    entries = sorted(entries, key=lambda entry: entry[1], reverse=True)
    return entries[:limit]
