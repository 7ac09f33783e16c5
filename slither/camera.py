"""Viewport camera that follows the player's head."""

from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import TYPE_CHECKING

from . import constants, utils

if TYPE_CHECKING:
    from .snake import Snake


def zoom_for_mass(mass: float) -> float:
    """Zoom factor for a snake of ``mass``; never drops below ``MIN_ZOOM``."""

    return max(constants.MIN_ZOOM, 1.0 / math.log(mass + 1))


@dataclass
class Camera:
    """Maps world coordinates to screen coordinates.

    The camera only ever reads simulation state. Offsets are taken the short
    way round the torus so the view stays continuous across the world seam.
    """

    viewport: tuple[int, int] = (1280, 720)
    world_size: float = constants.WORLD_SIZE
    position: utils.Vec2 = field(default_factory=lambda: utils.Vec2(0.0, 0.0))
    zoom: float = 1.0

    def update(self, player: "Snake") -> None:
        """Recentre on ``player`` and recompute the zoom from its mass."""

        self.position = player.position.copy()
        self.zoom = zoom_for_mass(player.mass)

    def world_to_screen(self, point: utils.Vec2) -> tuple[float, float]:
        dx = utils.wrap_delta(point.x - self.position.x, self.world_size)
        dy = utils.wrap_delta(point.y - self.position.y, self.world_size)
        return (
            self.viewport[0] / 2 + dx * self.zoom,
            self.viewport[1] / 2 + dy * self.zoom,
        )

    def screen_to_world(self, x: float, y: float) -> utils.Vec2:
        """Inverse of :meth:`world_to_screen`, used by the input adapter."""

        world = utils.Vec2(
            self.position.x + (x - self.viewport[0] / 2) / self.zoom,
            self.position.y + (y - self.viewport[1] / 2) / self.zoom,
        )
        return utils.wrap_position(world, self.world_size)
