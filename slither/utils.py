"""Geometry primitives used by the simulation core."""

from __future__ import annotations

from dataclasses import dataclass
import math
import random
from typing import Optional


@dataclass
class Vec2:
    """A 2D point or direction in world units.

    Besides arithmetic it offers the two queries the step leans on every
    tick: ``distance_sq`` for radius checks and ``angle_to`` for steering.
    Both take an optional ``world_size`` and then measure the short way round
    the torus. ``from_angle`` builds the unit heading for an angle.
    """

    x: float
    y: float

    def copy(self) -> "Vec2":
        """Return a shallow copy of the vector."""

        return Vec2(self.x, self.y)

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def length(self) -> float:
        """Return the Euclidean length of the vector."""

        return math.hypot(self.x, self.y)

    def distance_to(self, other: "Vec2") -> float:
        """Return the distance between this vector and ``other``."""

        return (self - other).length()

    def offset_to(self, other: "Vec2", world_size: Optional[float] = None) -> tuple[float, float]:
        """Return ``other - self`` per axis, wrapped to the shortest offset if ``world_size`` is given."""

        dx = other.x - self.x
        dy = other.y - self.y
        if world_size is not None:
            dx = wrap_delta(dx, world_size)
            dy = wrap_delta(dy, world_size)
        return dx, dy

    def distance_sq(self, other: "Vec2", world_size: Optional[float] = None) -> float:
        """Return the squared distance to ``other``; cheaper for radius tests."""

        dx, dy = self.offset_to(other, world_size)
        return dx * dx + dy * dy

    def angle_to(self, other: "Vec2", world_size: Optional[float] = None) -> float:
        """Return the heading angle in radians pointing from here to ``other``."""

        dx, dy = self.offset_to(other, world_size)
        return math.atan2(dy, dx)

    def to_tuple(self) -> tuple[float, float]:
        """Return the vector as an ``(x, y)`` tuple."""

        return self.x, self.y

    @classmethod
    def from_angle(cls, angle: float) -> "Vec2":
        """Return the unit vector pointing along ``angle``."""

        return cls(math.cos(angle), math.sin(angle))


def within(a: Vec2, b: Vec2, radius: float, world_size: Optional[float] = None) -> bool:
    """Return ``True`` if ``a`` and ``b`` are at most ``radius`` apart."""

    return a.distance_sq(b, world_size) <= radius * radius


def wrap_coord(value: float, size: float) -> float:
    """Wrap a single coordinate into ``[0, size)``."""

    wrapped = ((value % size) + size) % size
    # Tiny negative inputs can round up to exactly ``size``.
    if wrapped >= size:
        return 0.0
    return wrapped


def wrap_position(position: Vec2, size: float) -> Vec2:
    """Wrap ``position`` onto the toroidal world of side ``size``."""

    return Vec2(wrap_coord(position.x, size), wrap_coord(position.y, size))


def wrap_delta(delta: float, size: float) -> float:
    """Return the shortest signed offset equivalent to ``delta`` on a torus."""

    half = size / 2
    return (delta + half) % size - half


def random_point_in_world(rng: random.Random, size: float) -> Vec2:
    """Return a uniformly random point inside the square world."""

    return Vec2(rng.random() * size, rng.random() * size)


def random_color(rng: random.Random) -> tuple[int, int, int]:
    """Return a bright-ish random RGB colour."""

    return tuple(rng.randint(64, 240) for _ in range(3))  # type: ignore[return-value]
