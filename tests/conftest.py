import random

import pytest

from slither.pellet import Food, Pellet
from slither.utils import Vec2
from slither.world import World


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def empty_world():
    """A world with no snakes and a little food parked in a far corner."""

    world = World(world_size=2000, food_count=3, pellet_count=2, bot_count=0, seed=42)
    world.foods = [Food.from_position(Vec2(1900 + i, 1900)) for i in range(3)]
    world.pellets = [Pellet.from_position(Vec2(1950 + i, 1950)) for i in range(2)]
    return world


@pytest.fixture
def world():
    world = World(world_size=2000, food_count=30, pellet_count=20, bot_count=5, seed=3)
    world.reset("Tester")
    return world
