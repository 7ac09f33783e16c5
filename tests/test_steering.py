import math
import random

import pytest

from slither import constants
from slither.pellet import Food, Pellet
from slither.steering import ManualSteering, ScriptedSteering
from slither.utils import Vec2


class AlwaysRoll(random.Random):
    def random(self):
        return 0.0


class NeverRoll(random.Random):
    def random(self):
        return 0.99


def test_heads_for_nearest_consumable(empty_world):
    bot = empty_world.add_bot("bot", position=Vec2(500.0, 500.0))
    empty_world.foods.append(Food.from_position(Vec2(500.0, 700.0)))
    empty_world.drops.append(Pellet.from_position(Vec2(400.0, 500.0)))
    steering = bot.steering
    assert steering.choose_heading(bot, empty_world) == pytest.approx(math.pi)


def test_steer_points_snake_at_target(empty_world):
    bot = empty_world.add_bot("bot", position=Vec2(500.0, 500.0))
    empty_world.pellets.append(Pellet.from_position(Vec2(500.0, 560.0)))
    bot.steering.steer(bot, empty_world)
    assert bot.angle == pytest.approx(math.pi / 2)
    assert bot.heading.y == pytest.approx(1.0)


def test_no_targets_keeps_heading(empty_world):
    empty_world.foods = []
    empty_world.pellets = []
    bot = empty_world.add_bot("bot", position=Vec2(500.0, 500.0), angle=1.25)
    assert bot.steering.choose_heading(bot, empty_world) is None
    bot.steering.steer(bot, empty_world)
    assert bot.angle == 1.25


def test_bot_boosts_when_heavy_and_lucky(empty_world):
    empty_world.rng = AlwaysRoll()
    bot = empty_world.add_bot("bot", position=Vec2(500.0, 500.0), mass=30.0)
    steering = bot.steering
    steering.steer(bot, empty_world)
    assert bot.boosting
    assert steering.boost_cooldown == constants.BOT_BOOST_COOLDOWN

    bot.stop_boost()
    steering.steer(bot, empty_world)
    assert not bot.boosting
    assert steering.boost_cooldown == constants.BOT_BOOST_COOLDOWN - 1


def test_cooldown_ticks_down_while_boosting(empty_world):
    empty_world.rng = AlwaysRoll()
    bot = empty_world.add_bot("bot", position=Vec2(500.0, 500.0), mass=30.0)
    steering = bot.steering
    steering.steer(bot, empty_world)
    for _ in range(10):
        steering.steer(bot, empty_world)
    assert bot.boosting
    assert steering.boost_cooldown == constants.BOT_BOOST_COOLDOWN - 10


def test_bot_boosts_again_after_cooldown(empty_world):
    empty_world.rng = AlwaysRoll()
    bot = empty_world.add_bot("bot", position=Vec2(500.0, 500.0), mass=40.0)
    steering = ScriptedSteering(boost_cooldown=1)
    steering.steer(bot, empty_world)
    assert bot.boosting
    assert steering.boost_cooldown == constants.BOT_BOOST_COOLDOWN


@pytest.mark.parametrize("rng, mass", [(AlwaysRoll(), 20.0), (NeverRoll(), 30.0)])
def test_bot_does_not_boost(empty_world, rng, mass):
    empty_world.rng = rng
    bot = empty_world.add_bot("bot", position=Vec2(500.0, 500.0), mass=mass)
    bot.steering.steer(bot, empty_world)
    assert not bot.boosting
    assert bot.steering.boost_cooldown == 0


def test_manual_steering_leaves_heading_alone(empty_world):
    player = empty_world.add_snake("me", position=Vec2(500.0, 500.0), angle=2.0)
    assert isinstance(player.steering, ManualSteering)
    player.steering.steer(player, empty_world)
    assert player.angle == 2.0


def test_targets_across_seam(empty_world):
    bot = empty_world.add_bot("bot", position=Vec2(1990.0, 500.0))
    empty_world.foods.append(Food.from_position(Vec2(1900.0, 500.0)))
    empty_world.foods.append(Food.from_position(Vec2(10.0, 500.0)))
    assert bot.steering.choose_heading(bot, empty_world) == pytest.approx(0.0)
