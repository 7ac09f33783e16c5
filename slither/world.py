"""Game world simulation."""

from __future__ import annotations

import itertools
import logging
import math
import random
from typing import Iterator, List, Optional

from . import collision, constants, utils
from .camera import Camera
from .pellet import Food, Pellet
from .snake import Snake
from .steering import ScriptedSteering, Steering


class World:
    """Holds all entities and advances the simulation on every tick.

    Ambient food and pellets are kept at a constant count: anything eaten is
    replaced straight away at a random spot. Pellets dropped by dying snakes
    live in ``drops`` and are not replaced.
    """

    def __init__(
        self,
        *,
        world_size: float = constants.WORLD_SIZE,
        food_count: int = constants.FOOD_COUNT,
        pellet_count: int = constants.PELLET_COUNT,
        bot_count: int = constants.BOT_COUNT,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        viewport: tuple[int, int] = (1280, 720),
    ) -> None:
        self.world_size = world_size
        self.food_count = food_count
        self.pellet_count = pellet_count
        self.bot_count = bot_count
        self.rng = rng if rng is not None else random.Random(seed)
        self.tick: int = 0
        self.snakes: List[Snake] = []
        self.foods: List[Food] = []
        self.pellets: List[Pellet] = []
        self.drops: List[Pellet] = []
        self.player: Optional[Snake] = None
        self.camera = Camera(viewport=viewport, world_size=world_size)

    def reset(self, player_name: str) -> Snake:
        """Clear everything and spawn the player, food, pellets and bots."""

        self.tick = 0
        self.snakes = []
        self.drops = []
        self.foods = [Food.spawn_random(self.rng, self.world_size) for _ in range(self.food_count)]
        self.pellets = [Pellet.spawn_random(self.rng, self.world_size) for _ in range(self.pellet_count)]

        center = utils.Vec2(self.world_size / 2, self.world_size / 2)
        self.player = self.add_snake(
            player_name, color=constants.PLAYER_COLOR, position=center, is_player=True
        )
        for index in range(self.bot_count):
            self.add_bot(f"Bot{index + 1}")

        self.camera.update(self.player)
        logging.info(
            "World reset: %d food, %d pellets, %d bots",
            len(self.foods),
            len(self.pellets),
            self.bot_count,
        )
        return self.player

    def add_snake(
        self,
        name: str,
        *,
        color: Optional[tuple[int, int, int]] = None,
        position: Optional[utils.Vec2] = None,
        angle: Optional[float] = None,
        mass: float = constants.START_MASS,
        is_player: bool = False,
        steering: Optional[Steering] = None,
    ) -> Snake:
        snake = Snake(
            name=name,
            color=color if color is not None else utils.random_color(self.rng),
            position=position if position is not None else utils.random_point_in_world(self.rng, self.world_size),
            angle=angle if angle is not None else 0.0,
            mass=mass,
            is_player=is_player,
        )
        if steering is not None:
            snake.steering = steering
        self.snakes.append(snake)
        return snake

    def add_bot(self, name: str, **kwargs) -> Snake:
        kwargs.setdefault("angle", self.rng.random() * 2 * math.pi)
        kwargs.setdefault("steering", ScriptedSteering())
        return self.add_snake(name, **kwargs)

    def live_snakes(self) -> List[Snake]:
        return [snake for snake in self.snakes if not snake.dead]

    def consumables(self) -> Iterator[Food]:
        return itertools.chain(self.foods, self.pellets, self.drops)

    @property
    def player_dead(self) -> bool:
        return self.player is not None and self.player.dead

    def set_player_input(self, angle: Optional[float] = None, boost: Optional[bool] = None) -> None:
        """Apply input adapter changes to the player; ignored once it is dead."""

        player = self.player
        if player is None or player.dead:
            return
        if angle is not None:
            player.set_direction(angle)
        if boost is True:
            player.start_boost()
        elif boost is False:
            player.stop_boost()

    def _handle_consumption(self, snakes: List[Snake]) -> None:
        for snake in snakes:
            head = snake.head
            for index in collision.consumed_items(head, self.foods, self.world_size):
                snake.grow(Food.value)
                self.foods[index] = Food.spawn_random(self.rng, self.world_size)
            for index in collision.consumed_items(head, self.pellets, self.world_size):
                snake.grow(Pellet.value)
                self.pellets[index] = Pellet.spawn_random(self.rng, self.world_size)
            eaten = set(collision.consumed_items(head, self.drops, self.world_size))
            if eaten:
                snake.grow(Pellet.value * len(eaten))
                self.drops = [drop for index, drop in enumerate(self.drops) if index not in eaten]

    def _resolve_collisions(self, snakes: List[Snake]) -> None:
        # Detect everything against the same state, then apply.
        strikes = collision.detect_strikes(snakes, self.world_size)
        engulfs = collision.detect_engulfs(snakes, self.world_size)

        doomed = {attacker.id for attacker, _ in strikes}
        doomed.update(engulf.prey.id for engulf in engulfs)

        for attacker, victim in strikes:
            logging.debug("%s struck %s and died", attacker.name, victim.name)
        for engulf in engulfs:
            engulf.predator.grow(engulf.gain)
            logging.debug("%s engulfed %s (+%.2f)", engulf.predator.name, engulf.prey.name, engulf.gain)

        for snake in snakes:
            if snake.id in doomed:
                self.drops.extend(snake.die(self.rng, self.world_size))

    def step(self) -> None:
        """Advance the world by one tick."""

        self.tick += 1
        active = self.live_snakes()
        for snake in active:
            snake.steering.steer(snake, self)
            snake.update(self.world_size)

        self._handle_consumption(active)
        self._resolve_collisions(active)

        # Deferred removal keeps the lists above stable while they are scanned.
        self.snakes = [snake for snake in self.snakes if not snake.dead]

        if self.player is not None and not self.player.dead:
            self.camera.update(self.player)
