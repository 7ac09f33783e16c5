"""Translate pygame events into player commands."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import pygame

from slither import constants, utils
from slither.camera import Camera
from slither.snake import Snake
from slither.world import World

BOOST_MOUSE_BUTTON = 3


@dataclass
class InputState:
    """What happened during one frame's worth of events."""

    angle: Optional[float] = None
    boost: Optional[bool] = None
    submit: bool = False
    quit: bool = False


class InputManager:
    """Turn pointer, mouse button and keyboard events into player input.

    While a game is running the pointer steers and the right mouse button or
    space holds boost. Outside a game the keyboard edits the display name.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name[: constants.NAME_MAX_LENGTH]

    @staticmethod
    def heading_from_pointer(mouse_pos: Tuple[int, int], camera: Camera, player: Snake) -> float:
        target = camera.screen_to_world(*mouse_pos)
        dx = utils.wrap_delta(target.x - player.position.x, camera.world_size)
        dy = utils.wrap_delta(target.y - player.position.y, camera.world_size)
        return math.atan2(dy, dx)

    def _edit_name(self, event: pygame.event.Event) -> None:
        if event.key == pygame.K_BACKSPACE:
            self.name = self.name[:-1]
        elif event.unicode and event.unicode.isprintable() and len(self.name) < constants.NAME_MAX_LENGTH:
            self.name += event.unicode

    def process(self, events: Iterable[pygame.event.Event], world: World, playing: bool) -> InputState:
        """Consume ``events`` and apply steering and boost to the player when ``playing``."""

        state = InputState()
        for event in events:
            if event.type == pygame.QUIT:
                state.quit = True
            elif event.type == pygame.MOUSEMOTION:
                if playing and world.player is not None:
                    state.angle = self.heading_from_pointer(event.pos, world.camera, world.player)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == BOOST_MOUSE_BUTTON:
                if playing:
                    state.boost = True
            elif event.type == pygame.MOUSEBUTTONUP and event.button == BOOST_MOUSE_BUTTON:
                if playing:
                    state.boost = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    state.quit = True
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    state.submit = True
                elif playing and event.key == pygame.K_SPACE:
                    state.boost = True
                elif not playing:
                    self._edit_name(event)
            elif event.type == pygame.KEYUP and event.key == pygame.K_SPACE and playing:
                state.boost = False

        if playing:
            world.set_player_input(state.angle, state.boost)
        return state
