"""Pygame based renderer for the game client."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

import pygame

from slither import constants
from slither.camera import Camera
from slither.pellet import Food
from slither.snake import Snake
from slither.world import World


class Renderer:
    """Responsible for all drawing tasks. Never touches simulation state."""

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.font = pygame.font.SysFont("arial", 16)
        self.leaderboard_font = pygame.font.SysFont("arial", 16)
        self.title_font = pygame.font.SysFont("arial", 48, bold=True)
        self.background_color = (20, 24, 28)
        self.grid_color = (51, 51, 51)
        self.text_color = (255, 255, 255)

    def clear(self) -> None:
        self.screen.fill(self.background_color)

    def draw_grid(self, camera: Camera) -> None:
        width, height = self.screen.get_size()
        spacing = constants.GRID_SPACING * camera.zoom
        # The world origin sits at screen ``-camera * zoom`` relative to centre.
        offset_x = (width / 2 - camera.position.x * camera.zoom) % spacing
        offset_y = (height / 2 - camera.position.y * camera.zoom) % spacing
        x = offset_x
        while x < width:
            pygame.draw.line(self.screen, self.grid_color, (int(x), 0), (int(x), height))
            x += spacing
        y = offset_y
        while y < height:
            pygame.draw.line(self.screen, self.grid_color, (0, int(y)), (width, int(y)))
            y += spacing

    def draw_consumables(self, items: Iterable[Food], camera: Camera) -> None:
        for item in items:
            x, y = camera.world_to_screen(item.position)
            radius = max(1, int(item.size * camera.zoom + 0.5))
            pygame.draw.circle(self.screen, item.color, (int(x), int(y)), radius)

    def _split_at_seam(self, points: Sequence[Tuple[float, float]]) -> List[List[Tuple[float, float]]]:
        """Break a screen polyline wherever it jumps across the world seam."""

        width, height = self.screen.get_size()
        runs: List[List[Tuple[float, float]]] = []
        current: List[Tuple[float, float]] = []
        for point in points:
            if current:
                last = current[-1]
                if abs(point[0] - last[0]) > width / 2 or abs(point[1] - last[1]) > height / 2:
                    runs.append(current)
                    current = []
            current.append(point)
        if current:
            runs.append(current)
        return runs

    def draw_snakes(self, snakes: Iterable[Snake], camera: Camera) -> None:
        line_width = max(2, int(10 * camera.zoom))
        for snake in snakes:
            if snake.dead:
                continue
            points = [camera.world_to_screen(segment) for segment in snake.segments]
            for run in self._split_at_seam(points):
                if len(run) >= 2:
                    pygame.draw.lines(self.screen, snake.color, False, run, line_width)
            head_x, head_y = points[0]
            pygame.draw.circle(self.screen, snake.color, (int(head_x), int(head_y)), line_width)
            label = self.font.render(f"{snake.name} ({snake.score})", True, snake.color)
            self.screen.blit(label, (head_x - label.get_width() / 2, head_y - 20 - label.get_height()))

    def draw_leaderboard(self, entries: List[Tuple[str, int]]) -> None:
        x = self.screen.get_width() - 200
        y = 20
        title = self.leaderboard_font.render("Leaderboard", True, self.text_color)
        self.screen.blit(title, (x, y))
        y += 24
        for index, (name, score) in enumerate(entries):
            text = f"{index + 1}. {name}: {score}"
            surface = self.leaderboard_font.render(text, True, (220, 220, 220))
            self.screen.blit(surface, (x, y))
            y += 18

    def draw_world(self, world: World, leaderboard: List[Tuple[str, int]]) -> None:
        camera = world.camera
        self.draw_grid(camera)
        self.draw_consumables(world.consumables(), camera)
        self.draw_snakes(world.snakes, camera)
        self.draw_leaderboard(leaderboard)

    def _draw_centered(self, text: str, font: pygame.font.Font, color, dy: int = 0) -> None:
        surface = font.render(text, True, color)
        rect = surface.get_rect(center=(self.screen.get_width() // 2, self.screen.get_height() // 2 + dy))
        self.screen.blit(surface, rect)

    def draw_start_screen(self, name: str, message: Optional[str] = None) -> None:
        self._draw_centered("Slither Solo", self.title_font, (120, 255, 120), dy=-80)
        self._draw_centered(f"Name: {name}_", self.font, self.text_color)
        self._draw_centered("Press Enter to start", self.font, (180, 180, 180), dy=30)
        if message:
            self._draw_centered(message, self.font, (255, 80, 80), dy=60)

    def draw_game_over(self, player: Optional[Snake]) -> None:
        overlay = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 150))
        self.screen.blit(overlay, (0, 0))
        self._draw_centered("Game Over!", self.title_font, (255, 80, 80))
        if player is not None:
            self._draw_centered(f"Final mass: {player.score}", self.font, self.text_color, dy=45)
        self._draw_centered("Press Enter to play again", self.font, (180, 180, 180), dy=70)

    def present(self) -> None:
        pygame.display.flip()
