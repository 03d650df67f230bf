# ringrunner/game/render.py
from __future__ import annotations
from typing import Optional, Protocol, Sequence, Tuple

import numpy as np
import pygame

from .config import COLOR_BG, COLOR_FG, COLOR_GRASS, COLOR_ACTOR, COLOR_RING

Point = Tuple[float, float]


class Renderer(Protocol):
    """Draw requests issued by the world once per tick, in paint order."""
    def clear(self) -> None: ...
    def draw_landscape(self, points: Sequence[Point]) -> None: ...
    def draw_actor(self, center: Point, radius: float) -> None: ...
    def draw_ring(self, center: Point, outer_radius: float, inner_radius: float) -> None: ...
    def draw_score(self, score: int) -> None: ...
    def present(self) -> None: ...


class PygameRenderer:
    """Renders onto a pygame Surface (the display, or an offscreen one)."""

    def __init__(self, surface: pygame.Surface, flip: bool = True):
        self.surface = surface
        self.flip = flip
        self._font: Optional[pygame.font.Font] = None

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.SysFont("jetbrainsmono", 24)
        return self._font

    def clear(self):
        self.surface.fill(COLOR_BG)

    def draw_landscape(self, points):
        pygame.draw.polygon(self.surface, COLOR_GRASS, points)

    def draw_actor(self, center, radius):
        pygame.draw.circle(self.surface, COLOR_ACTOR, center, radius)

    def draw_ring(self, center, outer_radius, inner_radius):
        if inner_radius > 0:
            width = max(1, int(round(outer_radius - inner_radius)))
            pygame.draw.circle(self.surface, COLOR_RING, center, outer_radius, width)
        else:
            pygame.draw.circle(self.surface, COLOR_RING, center, outer_radius)

    def draw_score(self, score):
        self.surface.blit(self.font.render(f"Score: {score}", True, COLOR_FG), (12, 10))

    def present(self):
        if self.flip:
            pygame.display.flip()

    def to_array(self) -> np.ndarray:
        """(H, W, 3) uint8 copy of the surface."""
        arr = pygame.surfarray.array3d(self.surface)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))
