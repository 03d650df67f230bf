# ringrunner/game/landscape.py
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .config import (
    WIDTH, HEIGHT, LAND_AMPLITUDE, LAND_FREQUENCY, LAND_SPEED, LAND_STRIDE,
    require, require_finite
)


@dataclass
class Landscape:
    """
    Endless rolling hills: y(x) = baseline + amplitude * sin(frequency * x + phase).
    The phase grows by `speed` each tick, which scrolls the wave left by
    speed / frequency px per tick.
    """
    width: int = WIDTH
    height: int = HEIGHT
    amplitude: float = LAND_AMPLITUDE
    frequency: float = LAND_FREQUENCY
    speed: float = LAND_SPEED
    stride: int = LAND_STRIDE
    phase: float = 0.0

    def __post_init__(self):
        require_finite(width=self.width, height=self.height, amplitude=self.amplitude,
                       frequency=self.frequency, speed=self.speed, phase=self.phase)
        require(self.width > 0 and self.height > 0, "surface dimensions must be positive")
        require(self.amplitude >= 0, "amplitude must be >= 0")
        require(self.frequency > 0, "frequency must be > 0")
        require(self.speed >= 0, "speed must be >= 0")
        require(self.stride >= 1, "stride must be >= 1")

    @property
    def baseline(self) -> float:
        return self.height - self.height / 3

    @property
    def scroll_px(self) -> float:
        """Horizontal terrain motion per tick (px)."""
        return self.speed / self.frequency

    def advance(self):
        self.phase += self.speed

    def height_at(self, x: float) -> float:
        return self.baseline + self.amplitude * math.sin(self.frequency * x + self.phase)

    def silhouette(self) -> List[Tuple[float, float]]:
        """Closed polygon: bottom-left, surface samples left->right, bottom-right."""
        xs = np.arange(0, self.width + 1, self.stride, dtype=np.float64)
        if xs[-1] != self.width:
            xs = np.append(xs, float(self.width))
        ys = self.baseline + self.amplitude * np.sin(self.frequency * xs + self.phase)
        pts = [(0.0, float(self.height))]
        pts.extend(zip(xs.tolist(), ys.tolist()))
        pts.append((float(self.width), float(self.height)))
        return pts

    def draw(self, renderer):
        renderer.draw_landscape(self.silhouette())
