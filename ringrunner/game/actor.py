# ringrunner/game/actor.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from .config import (
    ACTOR_X, ACTOR_RADIUS, GRAVITY, LIFT, TERRAIN_SNAP_PX, require, require_finite
)
from .sound import NullSound, SoundEmitter, SoundKind

logger = logging.getLogger(__name__)


@dataclass
class Actor:
    """
    The jumping ball. x is fixed, the world scrolls past it.
    - y grows downward; gravity > 0 pulls down, lift < 0 kicks up
    - rests on `baseline - radius`, or on the sampled terrain when `surface` is set
    """
    y: float
    baseline: float
    x: float = ACTOR_X
    radius: float = ACTOR_RADIUS
    vy: float = 0.0
    grounded: bool = False
    gravity: float = GRAVITY
    lift: float = LIFT
    snap_px: float = TERRAIN_SNAP_PX
    sound: SoundEmitter = field(default_factory=NullSound, repr=False)
    surface: Optional[Callable[[float], float]] = field(default=None, repr=False)

    def __post_init__(self):
        require_finite(x=self.x, y=self.y, baseline=self.baseline, radius=self.radius,
                       gravity=self.gravity, lift=self.lift)
        require(self.radius > 0, "actor radius must be > 0")
        require(self.gravity > 0, "gravity must be > 0 (y axis points down)")
        require(self.lift < 0, "lift must be < 0 (jump goes up)")
        require(self.snap_px >= 0, "snap_px must be >= 0")

    @classmethod
    def at_rest(cls, baseline: float, **kwargs) -> "Actor":
        """Actor standing on its ground level with zero velocity."""
        actor = cls(y=0.0, baseline=baseline, **kwargs)
        actor.y = actor.ground_level
        actor.vy = 0.0
        actor.grounded = True
        return actor

    @property
    def ground_level(self) -> float:
        surface_y = self.surface(self.x) if self.surface is not None else self.baseline
        return surface_y - self.radius

    def try_jump(self) -> bool:
        """Jump only from the ground. Returns True if performed."""
        if not self.grounded:
            return False
        self.vy = self.lift
        self.grounded = False
        self.sound.emit(SoundKind.JUMP)
        logger.debug("jump at y=%.1f", self.y)
        return True

    def update_physics(self):
        """One tick of integration, then clamp to the ground."""
        was_grounded = self.grounded

        self.vy += self.gravity
        self.y += self.vy

        ground = self.ground_level
        if self.y >= ground:
            self.y = ground
            self.vy = 0.0
            self.grounded = True
        elif was_grounded and self.surface is not None and ground - self.y <= self.snap_px:
            # terrain fell away under a resting actor: follow it down
            self.y = ground
            self.vy = 0.0
            self.grounded = True
        else:
            self.grounded = False

    def draw(self, renderer):
        renderer.draw_actor((self.x, self.y), self.radius)
