# ringrunner/game/world.py
from __future__ import annotations
import logging
from typing import Any, Dict, Optional

from .config import WIDTH, HEIGHT, FOLLOW_TERRAIN, ACTOR_X, ACTOR_RADIUS
from .actor import Actor
from .landscape import Landscape
from .rings import RingStream
from .sound import NullSound, SoundEmitter

logger = logging.getLogger(__name__)


class World:
    """
    All mutable simulation state for one session. step() advances one tick
    in fixed order: landscape -> actor -> rings.
    """
    def __init__(self,
                 width: int = WIDTH,
                 height: int = HEIGHT,
                 seed: int | None = None,
                 sound: Optional[SoundEmitter] = None,
                 follow_terrain: bool = FOLLOW_TERRAIN,
                 actor_x: float = ACTOR_X,
                 actor_radius: float = ACTOR_RADIUS):
        self.sound = sound if sound is not None else NullSound()
        self.landscape = Landscape(width=width, height=height)
        self.actor = Actor.at_rest(
            self.landscape.baseline,
            x=float(actor_x),
            radius=float(actor_radius),
            sound=self.sound,
            surface=self.landscape.height_at if follow_terrain else None,
        )
        self.rings = RingStream(
            baseline=self.landscape.baseline,
            actor_radius=self.actor.radius,
            scroll_px=self.landscape.scroll_px,
            width=width,
            sound=self.sound,
            seed=seed,
        )
        self.seed = self.rings.seed
        self.score = 0
        self.ticks = 0
        self.jump_pending = False
        logger.info("World %dx%d seed=%s follow_terrain=%s",
                    width, height, self.seed, follow_terrain)

    def request_jump(self):
        """Queue a jump for the next tick (input arrives between ticks)."""
        self.jump_pending = True

    def step(self) -> int:
        """Advance one tick. Returns points earned."""
        self.landscape.advance()

        if self.jump_pending:
            self.jump_pending = False
            self.actor.try_jump()
        self.actor.update_physics()

        points = self.rings.update(self.actor)
        self.score += points
        self.ticks += 1
        return points

    def draw(self, renderer):
        self.landscape.draw(renderer)
        self.actor.draw(renderer)
        self.rings.draw(renderer)
        renderer.draw_score(self.score)

    def snapshot(self) -> Dict[str, Any]:
        a = self.actor
        return {
            "ticks": self.ticks,
            "phase": self.landscape.phase,
            "actor": {"x": a.x, "y": a.y, "vy": a.vy, "radius": a.radius,
                      "grounded": a.grounded},
            "rings": [(r.x, r.y, r.outer_radius, r.inner_radius, r.collected)
                      for r in self.rings.rings],
            "score": self.score,
        }
