# ringrunner/game/rings.py
from __future__ import annotations
import logging
import math
import random
from dataclasses import dataclass
from typing import List, Optional

from .config import (
    WIDTH, RING_OUTER_RADIUS, RING_INNER_RADIUS, RING_SPACING, RING_MIN_COUNT,
    RING_REACH, RING_AWARD, require, require_finite
)
from .sound import NullSound, SoundEmitter, SoundKind

logger = logging.getLogger(__name__)


@dataclass
class Ring:
    x: float
    y: float
    outer_radius: float = RING_OUTER_RADIUS
    inner_radius: float = RING_INNER_RADIUS
    collected: bool = False


def ring_hits_actor(ring: Ring, actor) -> bool:
    """
    Strict distance test between centers. With a hole (inner_radius > 0) the
    actor must touch the ring body, not sit inside the hollow center.
    """
    d = math.hypot(ring.x - actor.x, ring.y - actor.y)
    if not d < actor.radius + ring.outer_radius:
        return False
    if ring.inner_radius > 0 and not d > ring.inner_radius - actor.radius:
        return False
    return True


class RingStream:
    """
    Endless line of evenly spaced rings scrolling left at landscape speed.
    Keeps at least `min_count` rings alive and the tail within one spacing
    of the right edge.
    """
    def __init__(self,
                 baseline: float,
                 actor_radius: float,
                 scroll_px: float,
                 width: int = WIDTH,
                 spacing: float = RING_SPACING,
                 min_count: int = RING_MIN_COUNT,
                 outer_radius: float = RING_OUTER_RADIUS,
                 inner_radius: float = RING_INNER_RADIUS,
                 reach: float = RING_REACH,
                 award: int = RING_AWARD,
                 sound: Optional[SoundEmitter] = None,
                 seed: int | None = None):
        require_finite(baseline=baseline, actor_radius=actor_radius, scroll_px=scroll_px,
                       width=width, spacing=spacing, outer_radius=outer_radius,
                       inner_radius=inner_radius, reach=reach)
        require(width > 0, "width must be > 0")
        require(spacing > 0, "ring spacing must be > 0")
        require(min_count >= 1, "min_count must be >= 1")
        require(actor_radius > 0, "actor radius must be > 0")
        require(outer_radius > 0, "ring outer radius must be > 0")
        require(0 <= inner_radius < outer_radius, "ring inner radius must be in [0, outer)")
        require(reach >= 0, "reach must be >= 0")
        require(scroll_px >= 0, "scroll_px must be >= 0")
        require(award >= 0, "award must be >= 0")

        if seed is None:
            seed = random.randrange(0, 2**32 - 1)
        self.seed = seed
        self.rng = random.Random(seed)

        self.width = width
        self.spacing = float(spacing)
        self.min_count = int(min_count)
        self.outer_radius = float(outer_radius)
        self.inner_radius = float(inner_radius)
        self.award = int(award)
        self.scroll_px = float(scroll_px)
        self.sound = sound if sound is not None else NullSound()

        # reachable band: not buried, not above the jump apex
        self.y_low = baseline - 2 * actor_radius
        self.y_high = self.y_low - reach

        self.rings: List[Ring] = []
        self.spawn()

    @property
    def tail_x(self) -> Optional[float]:
        return max((r.x for r in self.rings), default=None)

    def _sample_y(self) -> float:
        y = self.rng.uniform(self.y_high, self.y_low)
        return min(self.y_low, max(self.y_high, y))

    def _needs_spawn(self) -> bool:
        tail = self.tail_x
        return len(self.rings) < self.min_count or tail is None or tail < self.width - self.spacing

    def spawn(self) -> int:
        """Append rings until the stream invariant holds. Returns how many were added."""
        added = 0
        while self._needs_spawn():
            tail = self.tail_x
            x = self.width + self.spacing if tail is None else tail + self.spacing
            self.rings.append(Ring(x=x, y=self._sample_y(),
                                   outer_radius=self.outer_radius,
                                   inner_radius=self.inner_radius))
            added += 1
        if added:
            logger.debug("spawned %d ring(s), tail x=%.1f", added, self.tail_x)
        return added

    def update(self, actor) -> int:
        """
        One tick: collide + shift every ring, then swap in the survivors and
        refill. Returns points earned this tick.
        """
        points = 0
        for ring in self.rings:
            if ring.collected:
                continue
            if ring_hits_actor(ring, actor):
                ring.collected = True
                self.sound.emit(SoundKind.COLLECT)
                points += self.award
                logger.debug("ring collected at (%.1f, %.1f)", ring.x, ring.y)
            else:
                ring.x -= self.scroll_px

        self.rings = [r for r in self.rings
                      if not r.collected and r.x + r.outer_radius >= 0]
        self.spawn()
        return points

    def draw(self, renderer):
        for ring in self.rings:
            if not ring.collected:
                renderer.draw_ring((ring.x, ring.y), ring.outer_radius, ring.inner_radius)
