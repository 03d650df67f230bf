# ringrunner/env/observations.py
from __future__ import annotations
from typing import List, Tuple

import numpy as np

from ringrunner.game.world import World

N_RINGS_AHEAD = 2
OBS_SIZE = 3 + 2 * N_RINGS_AHEAD

OBS_LOW = np.array([0.0, -1.0, 0.0] + [0.0, -1.0] * N_RINGS_AHEAD, dtype=np.float32)
OBS_HIGH = np.array([1.0, 1.0, 1.0] + [1.0, 1.0] * N_RINGS_AHEAD, dtype=np.float32)


def _clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else (hi if x > hi else x)


def rings_ahead(world: World, n: int = N_RINGS_AHEAD) -> List[Tuple[float, float]]:
    """(dx, dy) to the next `n` uncollected rings not yet behind the actor, nearest first."""
    a = world.actor
    out = []
    for r in sorted(world.rings.rings, key=lambda r: r.x):
        if r.collected or r.x + r.outer_radius < a.x - a.radius:
            continue
        out.append((r.x - a.x, r.y - a.y))
        if len(out) == n:
            break
    return out


def build_observation(world: World) -> np.ndarray:
    """
    [y_norm, vy_norm, grounded, dx1, dy1, dx2, dy2]
    - y_norm: actor y / height, in [0,1]
    - vy_norm: vy / |lift|, in [-1,1]
    - dx: horizontal distance / width in [0,1] (1 = no ring)
    - dy: vertical offset / height in [-1,1] (negative = ring above)
    """
    a = world.actor
    width = float(world.landscape.width)
    height = float(world.landscape.height)

    obs = [
        _clamp(a.y / height, 0.0, 1.0),
        _clamp(a.vy / abs(a.lift), -1.0, 1.0),
        1.0 if a.grounded else 0.0,
    ]
    ahead = rings_ahead(world)
    for i in range(N_RINGS_AHEAD):
        if i < len(ahead):
            dx, dy = ahead[i]
            obs += [_clamp(dx / width, 0.0, 1.0), _clamp(dy / height, -1.0, 1.0)]
        else:
            obs += [1.0, 0.0]
    return np.asarray(obs, dtype=np.float32)
