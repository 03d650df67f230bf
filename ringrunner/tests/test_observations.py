# ringrunner/tests/test_observations.py
import numpy as np

from ringrunner.env.observations import (
    build_observation, rings_ahead, OBS_SIZE, OBS_LOW, OBS_HIGH
)
from ringrunner.game.rings import Ring
from ringrunner.game.world import World


def make_world() -> World:
    return World(seed=3)


def test_shape_dtype_and_bounds():
    w = make_world()
    for t in range(400):
        if t % 20 == 0:
            w.request_jump()
        w.step()
        obs = build_observation(w)
        assert isinstance(obs, np.ndarray) and obs.dtype == np.float32
        assert obs.shape == (OBS_SIZE,)
        assert np.all(obs >= OBS_LOW) and np.all(obs <= OBS_HIGH)


def test_resting_actor_fields():
    w = make_world()
    obs = build_observation(w)
    a = w.actor
    assert obs[0] == np.float32(a.y / w.landscape.height)
    assert obs[1] == 0.0
    assert obs[2] == 1.0


def test_airborne_velocity_sign():
    w = make_world()
    w.request_jump()
    w.step()
    obs = build_observation(w)
    assert obs[1] < 0.0
    assert obs[2] == 0.0


def test_next_rings_nearest_first():
    w = make_world()
    a = w.actor
    w.rings.rings = [Ring(x=a.x + 300.0, y=a.y - 96.0), Ring(x=a.x + 96.0, y=a.y - 54.0)]
    ahead = rings_ahead(w)
    assert ahead == [(96.0, -54.0), (300.0, -96.0)]

    obs = build_observation(w)
    assert obs[3] == np.float32(96.0 / w.landscape.width)
    assert obs[4] == np.float32(-54.0 / w.landscape.height)
    assert obs[5] == np.float32(300.0 / w.landscape.width)


def test_rings_behind_and_collected_are_skipped():
    w = make_world()
    a = w.actor
    w.rings.rings = [
        Ring(x=a.x - 100.0, y=a.y),
        Ring(x=a.x + 50.0, y=a.y, collected=True),
    ]
    assert rings_ahead(w) == []
    obs = build_observation(w)
    assert list(obs[3:]) == [1.0, 0.0, 1.0, 0.0]


def test_far_ring_is_clamped():
    w = make_world()
    a = w.actor
    w.rings.rings = [Ring(x=a.x + 5000.0, y=a.y)]
    obs = build_observation(w)
    assert obs[3] == 1.0
