# ringrunner/tests/test_landscape.py
import math

import numpy as np
import pytest

from ringrunner.game.config import ConfigError
from ringrunner.game.landscape import Landscape
from ringrunner.tests.fakes import RecordingRenderer


def test_baseline_is_two_thirds_down():
    land = Landscape(width=960, height=540)
    assert land.baseline == 360.0


def test_height_formula():
    land = Landscape(width=960, height=540, amplitude=20.0, frequency=0.05, phase=1.3)
    for x in (0, 17, 480, 959):
        assert land.height_at(x) == pytest.approx(360.0 + 20.0 * math.sin(0.05 * x + 1.3))


def test_hundred_ticks_bounded_and_periodic():
    land = Landscape(width=960, height=540)
    x = 123.0
    seq = []
    for _ in range(100):
        land.advance()
        seq.append(land.height_at(x))

    assert land.phase == pytest.approx(100 * land.speed)
    lo, hi = land.baseline - land.amplitude, land.baseline + land.amplitude
    assert all(lo - 1e-9 <= h <= hi + 1e-9 for h in seq)
    # it actually moves both sides of the baseline
    assert min(seq) < land.baseline < max(seq)

    # one full period of phase later, same surface
    h_now = land.height_at(x)
    land.phase += 2 * math.pi
    assert land.height_at(x) == pytest.approx(h_now)


def test_scroll_px_matches_phase_speed():
    land = Landscape(frequency=0.05, speed=0.2)
    assert land.scroll_px == pytest.approx(4.0)
    # the wave shape moves left by scroll_px each tick
    before = land.height_at(200.0)
    land.advance()
    assert land.height_at(200.0 - land.scroll_px) == pytest.approx(before)


def test_silhouette_polygon():
    land = Landscape(width=100, height=90, stride=1)
    pts = land.silhouette()
    assert pts[0] == (0.0, 90.0)
    assert pts[-1] == (100.0, 90.0)
    surface = pts[1:-1]
    assert len(surface) == 101
    assert [p[0] for p in surface] == [float(x) for x in range(101)]
    ys = np.array([p[1] for p in surface])
    assert np.all(np.abs(ys - land.baseline) <= land.amplitude + 1e-9)


def test_silhouette_coarse_stride_reaches_right_edge():
    land = Landscape(width=100, height=90, stride=7)
    surface = land.silhouette()[1:-1]
    assert surface[0][0] == 0.0
    assert surface[-1][0] == 100.0
    assert surface[-1][1] == pytest.approx(land.height_at(100.0))


def test_draw_issues_one_landscape_request():
    r = RecordingRenderer()
    Landscape(width=50, height=30).draw(r)
    assert r.names == ["landscape"]


@pytest.mark.parametrize("kwargs", [
    {"width": 0},
    {"height": -1},
    {"frequency": 0.0},
    {"amplitude": -1.0},
    {"speed": -0.1},
    {"stride": 0},
    {"height": math.inf},
])
def test_invalid_config_rejected(kwargs):
    with pytest.raises(ConfigError):
        Landscape(**kwargs)
