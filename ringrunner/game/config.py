# ringrunner/game/config.py
import math

# --- Display ---
WIDTH = 960
HEIGHT = 540
FPS = 60

# --- Actor / Physics (units are px and ticks, one tick per frame) ---
ACTOR_X = 50                # actor's fixed x (world scrolls left)
ACTOR_RADIUS = 20
GRAVITY = 0.8               # px/tick^2, positive = down
LIFT = -18.0                # px/tick, jump impulse (negative = up)
FOLLOW_TERRAIN = False      # rest on the sine surface instead of the flat baseline
TERRAIN_SNAP_PX = 6.0       # max drop a grounded actor follows without going airborne

# --- Landscape ---
LAND_AMPLITUDE = 20.0       # px
LAND_FREQUENCY = 0.05       # rad/px
LAND_SPEED = 0.2            # rad/tick -> LAND_SPEED / LAND_FREQUENCY = 4 px/tick
LAND_STRIDE = 1             # px between silhouette samples

# --- Rings ---
RING_OUTER_RADIUS = 10.0
RING_INNER_RADIUS = 6.0     # annular hole, 0 = solid disc
RING_SPACING = 300.0        # px between consecutive rings at spawn
RING_MIN_COUNT = 5
RING_REACH = 160.0          # px, height of the spawn band above its lower bound
RING_AWARD = 10
SEED_DEFAULT = 12345

# --- Sound ---
SAMPLE_RATE = 44100
SOUND_VOLUME = 0.4
# kind -> (waveform, frequency Hz, decay seconds)
TONES = {
    "jump": ("triangle", 440.0, 0.3),
    "collect": ("sine", 523.25, 1.0),
}

# --- Colors (RGB) ---
COLOR_BG = (135, 206, 235)
COLOR_FG = (20, 30, 60)
COLOR_GRASS = (34, 139, 34)
COLOR_ACTOR = (0, 0, 255)
COLOR_RING = (255, 215, 0)


class ConfigError(ValueError):
    """Raised when a component is constructed with unusable settings."""


def require(cond: bool, msg: str):
    if not cond:
        raise ConfigError(msg)


def require_finite(**values: float):
    for name, v in values.items():
        if not math.isfinite(v):
            raise ConfigError(f"{name} must be finite, got {v!r}")
