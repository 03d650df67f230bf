# ringrunner/env/rr_env.py
from __future__ import annotations
from typing import Optional, Dict, Any

import numpy as np
import gymnasium as gym
import pygame

from ringrunner.game.config import WIDTH, HEIGHT, FPS, RING_AWARD
from ringrunner.game.render import PygameRenderer
from ringrunner.game.world import World
from ringrunner.env.observations import build_observation, OBS_LOW, OBS_HIGH


class RingRunnerEnv(gym.Env):
    """
    Ring Runner Gymnasium environment (vector observations).
    - Simulation ticks at 60 Hz (one tick = one frame).
    - Agent acts every `frame_skip` ticks (default 4) -> 15 decisions/sec.
    - Observation: shape (7,), float32, see observations.build_observation.
    - Reward: rings collected during the decision step.
    - Never terminates (no game over); truncates at `time_limit_seconds`.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 30.0,
                 follow_terrain: bool = False):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode {render_mode!r}"
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.follow_terrain = follow_terrain

        self.sim_fps = FPS
        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            # decisions per second = sim_fps / frame_skip
            self.time_limit_decisions = int(self.sim_fps * time_limit_seconds / self.frame_skip)

        # Actions: 0 = NOOP, 1 = JUMP
        self.action_space = gym.spaces.Discrete(2)
        self.observation_space = gym.spaces.Box(low=OBS_LOW, high=OBS_HIGH, dtype=np.float32)

        self.world: Optional[World] = None
        self.timestep: int = 0
        self.jumps: int = 0
        self.current_seed: Optional[int] = None

        self.screen = None
        self.renderer: Optional[PygameRenderer] = None
        self.clock = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)

        # Seed given -> reproducible ring layout; None -> RingStream picks one
        ring_seed = int(seed) if seed is not None else None
        self.world = World(seed=ring_seed, follow_terrain=self.follow_terrain)
        self.timestep = 0
        self.jumps = 0
        self.current_seed = self.world.seed

        obs = self._get_obs()
        info = {"seed": self.current_seed, "score": 0}
        if self.render_mode == "human":
            self.render()
        return obs, info

    def step(self, action: int):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.world is not None, "Call reset() before step()"

        # Apply action once at the start of the decision step
        if action == 1:
            if self.world.actor.grounded:
                self.jumps += 1
            self.world.request_jump()

        points = 0
        for _ in range(self.frame_skip):
            points += self.world.step()

        reward = float(points) / RING_AWARD

        self.timestep += 1
        terminated = False
        truncated = (self.time_limit_decisions is not None
                     and self.timestep >= self.time_limit_decisions)

        obs = self._get_obs()
        info = {
            "score": self.world.score,
            "ticks": self.world.ticks,
            "timestep": self.timestep,
            "seed": self.current_seed,
            "grounded": self.world.actor.grounded,
            "jumps": self.jumps,
        }

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    def _get_obs(self) -> np.ndarray:
        assert self.world is not None
        return np.clip(build_observation(self.world), OBS_LOW, OBS_HIGH)

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.world is None:
            return None

        if self.renderer is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption("Ring Runner — Gym Env")
                self.clock = pygame.time.Clock()
                self.renderer = PygameRenderer(self.screen)
            else:
                self.screen = pygame.Surface((WIDTH, HEIGHT))
                self.renderer = PygameRenderer(self.screen, flip=False)

        if self.render_mode == "human":
            # Pump events so the OS doesn't think the window hung
            pygame.event.pump()

        self.renderer.clear()
        self.world.draw(self.renderer)
        self.renderer.present()

        if self.render_mode == "human":
            if self.clock is not None:
                self.clock.tick(self.metadata["render_fps"])
            return None
        return self.renderer.to_array()

    def close(self):
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.renderer = None
            self.clock = None
