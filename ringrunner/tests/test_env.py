# ringrunner/tests/test_env.py
"""
Quick tests for RingRunnerEnv (Gymnasium environment).

Usage (from repo root):
  pytest ringrunner/tests/test_env.py
  python -m ringrunner.tests.test_env
  python -m ringrunner.tests.test_env --render
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Tuple

import numpy as np
from gymnasium.utils.env_checker import check_env

from ringrunner.env.rr_env import RingRunnerEnv

SEED = 123
STEPS = 300
FRAME_SKIP = 4


def test_api_check(frame_skip: int = FRAME_SKIP) -> None:
    """Verify Gym API contract (spaces, step/reset signatures, types)."""
    env = RingRunnerEnv(frame_skip=frame_skip)
    try:
        check_env(env)
    finally:
        env.close()


def test_smoke(steps: int = STEPS, seed: int = SEED, frame_skip: int = FRAME_SKIP) -> None:
    """Random rollout: no crashes, obs in space, float reward, never terminates."""
    env = RingRunnerEnv(frame_skip=frame_skip)
    try:
        obs, info = env.reset(seed=seed)
        assert env.observation_space.contains(obs), "Initial observation not in space"
        env.action_space.seed(seed)
        for t in range(steps):
            a = env.action_space.sample()
            obs, r, term, trunc, info = env.step(a)
            assert isinstance(r, float), "Reward must be a float"
            assert r >= 0.0
            assert env.observation_space.contains(obs), f"Step {t}: observation out of bounds"
            assert term is False, "No game over state"
            if trunc:
                break
    finally:
        env.close()


def test_determinism(steps: int = STEPS, seed: int = SEED, frame_skip: int = FRAME_SKIP) -> None:
    """Same seed + same action sequence => identical obs/reward/flags."""
    def rollout(seed_val: int, action_seq: List[int]) -> List[Tuple[np.ndarray, float, bool, bool]]:
        env = RingRunnerEnv(frame_skip=frame_skip)
        traj: List[Tuple[np.ndarray, float, bool, bool]] = []
        try:
            env.reset(seed=seed_val)
            for a in action_seq:
                obs, r, term, trunc, _ = env.step(int(a))
                traj.append((obs.copy(), float(r), bool(term), bool(trunc)))
                if term or trunc:
                    break
        finally:
            env.close()
        return traj

    rng = np.random.RandomState(42)
    action_seq = [int(rng.randint(0, 2)) for _ in range(steps)]

    t1 = rollout(seed, action_seq)
    t2 = rollout(seed, action_seq)

    assert len(t1) == len(t2), "Determinism: trajectory length mismatch"
    for i, ((o1, r1, te1, tr1), (o2, r2, te2, tr2)) in enumerate(zip(t1, t2)):
        assert np.array_equal(o1, o2), f"Determinism: obs mismatch at step {i}"
        assert (r1, te1, tr1) == (r2, te2, tr2), f"Determinism: transition mismatch at step {i}"


def test_truncates_at_time_limit() -> None:
    env = RingRunnerEnv(frame_skip=4, time_limit_seconds=1.0)
    try:
        env.reset(seed=1)
        flags = [env.step(0)[3] for _ in range(15)]
        assert flags == [False] * 14 + [True]
    finally:
        env.close()


def test_reward_counts_rings() -> None:
    env = RingRunnerEnv(frame_skip=FRAME_SKIP)
    try:
        env.reset(seed=SEED)
        total = 0.0
        for t in range(600):
            _, r, _, trunc, info = env.step(1 if t % 12 == 0 else 0)
            total += r
            assert total * 10 == info["score"]
            if trunc:
                break
    finally:
        env.close()


def test_jump_action_leaves_ground() -> None:
    env = RingRunnerEnv(frame_skip=1)
    try:
        obs, _ = env.reset(seed=SEED)
        assert obs[2] == 1.0
        obs, *_ , info = env.step(1)
        assert obs[2] == 0.0 and obs[1] < 0.0
        assert info["jumps"] == 1
        obs, *_ , info = env.step(1)  # airborne: ignored
        assert info["jumps"] == 1
    finally:
        env.close()


def render_demo(steps: int, seed: int, frame_skip: int) -> None:
    """Open a window and run a short demo so you can visually verify behavior."""
    env = RingRunnerEnv(render_mode="human", frame_skip=frame_skip)
    try:
        env.reset(seed=seed)
        for t in range(steps):
            _, _, term, trunc, _ = env.step(1 if t % 10 == 0 else 0)
            if term or trunc:
                break
    finally:
        env.close()
    print("✓ Render demo finished")


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=SEED, help="Episode seed for tests")
    ap.add_argument("--steps", type=int, default=STEPS, help="Max decision steps per test")
    ap.add_argument("--frame-skip", type=int, default=FRAME_SKIP, help="Sim ticks per decision step")
    ap.add_argument("--render", action="store_true", help="Run a short visual demo")
    args = ap.parse_args()

    try:
        test_api_check(frame_skip=args.frame_skip)
        print("✓ API check ok")
        test_smoke(steps=args.steps, seed=args.seed, frame_skip=args.frame_skip)
        print("✓ Smoke test ok")
        test_determinism(steps=args.steps, seed=args.seed, frame_skip=args.frame_skip)
        print("✓ Determinism ok")
        if args.render:
            render_demo(steps=min(args.steps, 600), seed=args.seed, frame_skip=args.frame_skip)
    except AssertionError as e:
        print(f"✗ Test failed: {e}", file=sys.stderr)
        sys.exit(1)
    else:
        print("🎉 All selected tests passed")


if __name__ == "__main__":
    main()
