# experiments/replay.py
"""
Replay tool for RingRunnerEnv

# Typical usage (run from REPO ROOT)

# Replay a HEURISTIC episode by seed (uses experiments/runs/traces/heuristic/<seed>_actions.npy)
python -m experiments.replay --policy heuristic --seed 105

# Replay by pointing directly to an actions file
python -m experiments.replay --trace experiments/runs/traces/random/112_actions.npy --frame-skip 4

# Slow the display to ~decision rate (~15 fps)
python -m experiments.replay --policy heuristic --seed 105 --slow

# Controls during replay
SPACE = pause/resume
R     = restart episode
ESC   = quit

# Notes
- Deterministic: same seed, frame_skip and action sequence -> same run.
- If you pass --trace, meta is not read; supply --frame-skip if different from 4.
"""

from __future__ import annotations
import argparse
from pathlib import Path

import numpy as np
import pygame

from ringrunner.env.rr_env import RingRunnerEnv
from ringrunner.game.config import COLOR_FG

DEFAULT_OUT_DIR = "experiments/runs"


def _find_trace(out_dir: Path, policy: str, seed: int) -> Path:
    p = out_dir / "traces" / policy / f"{seed}_actions.npy"
    if not p.exists():
        raise FileNotFoundError(f"Trace not found: {p}")
    return p

def _read_meta(out_dir: Path, policy: str, seed: int) -> dict:
    meta_path = out_dir / "traces" / policy / f"{seed}_meta.txt"
    meta = {}
    if meta_path.exists():
        for line in meta_path.read_text(encoding="utf-8").splitlines():
            if "=" in line:
                k, v = line.split("=", 1)
                meta[k.strip()] = v.strip()
    return meta

def _draw_overlay(env: RingRunnerEnv, step_idx: int, action):
    surf = pygame.display.get_surface()
    if surf is None or env.world is None:
        return
    font = pygame.font.SysFont("jetbrainsmono", 16)
    a = env.world.actor
    lines = [
        f"Step={step_idx}  Action={'-' if action is None else ('JUMP' if action == 1 else 'NOOP')}",
        f"y={a.y:.1f}  vy={a.vy:.2f}  grounded={a.grounded}  jumps={env.jumps}",
    ]
    for i, txt in enumerate(lines):
        surf.blit(font.render(txt, True, COLOR_FG), (12, 40 + i * 20))
    pygame.display.flip()

def replay_episode(seed: int, actions: np.ndarray, frame_skip: int, slow: bool = False):
    env = RingRunnerEnv(render_mode="human", frame_skip=frame_skip, time_limit_seconds=None)
    env.reset(seed=seed)

    paused = False
    step_idx = 0
    clock = pygame.time.Clock()

    try:
        running = True
        while running and step_idx < len(actions):
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        paused = not paused
                    elif event.key == pygame.K_r:
                        env.reset(seed=seed)
                        step_idx = 0
                        paused = False

            if paused:
                env.render()
                _draw_overlay(env, step_idx, action=None)
                clock.tick(60)
                continue

            action = int(actions[step_idx])
            env.step(action)
            _draw_overlay(env, step_idx, action)
            step_idx += 1

            clock.tick(15 if slow else 60)

        print(f"Replay finished: steps={step_idx} score={env.world.score if env.world else 0}")
    finally:
        env.close()

def main():
    ap = argparse.ArgumentParser(description="Replay a recorded RingRunnerEnv episode.")
    ap.add_argument("--seed", type=int, help="Episode seed")
    ap.add_argument("--policy", type=str, default="random",
                    help="Trace subfolder name, e.g. random / heuristic")
    ap.add_argument("--trace", type=str, default="",
                    help="Optional explicit path to a .npy action file")
    ap.add_argument("--out-dir", type=str, default=DEFAULT_OUT_DIR)
    ap.add_argument("--frame-skip", type=int, default=-1,
                    help="Override frame_skip. If <0, use meta or default=4")
    ap.add_argument("--slow", action="store_true", help="Slow display (~15 fps)")
    args = ap.parse_args()

    out_dir = Path(args.out_dir)

    if args.trace:
        trace_path = Path(args.trace)
        if not trace_path.exists():
            raise FileNotFoundError(f"Trace file not found: {trace_path}")
        if args.seed is None:
            # <seed>_actions.npy
            stem = trace_path.stem.split("_")[0]
            if not stem.lstrip("-").isdigit():
                raise SystemExit("Can't infer seed from trace name; pass --seed")
            args.seed = int(stem)
    else:
        if args.seed is None:
            raise SystemExit("Please provide --seed or --trace")
        trace_path = _find_trace(out_dir, args.policy, args.seed)

    actions = np.load(trace_path)
    if actions.ndim != 1:
        raise ValueError(f"Expected 1D action array, got shape {actions.shape}")

    fs = args.frame_skip
    if fs < 0:
        fs = 4
        if not args.trace:
            meta = _read_meta(out_dir, args.policy, args.seed)
            if meta.get("frame_skip", "").isdigit():
                fs = int(meta["frame_skip"])

    print(f"Replaying seed={args.seed}  policy={args.policy}  steps={len(actions)}  frame_skip={fs}")
    print("Controls: SPACE pause/resume | R restart | ESC quit")

    replay_episode(seed=args.seed, actions=actions, frame_skip=fs, slow=args.slow)

if __name__ == "__main__":
    main()
