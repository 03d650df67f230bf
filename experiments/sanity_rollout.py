# /experiments/sanity_rollout.py
"""
Sanity rollouts for RingRunnerEnv:
- Runs RANDOM and/or TINY-HEURISTIC policies over fixed seeds
- Writes an episodes CSV for notebook analysis
- Saves per-episode action sequences for exact replay

Usage examples (from repo root):
  # Run both policies over 20 default seeds, frame_skip=4, save traces:
  python -m experiments.sanity_rollout --policies both --save-traces

  # Only heuristic, custom seeds:
  python -m experiments.sanity_rollout --policies heuristic --seeds 111,222,333 --save-traces

  # Quick random-only smoke with fewer steps:
  python -m experiments.sanity_rollout --policies random --steps 300 --out-dir /tmp/sanity
"""

from __future__ import annotations
import argparse
import csv
from pathlib import Path
from typing import List, Tuple

import numpy as np

from ringrunner.env.rr_env import RingRunnerEnv
from ringrunner.game.config import WIDTH

# Jump when the next ring is this far ahead (px): apex is ~22 ticks * 4 px away
JUMP_WINDOW_PX = (48.0, 105.0)


# ------------------------ Policies ------------------------

def random_policy_init(action_seed: int, jump_prob: float = 0.1):
    rng = np.random.RandomState(action_seed)
    def act(_obs: np.ndarray) -> int:
        return int(rng.random_sample() < jump_prob)
    return act

def tiny_heuristic_policy_init():
    """
    Jump from the ground when the nearest ring enters the window where the
    arc of the jump crosses the ring band.
    """
    lo, hi = JUMP_WINDOW_PX[0] / WIDTH, JUMP_WINDOW_PX[1] / WIDTH
    def act(obs: np.ndarray) -> int:
        grounded, dx1 = obs[2], obs[3]
        return 1 if (grounded == 1.0 and lo <= dx1 <= hi) else 0
    return act


# ------------------------ Rollout core ------------------------

def ensure_dir(p: Path):
    p.mkdir(parents=True, exist_ok=True)

def write_episode_row(csv_path: Path, header: List[str], row: List):
    exists = csv_path.exists()
    with csv_path.open("a", newline="") as f:
        w = csv.writer(f)
        if not exists:
            w.writerow(header)
        w.writerow(row)

def run_one_episode(policy_name: str,
                    seed: int,
                    frame_skip: int,
                    steps_limit: int,
                    save_traces: bool,
                    out_dir: Path) -> Tuple[int, float, int, int, bool]:
    """
    Returns: (ep_len, ret_sum, score, jumps, truncated)
    Also writes the action trace to disk if requested.
    """
    env = RingRunnerEnv(frame_skip=frame_skip)

    if policy_name == "random":
        action_seed = 10_000 + seed
        policy = random_policy_init(action_seed)
    elif policy_name == "heuristic":
        action_seed = -1
        policy = tiny_heuristic_policy_init()
    else:
        raise ValueError(f"Unknown policy {policy_name!r}")

    actions: List[int] = []
    ret_sum = 0.0
    ep_len = 0
    info = {}
    trunc = False

    try:
        obs, info = env.reset(seed=seed)
        for _ in range(steps_limit):
            a = policy(obs)
            actions.append(int(a))
            obs, r, term, trunc, info = env.step(a)
            ret_sum += float(r)
            ep_len += 1
            if term or trunc:
                break
    finally:
        env.close()

    if save_traces:
        trace_dir = out_dir / "traces" / policy_name
        ensure_dir(trace_dir)
        np.save(trace_dir / f"{seed}_actions.npy", np.asarray(actions, dtype=np.int8))
        meta_lines = [
            f"seed={seed}",
            f"frame_skip={frame_skip}",
            f"policy={policy_name}",
            f"action_rng_seed={action_seed}",
            f"steps_limit={steps_limit}",
        ]
        (trace_dir / f"{seed}_meta.txt").write_text("\n".join(meta_lines), encoding="utf-8")

    return ep_len, ret_sum, int(info.get("score", 0)), int(info.get("jumps", 0)), bool(trunc)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--policies", type=str, default="both",
                    choices=["random", "heuristic", "both"])
    ap.add_argument("--seeds", type=str, default="",
                    help="Comma-separated seeds. If empty, uses 20 defaults: 101..120")
    ap.add_argument("--frame-skip", type=int, default=4,
                    help="Sim ticks per decision step")
    ap.add_argument("--steps", type=int, default=10_000,
                    help="Hard cap on decision steps (env truncates earlier by default)")
    ap.add_argument("--out-dir", type=str, default="experiments/runs",
                    help="Directory to store episodes.csv and traces/")
    ap.add_argument("--save-traces", action="store_true",
                    help="Save action sequences for replay")
    args = ap.parse_args()

    out_dir = Path(args.out_dir)
    ensure_dir(out_dir)

    if args.seeds.strip():
        seeds = [int(s) for s in args.seeds.split(",") if s.strip()]
    else:
        seeds = list(range(101, 121))

    episodes_csv = out_dir / "episodes.csv"
    header = [
        "policy_name", "seed", "frame_skip", "decision_hz",
        "episode_len_decisions", "return_sum", "score", "jumps", "truncated",
    ]
    decision_hz = 60 / max(1, args.frame_skip)

    to_run = ["random", "heuristic"] if args.policies == "both" else [args.policies]

    print(f"Running policies={to_run} on {len(seeds)} seeds "
          f"(frame_skip={args.frame_skip}, decision_hz≈{decision_hz:.1f})")
    print(f"Writing summaries to {episodes_csv}")

    for policy_name in to_run:
        for seed in seeds:
            ep_len, ret_sum, score, jumps, truncated = run_one_episode(
                policy_name=policy_name,
                seed=seed,
                frame_skip=args.frame_skip,
                steps_limit=args.steps,
                save_traces=args.save_traces,
                out_dir=out_dir
            )
            write_episode_row(episodes_csv, header, [
                policy_name, seed, args.frame_skip, decision_hz,
                ep_len, f"{ret_sum:.1f}", score, jumps, int(truncated),
            ])
            print(f"[{policy_name}] seed={seed}  len={ep_len}  score={score}  "
                  f"rings={ret_sum:.0f}  jumps={jumps}")

    print("✓ Sanity rollouts complete")


if __name__ == "__main__":
    main()
