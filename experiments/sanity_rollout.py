# /experiments/sanity_rollout.py
"""
Sanity rollouts for RunnerEnv: random and tiny-heuristic players over fixed
seeds, one CSV row per episode, optional per-episode action traces (.npy).

Usage (from repo root):
  python -m experiments.sanity_rollout
  python -m experiments.sanity_rollout --policies heuristic --seeds 111,222 --save-traces
"""

from __future__ import annotations
import argparse
import csv
from pathlib import Path

import numpy as np

from src.env.runner_env import RunnerEnv

FIELDS = ["policy", "seed", "decisions", "return", "x", "score", "lives", "terminated", "truncated"]


def random_policy_init(action_seed: int, n_actions: int = 6):
    rng = np.random.RandomState(action_seed)
    return lambda _obs: int(rng.randint(0, n_actions))

def tiny_heuristic_policy_init():
    """Always run right; hop when grounded with an enemy close ahead or no floor at +120."""
    def act(obs: np.ndarray) -> int:
        on_ground = obs[2] > 0.5
        floor_near = obs[6] > 0.5
        enemy_close = obs[14] > 0.5 and obs[12] < 0.12
        if on_ground and (enemy_close or not floor_near):
            return 4  # right + jump
        return 1
    return act


def run_one_episode(policy_name: str, seed: int, frame_skip: int, steps_limit: int,
                    trace_dir: Path | None = None) -> dict:
    """Play one episode and return its CSV row."""
    env = RunnerEnv(frame_skip=frame_skip)
    if policy_name == "random":
        policy = random_policy_init(10_000 + seed, int(env.action_space.n))
    elif policy_name == "heuristic":
        policy = tiny_heuristic_policy_init()
    else:
        raise ValueError(f"Unknown policy {policy_name!r}")

    actions = []
    total = 0.0
    term = trunc = False
    try:
        obs, info = env.reset(seed=seed)
        for _ in range(steps_limit):
            a = policy(obs)
            actions.append(a)
            obs, r, term, trunc, info = env.step(a)
            total += r
            if term or trunc:
                break
    finally:
        env.close()

    if trace_dir is not None:
        trace_dir.mkdir(parents=True, exist_ok=True)
        np.save(trace_dir / f"{policy_name}_{seed}.npy", np.asarray(actions, dtype=np.int8))

    return {
        "policy": policy_name, "seed": seed, "decisions": len(actions),
        "return": round(total, 1), "x": round(float(info.get("x", 0.0)), 1),
        "score": info.get("score", 0), "lives": info.get("lives", 0),
        "terminated": int(term), "truncated": int(trunc),
    }


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--policies", default="both", choices=["random", "heuristic", "both"])
    ap.add_argument("--seeds", default="", help="Comma-separated seeds (default 101..120)")
    ap.add_argument("--frame-skip", type=int, default=4)
    ap.add_argument("--steps", type=int, default=10_000, help="Cap on decision steps")
    ap.add_argument("--out-dir", default="experiments/runs")
    ap.add_argument("--save-traces", action="store_true")
    args = ap.parse_args(argv)

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    seeds = [int(s) for s in args.seeds.split(",") if s.strip()] or list(range(101, 121))
    policies = ["random", "heuristic"] if args.policies == "both" else [args.policies]
    trace_dir = out_dir / "traces" if args.save_traces else None

    csv_path = out_dir / "episodes.csv"
    new_file = not csv_path.exists()
    with csv_path.open("a", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDS)
        if new_file:
            writer.writeheader()
        for policy_name in policies:
            for seed in seeds:
                row = run_one_episode(policy_name, seed, args.frame_skip, args.steps, trace_dir)
                writer.writerow(row)
                print(f"[{policy_name}] seed={seed} len={row['decisions']} x={row['x']} "
                      f"score={row['score']} ret={row['return']}")

    print(f"✓ Wrote {csv_path}")


if __name__ == "__main__":
    main()
