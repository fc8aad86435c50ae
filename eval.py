#!/usr/bin/env python3
"""
Evaluate the heuristic TicTacToe engine.

Usage:
    python eval.py
    python eval.py --games 2000 --seed 0
    python eval.py --games 200 --save-dir runs/quick
"""

import sys
import json
import argparse
from dataclasses import asdict
from pathlib import Path

import numpy as np

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from tictactoe import EvalConfig, eval_vs_random, eval_self_play


def main():
    parser = argparse.ArgumentParser(description="Evaluate the heuristic TicTacToe engine")
    parser.add_argument("--games", type=int, default=EvalConfig.games, help="Games per matchup")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--save-dir", type=str, default=EvalConfig.save_dir, help="Output directory")
    parser.add_argument("--no-save", action="store_true", help="Only print results")

    args = parser.parse_args()
    if args.games <= 0:
        parser.error("--games must be positive")

    config = EvalConfig(games=args.games, seed=args.seed, save_dir=args.save_dir)
    rng = np.random.default_rng(config.seed)

    print("\n=== Evaluation ===")

    # vs Random
    print(f"\nvs Random ({config.games} games)...")
    w, d, l = eval_vs_random(games=config.games, rng=rng)
    print(f"  Wins:   {w:.2%}")
    print(f"  Draws:  {d:.2%}")
    print(f"  Losses: {l:.2%}")

    # Self-play
    print(f"\nSelf-play ({config.games} games)...")
    sp = eval_self_play(games=config.games, rng=rng)
    print(f"  X wins:     {sp['x_w']:.2%}")
    print(f"  O wins:     {sp['o_w']:.2%}")
    print(f"  Draws:      {sp['d']:.2%}")
    print(f"  Avg length: {sp['avg_len']:.2f}")

    if args.no_save:
        return

    run_dir = Path(config.save_dir)
    run_dir.mkdir(parents=True, exist_ok=True)
    with open(run_dir / "config.json", "w") as f:
        json.dump(asdict(config), f, indent=2)
    with open(run_dir / "results.json", "w") as f:
        json.dump({
            "vs_random": {"w": w, "d": d, "l": l},
            "self_play": sp,
        }, f, indent=2)

    print(f"\n✓ Results saved to {run_dir}")


if __name__ == "__main__":
    main()
