"""Print difficulty parameters over a range of ratings."""

from __future__ import annotations

import argparse
import random
from typing import Sequence

from .difficulty import compute_params
from .questions import DifficultyParams


def format_params(rating: int, params: DifficultyParams) -> str:
    """Human-readable block describing ``params`` for ``rating``."""
    return "\n".join(
        [
            f"Rating: {rating}",
            f"Digit1 count: {params.digit_count1}",
            f"Digit2 count: {params.digit_count2}",
            f"Add weight: {params.add_weight:g}",
            f"Sub weight: {params.sub_weight:g}",
            f"Mul weight: {params.mul_weight:g}",
            f"Div weight: {params.div_weight:g}",
            f"Carry Prob: {params.carry_prob:g}",
            f"Carry propagation: {params.carry_propagation}",
            f"Complexity level: {params.complexity_level:g}",
        ]
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--start", type=int, default=300)
    parser.add_argument("--stop", type=int, default=3000)
    parser.add_argument("--step", type=int, default=50)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    if args.step <= 0:
        parser.error("--step must be positive")

    rng = random.Random(args.seed)
    for rating in range(args.start, args.stop + 1, args.step):
        print(format_params(rating, compute_params(rating, rng)) + "\n\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())