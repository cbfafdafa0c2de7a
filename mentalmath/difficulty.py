"""Map a player rating to question difficulty parameters."""

from __future__ import annotations

import math
import random

from .questions import DifficultyParams

RATING_SCALE = 1100.0
COMPLEXITY_JITTER = 0.04

_DIGIT_STAGES = ((1, 1), (2, 1), (3, 1), (2, 2), (3, 2), (3, 3))


class DifficultyModel:
    """Computes DifficultyParams for one rating."""

    def __init__(self, rating: float, rng: random.Random | None = None) -> None:
        if rating < 0:
            raise ValueError(f"rating must be non-negative, got {rating}")
        self.rating = rating
        self.rng = rng if rng is not None else random.Random()
        self.params: DifficultyParams | None = None

    def compute(self) -> DifficultyParams:
        scalar = 1 - math.exp(-self.rating / RATING_SCALE)

        stage = min(len(_DIGIT_STAGES) - 1, int(6 * scalar))
        digits1, digits2 = _DIGIT_STAGES[stage]

        easy = (1 - scalar) ** 1.2
        hard = scalar ** 1.3
        raw = (
            0.4 * easy + 0.05,
            0.3 * easy + 0.05,
            0.45 * hard + 0.05,
            0.25 * hard + 0.05,
        )
        total = sum(raw)
        add, sub, mul, div = (w / total for w in raw)

        self.params = DifficultyParams(
            digit_count1=digits1,
            digit_count2=digits2,
            add_weight=add,
            sub_weight=sub,
            mul_weight=mul,
            div_weight=div,
            carry_prob=0.05 + 0.75 * scalar ** 1.1,
            carry_propagation=1 if scalar < 0.6 else 2,
            complexity_level=hard + self.rng.uniform(-COMPLEXITY_JITTER, COMPLEXITY_JITTER),
        )
        return self.params


def compute_params(rating: float, rng: random.Random | None = None) -> DifficultyParams:
    """Difficulty parameters for ``rating``."""
    return DifficultyModel(rating, rng).compute()