import math
import random

import pytest

from mentalmath.difficulty import DifficultyModel, compute_params


def test_zero_rating_is_easiest():
    params = compute_params(0, random.Random(1))
    assert (params.digit_count1, params.digit_count2) == (1, 1)
    assert params.carry_prob == pytest.approx(0.05)
    assert params.carry_propagation == 1
    assert abs(params.complexity_level) <= 0.04
    assert params.add_weight > params.sub_weight > params.mul_weight
    assert params.mul_weight == pytest.approx(params.div_weight)


def test_very_high_rating_is_hardest():
    params = compute_params(10000, random.Random(1))
    assert (params.digit_count1, params.digit_count2) == (3, 3)
    assert params.carry_propagation == 2
    assert params.mul_weight > params.add_weight


@pytest.mark.parametrize("rating", range(300, 3001, 50))
def test_weights_are_normalised(rating):
    params = compute_params(rating, random.Random(0))
    assert sum(params.operation_weights().values()) == pytest.approx(1.0)
    assert 0.05 <= params.carry_prob <= 0.8


def test_multiplication_weight_grows_with_rating():
    weights = [compute_params(r, random.Random(0)).mul_weight for r in range(0, 3001, 100)]
    assert weights == sorted(weights)


def test_complexity_stays_within_jitter():
    rating = 1700
    base = (1 - math.exp(-rating / 1100)) ** 1.3
    for seed in range(20):
        level = compute_params(rating, random.Random(seed)).complexity_level
        assert abs(level - base) <= 0.04 + 1e-12


def test_seeded_rng_is_deterministic():
    first = compute_params(1100, random.Random(42))
    second = compute_params(1100, random.Random(42))
    assert first == second


def test_model_stores_computed_params():
    model = DifficultyModel(700, random.Random(3))
    result = model.compute()
    assert model.params == result


def test_negative_rating_rejected():
    with pytest.raises(ValueError):
        DifficultyModel(-1, random.Random(0))