"""
test_chance.py — weighted pick and the seeded generator
"""

import pytest

from chance import MODULUS, MULTIPLIER, WeightedOption, create_seeded_rng, pick_uniform, pick_weighted


def fixed(*values):
    """rng that replays the given values"""
    it = iter(values)
    return lambda: next(it)


SEVEN_THREE = [WeightedOption("first", 7), WeightedOption("second", 3)]


# ─────────────────────────────────────────────────────
# pick_weighted
# ─────────────────────────────────────────────────────

class TestPickWeighted:
    @pytest.mark.parametrize("draw", [0.0, 0.35, 0.69])
    def test_thresholds_below_seven_pick_first(self, draw):
        assert pick_weighted(SEVEN_THREE, fixed(draw)) == "first"

    @pytest.mark.parametrize("draw", [0.7, 0.85, 0.999])
    def test_thresholds_from_seven_pick_second(self, draw):
        assert pick_weighted(SEVEN_THREE, fixed(draw)) == "second"

    def test_single_option_always_wins(self):
        assert pick_weighted([WeightedOption("only", 1)], fixed(0.9999)) == "only"

    def test_empty_options_raise(self):
        with pytest.raises(ValueError):
            pick_weighted([], fixed(0.5))

    def test_non_positive_total_raises(self):
        with pytest.raises(ValueError):
            pick_weighted([WeightedOption("a", 0), WeightedOption("b", 0)], fixed(0.5))

    def test_same_seed_same_pick(self):
        picks = {pick_weighted(SEVEN_THREE, create_seeded_rng(2024)) for _ in range(5)}
        assert len(picks) == 1


# ─────────────────────────────────────────────────────
# create_seeded_rng
# ─────────────────────────────────────────────────────

class TestSeededRng:
    def test_first_value_of_seed_one(self):
        assert create_seeded_rng(1)() == MULTIPLIER / MODULUS

    def test_sequences_are_reproducible(self):
        a, b = create_seeded_rng(12345), create_seeded_rng(12345)
        assert [a() for _ in range(10)] == [b() for _ in range(10)]

    def test_different_seeds_diverge(self):
        a, b = create_seeded_rng(1), create_seeded_rng(2)
        assert [a() for _ in range(3)] != [b() for _ in range(3)]

    @pytest.mark.parametrize("seed", [0, -5, 1, MODULUS, 2 * MODULUS, 10 ** 12])
    def test_values_stay_in_open_unit_interval(self, seed):
        rng = create_seeded_rng(seed)
        for _ in range(100):
            value = rng()
            assert 0.0 < value < 1.0

    def test_zero_and_modulus_seeds_behave_alike(self):
        assert create_seeded_rng(0)() == create_seeded_rng(MODULUS)()


# ─────────────────────────────────────────────────────
# pick_uniform
# ─────────────────────────────────────────────────────

class TestPickUniform:
    def test_low_draw_picks_first(self):
        assert pick_uniform(["a", "b", "c"], fixed(0.0)) == "a"

    def test_high_draw_picks_last(self):
        assert pick_uniform(["a", "b", "c"], fixed(0.999)) == "c"

    def test_middle_bucket(self):
        assert pick_uniform(["a", "b", "c"], fixed(0.5)) == "b"
