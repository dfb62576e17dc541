"""
test_stats.py — stat deltas, clamping and ending detection
"""

import pytest

from stats import GameEnding, GameStats, StatDelta, apply_stat_delta, detect_ending


START = GameStats.initial()


class TestStatDelta:
    def test_missing_fields_are_zero(self):
        delta = StatDelta.from_dict({"members": 3})
        assert delta == StatDelta(members=3)

    def test_none_is_zero(self):
        assert StatDelta.from_dict(None).is_zero

    def test_unknown_stat_rejected(self):
        with pytest.raises(ValueError):
            StatDelta.from_dict({"faith": 5})

    def test_addition(self):
        total = StatDelta(members=2, cohesion=-1) + StatDelta(cohesion=3, resources=4)
        assert total == StatDelta(members=2, cohesion=2, resources=4)


class TestApplyStatDelta:
    def test_initial_values(self):
        assert START == GameStats(members=48, cohesion=70, resources=35, influence=20)

    def test_plain_update(self):
        after = apply_stat_delta(START, StatDelta(members=10, cohesion=4, influence=2))
        assert after == GameStats(members=58, cohesion=74, resources=35, influence=22)

    def test_bounded_stats_clamp_at_ceiling(self):
        after = apply_stat_delta(START, StatDelta(cohesion=50, resources=90, influence=100))
        assert (after.cohesion, after.resources, after.influence) == (100, 100, 100)

    def test_bounded_stats_clamp_at_zero(self):
        after = apply_stat_delta(START, StatDelta(resources=-50, influence=-21))
        assert after.resources == 0
        assert after.influence == 0

    def test_members_floor_at_zero(self):
        assert apply_stat_delta(START, StatDelta(members=-100)).members == 0

    def test_members_have_no_ceiling(self):
        stats = GameStats(members=480, cohesion=50, resources=50, influence=50)
        assert apply_stat_delta(stats, StatDelta(members=50)).members == 530

    def test_input_is_untouched(self):
        apply_stat_delta(START, StatDelta(members=5))
        assert START.members == 48


class TestDetectEnding:
    def test_nothing_yet(self):
        assert detect_ending(START) is None

    def test_cohesion_zero_collapses(self):
        assert detect_ending(GameStats(48, 0, 35, 20)) is GameEnding.COLLAPSE

    def test_members_zero_collapses(self):
        assert detect_ending(GameStats(0, 70, 35, 20)) is GameEnding.COLLAPSE

    def test_reaching_target_wins(self):
        assert detect_ending(GameStats(500, 70, 35, 20)) is GameEnding.VICTORY

    def test_one_short_of_target(self):
        assert detect_ending(GameStats(499, 70, 35, 20)) is None

    def test_collapse_beats_victory(self):
        assert detect_ending(GameStats(600, 0, 35, 20)) is GameEnding.COLLAPSE

    def test_custom_target(self):
        assert detect_ending(GameStats(60, 70, 35, 20), win_target=60) is GameEnding.VICTORY
