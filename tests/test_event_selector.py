"""
test_event_selector.py — next-event choice and exhaustion
"""

import pytest

from event_deck import load_base_deck
from event_selector import has_next_event, select_next_event


@pytest.fixture
def base_deck():
    return load_base_deck()


class TestSelectNextEvent:
    @pytest.mark.parametrize("seed", [1, 99, 123456789])
    def test_intro_comes_first(self, small_deck, seed):
        assert select_next_event(small_deck, 112, set(), seed).id == "opening"

    def test_current_era_before_later_eras(self, small_deck):
        assert select_next_event(small_deck, 113, {"opening"}, 7).id == "market"

    def test_spent_era_falls_forward(self, small_deck):
        assert select_next_event(small_deck, 115, {"opening", "market"}, 7).id == "council"

    def test_never_falls_back_to_an_earlier_era(self, small_deck):
        # Late era spent; the unplayed early "market" event stays behind
        resolved = {"opening", "council"}
        assert select_next_event(small_deck, 250, resolved, 7) is None
        assert not has_next_event(small_deck, 250, resolved)

    def test_exhausted_deck_returns_none(self, small_deck):
        assert select_next_event(small_deck, 300, {"opening", "market", "council"}, 7) is None

    def test_never_repeats(self, base_deck):
        resolved, year, seen = set(), base_deck.initial_year, []
        for seed in range(1, 50):
            event = select_next_event(base_deck, year, resolved, seed * 7919)
            if event is None:
                break
            seen.append(event.id)
            resolved.add(event.id)
            year = max(year, event.year_hint)
        assert len(seen) == len(set(seen)) == len(base_deck.events)

    def test_same_seed_same_event(self, base_deck):
        picks = {select_next_event(base_deck, 120, {"founding-agape"}, 4242).id for _ in range(5)}
        assert len(picks) == 1

    def test_calendar_ahead_of_pacing_stays_early(self, base_deck):
        # One decision made: pacing keeps us in the founding era
        event = select_next_event(base_deck, 320, {"founding-agape"}, 11)
        assert event.era == "founding"


class TestHasNextEvent:
    def test_fresh_deck(self, small_deck):
        assert has_next_event(small_deck, 112, set())

    def test_later_era_still_reachable(self, small_deck):
        assert has_next_event(small_deck, 115, {"opening", "market"})

    def test_nothing_left(self, small_deck):
        assert not has_next_event(small_deck, 116, {"opening", "market", "council"})

    def test_agrees_with_selector(self, base_deck):
        resolved = {e.id for e in base_deck.events if e.era != "fading"}
        assert has_next_event(base_deck, 440, resolved)
        assert select_next_event(base_deck, 440, resolved, 3).era == "fading"
