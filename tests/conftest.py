"""
Shared fixtures: a hand-cranked scheduler and a three-event deck.
"""

import copy

import pytest

from config import SessionConfiguration
from content import GameDeck
from progression import ProgressionEngine
from timers import Scheduler, TimerHandle


# ─────────────────────────────────────────────────────
# Manual scheduler (time moves only when the test says so)
# ─────────────────────────────────────────────────────

class ManualTimer(TimerHandle):
    def __init__(self, due, callback):
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True

    @property
    def active(self):
        return not (self.cancelled or self.fired)


class ManualScheduler(Scheduler):
    def __init__(self):
        self.clock = 0.0
        self.timers = []

    def schedule(self, delay, callback):
        timer = ManualTimer(self.clock + max(0.0, delay), callback)
        self.timers.append(timer)
        return timer

    def now(self):
        return self.clock

    @property
    def pending(self):
        return [t for t in self.timers if t.active]

    def advance(self, seconds):
        """Fire every live timer due within the next `seconds`, earliest first"""
        target = self.clock + seconds
        while True:
            due = [t for t in self.timers if t.active and t.due <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.due)
            self.clock = timer.due
            timer.fired = True
            timer.callback()
        self.clock = target


# ─────────────────────────────────────────────────────
# Small deck
# ─────────────────────────────────────────────────────
#
# opening (intro) -> market (early) -> council (late), then exhausted.

SMALL_DECK = {
    "initial_year": 112,
    "era_table": {
        "eras": ["early", "late"],
        "year_boundaries": [200],
        "count_thresholds": [2],
        "min_year_steps": [1, 5],
        "status_bands": [[150, "Localized Suspicion"], [250, "Localized Persecution"]],
        "final_status": "Imperial Favor",
    },
    "events": [
        {
            "id": "opening",
            "era": "early",
            "year_hint": 112,
            "intro": True,
            "title": "A House Church",
            "narrative": "Neighbors ask to join the evening meal.",
            "scene_title": "The Courtyard",
            "choices": [
                {
                    "id": "welcome",
                    "label": "Welcome them in.",
                    "outcomes": [
                        {
                            "value": {
                                "id": "welcome-a",
                                "description": "The room fills.",
                                "effects": {"members": 10, "cohesion": 4, "influence": 2},
                                "year_advance": 1,
                            },
                            "weight": 1,
                        },
                    ],
                },
                {
                    "id": "study",
                    "label": "Teach them first.",
                    "reflection": {
                        "prompt": "Why teach before admitting?",
                        "options": ["To form shared belief.", "To collect fees."],
                        "correct_index": 0,
                    },
                    "outcomes": [
                        {
                            "value": {
                                "id": "study-a",
                                "description": "A catechumen class forms.",
                                "effects": {"cohesion": 2},
                                "year_advance": 1,
                                "tags_add": ["scholars"],
                            },
                            "weight": 1,
                        },
                    ],
                },
                {
                    "id": "schism",
                    "label": "Expel the doubters.",
                    "outcomes": [
                        {
                            "value": {
                                "id": "schism-a",
                                "description": "The community splinters.",
                                "effects": {"cohesion": -100},
                                "year_advance": 1,
                            },
                            "weight": 1,
                        },
                    ],
                },
            ],
        },
        {
            "id": "market",
            "era": "early",
            "year_hint": 150,
            "title": "Market Day",
            "narrative": "Traders offer a stall near the forum.",
            "choices": [
                {
                    "id": "sell",
                    "label": "Sell copied letters.",
                    "requirements": {"required_tags": ["scholars"]},
                    "outcomes": [
                        {"value": {"id": "sell-a", "description": "Coins.", "effects": {"resources": 5}},
                         "weight": 1},
                    ],
                },
                {
                    "id": "give",
                    "label": "Give bread to every stall.",
                    "requirements": {"min_resources": 90},
                    "outcomes": [
                        {"value": {"id": "give-a", "description": "Bread.", "effects": {"resources": -10}},
                         "weight": 1},
                    ],
                },
                {
                    "id": "wait",
                    "label": "Stay away from the forum.",
                    "outcomes": [
                        {"value": {"id": "wait-a", "description": "Nothing happens.", "year_advance": 2},
                         "weight": 1},
                    ],
                },
            ],
        },
        {
            "id": "council",
            "era": "late",
            "year_hint": 250,
            "title": "The Council",
            "narrative": "Bishops gather from across the province.",
            "choices": [
                {
                    "id": "decide",
                    "label": "Send a delegate.",
                    "outcomes": [
                        {"value": {"id": "decide-a", "description": "Your voice is heard.",
                                   "effects": {"influence": 3}, "year_advance": 1},
                         "weight": 1},
                    ],
                },
            ],
        },
    ],
    "micro_events": [
        {"id": "micro-song", "kind": "flavor", "description": "A hymn catches on.",
         "effects": {"cohesion": 1}},
        {"id": "micro-gift", "kind": "donation", "description": "A purse is left at the door.",
         "effects": {"resources": 8}},
        {"id": "micro-edict", "kind": "historical", "description": "An edict is posted.",
         "effects": {"influence": -1}, "year_window": [300, 310]},
    ],
}


@pytest.fixture
def deck_data():
    return copy.deepcopy(SMALL_DECK)


@pytest.fixture
def small_deck(deck_data):
    return GameDeck.from_dict(deck_data)


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def scheduler_factory():
    return ManualScheduler


@pytest.fixture
def config():
    return SessionConfiguration(seed=42, cooldown_seconds=2.0)


@pytest.fixture
def reasons():
    return []


@pytest.fixture
def engine(small_deck, config, scheduler, reasons):
    return ProgressionEngine(small_deck, config=config, scheduler=scheduler, listener=reasons.append)
