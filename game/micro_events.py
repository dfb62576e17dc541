"""
Ecclesia - Micro-Events Module

Small beats revealed halfway through the cooldown:
- Historical beats take precedence while their year window is open
  (each at most once per session)
- Scarce resources draw only donations
- Otherwise a one-in-five donation sprinkle, else general flavor

Donations grow with the timeline's economy. Recent history is avoided when
an alternative exists.
"""

import math
from dataclasses import replace
from typing import AbstractSet, Iterable, List, Optional, Sequence

from chance import create_seeded_rng, pick_uniform
from config import (
    LOW_RESOURCE_THRESHOLD, DONATION_SPRINKLE_PROBABILITY, DONATION_SCALING,
    MICRO_EVENT_RETRY_LIMIT, SEED_STRIDE
)
from content import MicroEvent, MicroEventKind


def donation_multiplier(year: int) -> float:
    """Linear between the early and late anchors, flat outside them"""
    early_year = DONATION_SCALING["early_year"]
    late_year = DONATION_SCALING["late_year"]
    early = DONATION_SCALING["early_multiplier"]
    late = DONATION_SCALING["late_multiplier"]

    if year <= early_year:
        return early
    if year >= late_year:
        return late
    progress = (year - early_year) / (late_year - early_year)
    return early + (late - early) * progress


def scale_donation(micro: MicroEvent, year: int) -> MicroEvent:
    """Apply the year multiplier to a donation's resource gain (rounded, at least 1)"""
    base = micro.effects.resources
    if micro.kind is not MicroEventKind.DONATION or base <= 0:
        return micro
    scaled = max(1, math.floor(base * donation_multiplier(year) + 0.5))
    return replace(micro, effects=replace(micro.effects, resources=scaled))


def _eligible_historical(pool: Iterable[MicroEvent], year: int,
                         shown: AbstractSet[str]) -> List[MicroEvent]:
    return [
        m for m in pool
        if m.kind is MicroEventKind.HISTORICAL and m.id not in shown and m.is_valid_in(year)
    ]


def _draw_once(pool: Sequence[MicroEvent], resource_level: int, seed: int) -> Optional[MicroEvent]:
    rng = create_seeded_rng(seed)
    donations = [m for m in pool if m.kind is MicroEventKind.DONATION]
    flavor = [m for m in pool if m.kind is MicroEventKind.FLAVOR]

    if resource_level <= LOW_RESOURCE_THRESHOLD:
        candidates = donations or flavor
    elif rng() < DONATION_SPRINKLE_PROBABILITY:
        candidates = donations or flavor
    else:
        candidates = flavor or donations

    if not candidates:
        return None
    return pick_uniform(candidates, rng)


def select_micro_event(pool: Sequence[MicroEvent], resource_level: int, current_year: int,
                       seed: int, recent_history: Sequence[str] = (),
                       shown_historical: AbstractSet[str] = frozenset()) -> Optional[MicroEvent]:
    """
    Choose the micro-event to reveal during this cooldown.

    Args:
        pool: All micro-events in the deck
        resource_level: Current resources stat
        current_year: In-fiction year
        seed: Seed for this selection
        recent_history: Trailing window of recently revealed micro-event IDs
        shown_historical: Historical beats already shown this session

    Returns:
        The micro-event (donations already scaled), or None for an empty pool
    """
    historical = _eligible_historical(pool, current_year, shown_historical)
    if historical:
        return pick_uniform(historical, create_seeded_rng(seed))

    recent = set(recent_history)
    choice = None
    for attempt in range(MICRO_EVENT_RETRY_LIMIT + 1):
        choice = _draw_once(pool, resource_level, seed + attempt * SEED_STRIDE)
        if choice is None or choice.id not in recent:
            break

    if choice is None:
        return None
    return scale_donation(choice, current_year)
