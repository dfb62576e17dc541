"""
Ecclesia - Event Selector

Chooses the next decision event:
1. An unresolved intro event always comes first
2. Otherwise the effective era (earlier of year era and pacing era)
3. If that era is spent, the nearest later era with anything left
4. Nothing left anywhere -> None (the session ends in victory)

Pure function of its inputs; each call builds its own generator from the seed.
"""

import logging
from typing import AbstractSet, List, Optional

from chance import create_seeded_rng, pick_uniform
from content import GameDeck, GameEvent

logger = logging.getLogger(__name__)


def _unresolved(deck: GameDeck, era: str, resolved: AbstractSet[str]) -> List[GameEvent]:
    return [e for e in deck.events if e.era == era and e.id not in resolved]


def select_next_event(deck: GameDeck, current_year: int, resolved: AbstractSet[str],
                      seed: int) -> Optional[GameEvent]:
    """
    Pick the next event the player faces.

    Args:
        deck: The content deck
        current_year: In-fiction year
        resolved: IDs of events already answered this session
        seed: Seed for this draw (same inputs + seed -> same event)

    Returns:
        An unresolved GameEvent, or None when the deck is exhausted
    """
    for event in deck.events:
        if event.intro and event.id not in resolved:
            return event

    table = deck.era_table
    start = table.effective_era_index(current_year, len(resolved))
    rng = create_seeded_rng(seed)

    for index in range(start, len(table.eras)):
        era = table.eras[index]
        candidates = _unresolved(deck, era, resolved)
        if candidates:
            if index != start:
                logger.debug(f"Era '{table.eras[start]}' exhausted, falling forward to '{era}'")
            return pick_uniform(candidates, rng)

    return None


def has_next_event(deck: GameDeck, current_year: int, resolved: AbstractSet[str]) -> bool:
    """Whether select_next_event would return anything (independent of seed)"""
    table = deck.era_table
    start = table.effective_era_index(current_year, len(resolved))
    reachable = set(table.eras[start:])
    return any(
        event.id not in resolved and (event.intro or event.era in reachable)
        for event in deck.events
    )
