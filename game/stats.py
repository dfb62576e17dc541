"""
Ecclesia - Community Stats Module

The four numbers the player is steering:
- Members: headcount, floored at zero, no ceiling
- Cohesion, Resources, Influence: 0-100

Deltas are applied through apply_stat_delta only; the ending check
runs after every primary outcome.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Optional
from enum import Enum

from config import INITIAL_STATS, WIN_TARGET, LOSS_THRESHOLD, STAT_CEILING

STAT_NAMES = ("members", "cohesion", "resources", "influence")


class GameEnding(Enum):
    VICTORY = "victory"
    COLLAPSE = "collapse"


@dataclass(frozen=True)
class StatDelta:
    """Signed change to each stat; omitted fields are zero"""
    members: int = 0
    cohesion: int = 0
    resources: int = 0
    influence: int = 0

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> "StatDelta":
        data = data or {}
        unknown = set(data) - set(STAT_NAMES)
        if unknown:
            raise ValueError(f"Unknown stat(s) in delta: {', '.join(sorted(unknown))}")
        return cls(**{name: int(data.get(name, 0)) for name in STAT_NAMES})

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    def __add__(self, other: "StatDelta") -> "StatDelta":
        return StatDelta(
            members=self.members + other.members,
            cohesion=self.cohesion + other.cohesion,
            resources=self.resources + other.resources,
            influence=self.influence + other.influence,
        )

    @property
    def is_zero(self) -> bool:
        return not any(getattr(self, name) for name in STAT_NAMES)


@dataclass(frozen=True)
class GameStats:
    members: int
    cohesion: int
    resources: int
    influence: int

    @classmethod
    def initial(cls) -> "GameStats":
        return cls(**INITIAL_STATS)

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


def _clamp(value: int) -> int:
    return max(0, min(STAT_CEILING, value))


def apply_stat_delta(stats: GameStats, delta: StatDelta) -> GameStats:
    """Return a new snapshot with the delta applied and clamped."""
    return GameStats(
        members=max(0, stats.members + delta.members),
        cohesion=_clamp(stats.cohesion + delta.cohesion),
        resources=_clamp(stats.resources + delta.resources),
        influence=_clamp(stats.influence + delta.influence),
    )


def detect_ending(stats: GameStats, win_target: int = WIN_TARGET) -> Optional[GameEnding]:
    """
    Terminal condition after a primary outcome.

    Collapse is checked first, so a tick that empties the community
    never counts as a win.
    """
    if stats.cohesion <= LOSS_THRESHOLD or stats.members <= LOSS_THRESHOLD:
        return GameEnding.COLLAPSE
    if stats.members >= win_target:
        return GameEnding.VICTORY
    return None
