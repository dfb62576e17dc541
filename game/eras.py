"""
Ecclesia - Era Table

Eras are ordered narrative periods. Which era the game is in comes from two
clocks: the in-fiction year and the number of decisions already made. Both
sets of boundaries are tuning data shipped with the deck, not constants.

Each table includes:
- Era names in order
- Year cutoffs (era i starts at year_boundaries[i-1])
- Decision-count cutoffs for narrative pacing
- Minimum years a decision advances the clock, per era
- Imperial status labels by year
"""

from bisect import bisect_right
from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class EraTable:
    eras: Tuple[str, ...]
    year_boundaries: Tuple[int, ...]
    count_thresholds: Tuple[int, ...]
    min_year_steps: Tuple[int, ...]
    status_bands: Tuple[Tuple[int, str], ...]
    final_status: str

    def __post_init__(self):
        n = len(self.eras)
        if n == 0:
            raise ValueError("Era table needs at least one era")
        if len(self.year_boundaries) != n - 1 or len(self.count_thresholds) != n - 1:
            raise ValueError("Era table needs exactly one boundary between each pair of eras")
        if len(self.min_year_steps) != n:
            raise ValueError("Era table needs one minimum year step per era")
        for cutoffs in (self.year_boundaries, self.count_thresholds):
            if any(later <= earlier for earlier, later in zip(cutoffs, cutoffs[1:])):
                raise ValueError("Era boundaries must be strictly increasing")
        limits = [limit for limit, _ in self.status_bands]
        if any(later <= earlier for earlier, later in zip(limits, limits[1:])):
            raise ValueError("Status band limits must be strictly increasing")
        if list(self.min_year_steps) != sorted(self.min_year_steps):
            raise ValueError("Minimum year steps must not shrink in later eras")

    @classmethod
    def from_dict(cls, data: Dict) -> "EraTable":
        return cls(
            eras=tuple(data["eras"]),
            year_boundaries=tuple(data["year_boundaries"]),
            count_thresholds=tuple(data["count_thresholds"]),
            min_year_steps=tuple(data["min_year_steps"]),
            status_bands=tuple((int(limit), label) for limit, label in data["status_bands"]),
            final_status=data["final_status"],
        )

    def to_dict(self) -> Dict:
        return {
            "eras": list(self.eras),
            "year_boundaries": list(self.year_boundaries),
            "count_thresholds": list(self.count_thresholds),
            "min_year_steps": list(self.min_year_steps),
            "status_bands": [[limit, label] for limit, label in self.status_bands],
            "final_status": self.final_status,
        }

    def index_of(self, era: str) -> int:
        return self.eras.index(era)

    def era_index_for_year(self, year: int) -> int:
        return bisect_right(self.year_boundaries, year)

    def era_index_for_count(self, resolved_count: int) -> int:
        return bisect_right(self.count_thresholds, resolved_count)

    def effective_era_index(self, year: int, resolved_count: int) -> int:
        """
        The earlier of the year era and the pacing era.

        Decision count alone never pulls later content ahead of the
        calendar; a slow calendar is allowed to catch up.
        """
        return min(self.era_index_for_year(year), self.era_index_for_count(resolved_count))

    def era_for_year(self, year: int) -> str:
        return self.eras[self.era_index_for_year(year)]

    def min_year_step(self, year: int) -> int:
        return self.min_year_steps[self.era_index_for_year(year)]

    def status_for_year(self, year: int) -> str:
        """Imperial stance toward the community at a given year"""
        for limit, label in self.status_bands:
            if year < limit:
                return label
        return self.final_status
