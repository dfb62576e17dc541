"""
Ecclesia - Prerequisites Module

One evaluator for choice requirements. The selection UI uses the unmet
clauses as lock text; the progression engine uses the boolean to refuse
selection. Both call evaluate_requirements.
"""

from dataclasses import dataclass, field
from typing import AbstractSet, Dict, List, Optional, Tuple

from stats import GameStats


@dataclass(frozen=True)
class Requirements:
    """Thresholds and narrative tags a choice needs before it can be picked"""
    min_cohesion: Optional[int] = None
    min_resources: Optional[int] = None
    min_influence: Optional[int] = None
    required_tags: Tuple[str, ...] = field(default_factory=tuple)
    forbidden_tags: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> Optional["Requirements"]:
        if not data:
            return None
        return cls(
            min_cohesion=data.get("min_cohesion"),
            min_resources=data.get("min_resources"),
            min_influence=data.get("min_influence"),
            required_tags=tuple(data.get("required_tags", ())),
            forbidden_tags=tuple(data.get("forbidden_tags", ())),
        )

    @property
    def referenced_tags(self) -> Tuple[str, ...]:
        return self.required_tags + self.forbidden_tags

    def to_dict(self) -> Dict:
        return {
            "min_cohesion": self.min_cohesion,
            "min_resources": self.min_resources,
            "min_influence": self.min_influence,
            "required_tags": list(self.required_tags),
            "forbidden_tags": list(self.forbidden_tags),
        }


@dataclass(frozen=True)
class RequirementCheck:
    met: bool
    unmet: List[str]


def _humanize(tag: str) -> str:
    return tag.replace("_", " ").replace("-", " ")


def evaluate_requirements(requirements: Optional[Requirements], stats: GameStats,
                          tags: AbstractSet[str]) -> RequirementCheck:
    """
    Check a choice's requirements against the current stats and tags.

    Returns whether all clauses hold plus a readable reason per failed clause.
    """
    if requirements is None:
        return RequirementCheck(met=True, unmet=[])

    unmet = []

    thresholds = (
        ("Cohesion", requirements.min_cohesion, stats.cohesion),
        ("Resources", requirements.min_resources, stats.resources),
        ("Influence", requirements.min_influence, stats.influence),
    )
    for label, minimum, current in thresholds:
        if minimum is not None and current < minimum:
            unmet.append(f"Requires {label} {minimum} (currently {current})")

    for tag in requirements.required_tags:
        if tag not in tags:
            unmet.append(f"Requires: {_humanize(tag)}")

    for tag in requirements.forbidden_tags:
        if tag in tags:
            unmet.append(f"Unavailable after: {_humanize(tag)}")

    return RequirementCheck(met=not unmet, unmet=unmet)
