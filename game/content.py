"""
Ecclesia - Content Module

Typed records for the authored deck:
- GameEvent -> Choice -> Outcome (weighted)
- ReflectionPrompt on a choice (self-assessment only)
- MicroEvent (choice-less, drawn during cooldown)
- GameDeck bundles events, micro-events and the era table

Decks are loaded from plain dicts (see event_deck.py) and checked once by
validate_deck. A deck that fails validation is an authoring defect; the
engine will not run it.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
from enum import Enum

from chance import WeightedOption
from eras import EraTable
from prerequisites import Requirements
from stats import StatDelta

logger = logging.getLogger(__name__)


class ContentIntegrityError(ValueError):
    """The deck is malformed; refuse to play it"""


class MicroEventKind(Enum):
    FLAVOR = "flavor"          # General color, small nudges
    DONATION = "donation"      # Income; scaled by year
    HISTORICAL = "historical"  # Anchored to a year window, once per session


@dataclass(frozen=True)
class ReflectionPrompt:
    prompt: str
    options: Tuple[str, ...]
    correct_index: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> Optional["ReflectionPrompt"]:
        if not data:
            return None
        return cls(
            prompt=data["prompt"],
            options=tuple(data["options"]),
            correct_index=data.get("correct_index"),
        )

    def is_correct(self, answer_index: int) -> Optional[bool]:
        if self.correct_index is None:
            return None
        return answer_index == self.correct_index

    def to_dict(self) -> Dict:
        return {
            "prompt": self.prompt,
            "options": list(self.options),
        }


@dataclass(frozen=True)
class Outcome:
    id: str
    description: str
    effects: StatDelta = field(default_factory=StatDelta)
    year_advance: int = 0
    sound_effect: Optional[str] = None
    tags_add: Tuple[str, ...] = field(default_factory=tuple)
    tags_remove: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Dict) -> "Outcome":
        return cls(
            id=data["id"],
            description=data["description"],
            effects=StatDelta.from_dict(data.get("effects")),
            year_advance=int(data.get("year_advance", 0)),
            sound_effect=data.get("sound_effect"),
            tags_add=tuple(data.get("tags_add", ())),
            tags_remove=tuple(data.get("tags_remove", ())),
        )

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "description": self.description,
            "effects": self.effects.to_dict(),
            "year_advance": self.year_advance,
            "sound_effect": self.sound_effect,
        }


@dataclass(frozen=True)
class Choice:
    id: str
    label: str
    outcomes: Tuple[WeightedOption, ...]
    reflection: Optional[ReflectionPrompt] = None
    requirements: Optional[Requirements] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "Choice":
        return cls(
            id=data["id"],
            label=data["label"],
            outcomes=tuple(
                WeightedOption(Outcome.from_dict(entry["value"]), entry["weight"])
                for entry in data.get("outcomes", [])
            ),
            reflection=ReflectionPrompt.from_dict(data.get("reflection")),
            requirements=Requirements.from_dict(data.get("requirements")),
        )


@dataclass(frozen=True)
class GameEvent:
    id: str
    era: str
    year_hint: int
    title: str
    narrative: str
    choices: Tuple[Choice, ...]
    scene_title: str = ""
    scene_caption: str = ""
    scene_image: str = ""
    intro: bool = False

    @classmethod
    def from_dict(cls, data: Dict) -> "GameEvent":
        return cls(
            id=data["id"],
            era=data["era"],
            year_hint=int(data.get("year_hint", 0)),
            title=data["title"],
            narrative=data["narrative"],
            choices=tuple(Choice.from_dict(c) for c in data.get("choices", [])),
            scene_title=data.get("scene_title", ""),
            scene_caption=data.get("scene_caption", ""),
            scene_image=data.get("scene_image", ""),
            intro=bool(data.get("intro", False)),
        )

    def get_choice(self, choice_id: str) -> Optional[Choice]:
        for choice in self.choices:
            if choice.id == choice_id:
                return choice
        return None


@dataclass(frozen=True)
class MicroEvent:
    id: str
    description: str
    effects: StatDelta
    kind: MicroEventKind = MicroEventKind.FLAVOR
    year_window: Optional[Tuple[int, int]] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "MicroEvent":
        window = data.get("year_window")
        return cls(
            id=data["id"],
            description=data["description"],
            effects=StatDelta.from_dict(data.get("effects")),
            kind=MicroEventKind(data.get("kind", "flavor")),
            year_window=(int(window[0]), int(window[1])) if window else None,
        )

    def is_valid_in(self, year: int) -> bool:
        if self.year_window is None:
            return True
        start, end = self.year_window
        return start <= year <= end

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "description": self.description,
            "effects": self.effects.to_dict(),
            "kind": self.kind.value,
        }


@dataclass(frozen=True)
class GameDeck:
    initial_year: int
    era_table: EraTable
    events: Tuple[GameEvent, ...]
    micro_events: Tuple[MicroEvent, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Dict) -> "GameDeck":
        try:
            return cls(
                initial_year=int(data["initial_year"]),
                era_table=EraTable.from_dict(data["era_table"]),
                events=tuple(GameEvent.from_dict(e) for e in data["events"]),
                micro_events=tuple(MicroEvent.from_dict(m) for m in data.get("micro_events", [])),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ContentIntegrityError(f"Deck could not be loaded: {e}") from e

    def get_event(self, event_id: str) -> Optional[GameEvent]:
        for event in self.events:
            if event.id == event_id:
                return event
        return None


# =============================================================================
# VALIDATION
# =============================================================================

def _choice_problems(event: GameEvent, choice: Choice, known_tags: set) -> List[str]:
    where = f"{event.id}/{choice.id}"
    problems = []

    if not choice.outcomes:
        problems.append(f"{where}: choice has no outcomes")
    elif any(option.weight <= 0 for option in choice.outcomes):
        problems.append(f"{where}: outcome weights must be positive")

    if choice.reflection:
        index = choice.reflection.correct_index
        if not choice.reflection.options:
            problems.append(f"{where}: reflection has no options")
        elif index is not None and not 0 <= index < len(choice.reflection.options):
            problems.append(f"{where}: reflection correct_index {index} out of range")

    if choice.requirements:
        for tag in choice.requirements.referenced_tags:
            if tag not in known_tags:
                problems.append(f"{where}: requirement references unknown tag '{tag}'")

    return problems


def validate_deck(deck: GameDeck) -> None:
    """
    Check a deck for authoring defects.

    Raises:
        ContentIntegrityError listing every problem found
    """
    problems = []
    era_names = set(deck.era_table.eras)

    # A tag is known if some outcome can add it
    known_tags = {
        tag
        for event in deck.events
        for choice in event.choices
        for option in choice.outcomes
        for tag in option.value.tags_add
    }

    seen = set()
    for event in deck.events:
        if event.id in seen:
            problems.append(f"{event.id}: duplicate event id")
        seen.add(event.id)

        if event.era not in era_names:
            problems.append(f"{event.id}: unknown era '{event.era}'")
        if not event.choices:
            problems.append(f"{event.id}: event has no choices")

        for choice in event.choices:
            problems.extend(_choice_problems(event, choice, known_tags))

    micro_seen = set()
    for micro in deck.micro_events:
        if micro.id in micro_seen:
            problems.append(f"{micro.id}: duplicate micro-event id")
        micro_seen.add(micro.id)
        if micro.year_window and micro.year_window[0] > micro.year_window[1]:
            problems.append(f"{micro.id}: year window starts after it ends")
        if micro.kind is MicroEventKind.HISTORICAL and micro.year_window is None:
            problems.append(f"{micro.id}: historical micro-event needs a year window")

    if problems:
        for problem in problems:
            logger.error(f"Content integrity: {problem}")
        raise ContentIntegrityError("; ".join(problems))
