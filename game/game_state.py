"""
Ecclesia - Game State Module

Central state for one session:
- Phase, year and imperial status
- Community stats, narrative tags, resolved events
- The pending decision and the last resolved outcome
- Cooldown deadline and the micro-event queued for it
- Append-only decision log

Only the progression engine mutates this. Includes serialization for the
presentation layer and the end-of-session report.
"""

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Deque, Dict, List, Optional, Set

from config import MICRO_EVENT_HISTORY_SIZE
from content import Choice, GameDeck, GameEvent, MicroEvent, Outcome
from stats import GameEnding, GameStats

REPORT_VERSION = "3.0"


class GamePhase(Enum):
    """Current phase of the game"""
    LOADING = "loading"       # Session created, first event not drawn yet
    DECISION = "decision"     # Event shown, waiting for a choice
    CONFIRM = "confirm"       # Choice picked, waiting for reflection/confirmation
    RESOLVING = "resolving"   # Outcome applied (held only before a final ending)
    COOLDOWN = "cooldown"     # Pause before the next event
    COMPLETE = "complete"     # Terminal


@dataclass
class GameLogEntry:
    """One resolved decision, as recorded for display and export"""

    timestamp: str
    event_id: str
    event_title: str
    choice_id: str
    choice_label: str
    outcome_id: str
    outcome_description: str
    stats_after: GameStats
    year_after: int
    status_after: str

    reflection_prompt: Optional[str] = None
    reflection_answer: Optional[str] = None
    reflection_answer_index: Optional[int] = None
    reflection_correct_index: Optional[int] = None

    @property
    def reflection_correct(self) -> Optional[bool]:
        """Derived for display only; never feeds back into outcomes"""
        if self.reflection_answer_index is None or self.reflection_correct_index is None:
            return None
        return self.reflection_answer_index == self.reflection_correct_index

    def to_dict(self) -> Dict:
        return {
            "timestamp": self.timestamp,
            "event_id": self.event_id,
            "event_title": self.event_title,
            "choice_id": self.choice_id,
            "choice_label": self.choice_label,
            "reflection_prompt": self.reflection_prompt,
            "reflection_answer": self.reflection_answer,
            "reflection_correct": self.reflection_correct,
            "outcome_id": self.outcome_id,
            "outcome_description": self.outcome_description,
            "stats_after": self.stats_after.to_dict(),
            "year_after": self.year_after,
            "status_after": self.status_after,
        }


@dataclass
class GameState:
    """
    Complete engine state.

    This is the single source of truth for a session.
    """

    year: int
    status: str
    stats: GameStats = field(default_factory=GameStats.initial)
    phase: GamePhase = GamePhase.LOADING

    # Decision in progress
    current_event: Optional[GameEvent] = None
    pending_choice: Optional[Choice] = None
    pending_reflection_answer: Optional[int] = None
    resolved_outcome: Optional[Outcome] = None

    # Cooldown
    cooldown_ends_at: Optional[float] = None
    micro_event_pending: Optional[MicroEvent] = None
    micro_event_revealed: bool = False

    # History
    tags: Set[str] = field(default_factory=set)
    events_resolved: Set[str] = field(default_factory=set)
    log: List[GameLogEntry] = field(default_factory=list)
    recent_micro_events: Deque[str] = field(
        default_factory=lambda: deque(maxlen=MICRO_EVENT_HISTORY_SIZE)
    )
    shown_historical: Set[str] = field(default_factory=set)

    # Ending info
    ending: Optional[GameEnding] = None

    # Timestamps
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None

    @classmethod
    def new(cls, deck: GameDeck) -> "GameState":
        """Fresh state at the deck's opening year"""
        return cls(
            year=deck.initial_year,
            status=deck.era_table.status_for_year(deck.initial_year),
            started_at=datetime.now(),
        )

    @property
    def is_complete(self) -> bool:
        return self.phase is GamePhase.COMPLETE

    @property
    def decisions_made(self) -> int:
        return len(self.log)

    def clear_decision(self):
        self.pending_choice = None
        self.pending_reflection_answer = None

    def clear_cooldown(self):
        self.cooldown_ends_at = None
        self.micro_event_pending = None
        self.micro_event_revealed = False

    # =========================================================================
    # REPORT
    # =========================================================================

    def to_report_dict(self, session: Optional[Dict] = None) -> Dict:
        """
        End-of-session export of every decision.

        Args:
            session: Opaque identity ({id, full_name, email}) if one exists
        """
        return {
            "meta": {
                "generated_at": datetime.now().isoformat(),
                "version": REPORT_VERSION,
            },
            "session": {
                "id": session.get("id"),
                "full_name": session.get("full_name"),
                "email": session.get("email"),
            } if session else None,
            "outcome": self.ending.value if self.ending else None,
            "stats": self.stats.to_dict(),
            "total_decisions": self.decisions_made,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "ended_at": self.ended_at.isoformat() if self.ended_at else None,
            "choices": [
                {
                    "timestamp": entry.timestamp,
                    "year": entry.year_after,
                    "event": entry.event_title,
                    "choice": entry.choice_label,
                    "reflection_prompt": entry.reflection_prompt,
                    "reflection_answer": entry.reflection_answer,
                    "reflection_correct": entry.reflection_correct,
                }
                for entry in self.log
            ],
        }
