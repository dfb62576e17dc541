"""
Ecclesia - Progression Engine

The state machine that drives a session:

    loading -> decision -> confirm -> resolving -> cooldown -> decision ...
                                          |
                                          +--> complete (collapse / victory)

Commands from the presentation layer (select_choice, set_reflection_answer,
confirm_resolution, reset) and timer callbacks (micro-event reveal,
cooldown expiry) are the only ways state changes. A command or callback
that does not fit the current phase returns False and changes nothing.

Resolution is a single step: outcome draw, year advance, stat and tag
updates, log entry and the ending check all happen before anything else
can observe the state.
"""

import logging
import time
from datetime import datetime
from functools import partial
from typing import Callable, Dict, List, Optional

from chance import create_seeded_rng, pick_weighted
from config import (
    SessionConfiguration, WIN_TARGET, COHESION_RISK_THRESHOLD,
    MICRO_EVENT_REVEAL_FRACTION, EXHAUSTION_DELAY_SECONDS, SEED_STRIDE
)
from content import Choice, ContentIntegrityError, GameDeck, GameEvent, validate_deck
from event_selector import has_next_event, select_next_event
from game_state import GameLogEntry, GamePhase, GameState
from micro_events import select_micro_event
from prerequisites import RequirementCheck, evaluate_requirements
from stats import GameEnding, apply_stat_delta, detect_ending
from timers import GeventScheduler, Scheduler, TimerHandle

logger = logging.getLogger(__name__)

Listener = Callable[[str], None]


class ProgressionEngine:
    """
    Owns the GameState for one session and performs every transition.

    Args:
        deck: Validated on construction; a malformed deck raises ContentIntegrityError
        config: Seed and debug options for this session
        scheduler: Source of delayed callbacks (gevent by default)
        listener: Called with a short reason after every state change,
                  including the ones triggered by timers
    """

    def __init__(self, deck: GameDeck, config: Optional[SessionConfiguration] = None,
                 scheduler: Optional[Scheduler] = None, listener: Optional[Listener] = None):
        validate_deck(deck)
        self.deck = deck
        self.config = config or SessionConfiguration()
        self.scheduler = scheduler or GeventScheduler()
        self.listener = listener

        self.state = GameState.new(deck)
        self._timers: List[TimerHandle] = []
        self._generation = 0
        self._draw_count = 0

    # =========================================================================
    # SESSION LIFECYCLE
    # =========================================================================

    def start(self) -> GamePhase:
        """Draw the first event (loading -> decision, or complete on an empty deck)"""
        if self.state.phase is not GamePhase.LOADING:
            return self.state.phase

        self._apply_debug_skip()

        event = self._draw_event()
        if event is None:
            logger.info("Deck has no playable events; ending session")
            self._complete(GameEnding.VICTORY)
        else:
            self._enter_decision(event)
        return self.state.phase

    def reset(self) -> GamePhase:
        """Discard all timers and state and start over"""
        self._cancel_timers()
        self._draw_count = 0
        self.state = GameState.new(self.deck)
        logger.info("Session reset")
        self._notify("reset")
        return self.start()

    def close(self):
        """Stop any pending timers (client went away)"""
        self._cancel_timers()

    # =========================================================================
    # PLAYER COMMANDS
    # =========================================================================

    def check_choice(self, choice: Choice) -> RequirementCheck:
        return evaluate_requirements(choice.requirements, self.state.stats, self.state.tags)

    def select_choice(self, choice_id: str) -> bool:
        """Pick a choice on the current event. Locked or unknown choices are ignored."""
        state = self.state
        if state.phase not in (GamePhase.DECISION, GamePhase.CONFIRM) or not state.current_event:
            logger.debug(f"select_choice({choice_id}) ignored in phase {state.phase.value}")
            return False

        choice = state.current_event.get_choice(choice_id)
        if choice is None:
            logger.debug(f"Unknown choice {choice_id} on {state.current_event.id}")
            return False

        check = self.check_choice(choice)
        if not check.met:
            logger.debug(f"Choice {choice_id} locked: {check.unmet}")
            return False

        state.pending_choice = choice
        state.pending_reflection_answer = None
        state.phase = GamePhase.CONFIRM
        self._notify("choice_selected")
        return True

    def set_reflection_answer(self, option_index: int) -> bool:
        state = self.state
        choice = state.pending_choice
        if state.phase is not GamePhase.CONFIRM or choice is None or choice.reflection is None:
            return False
        if not 0 <= option_index < len(choice.reflection.options):
            return False

        state.pending_reflection_answer = option_index
        self._notify("reflection_recorded")
        return True

    @property
    def can_confirm(self) -> bool:
        state = self.state
        if state.phase is not GamePhase.CONFIRM or state.pending_choice is None:
            return False
        if state.pending_choice.reflection is None:
            return True
        return state.pending_reflection_answer is not None

    def confirm_resolution(self) -> bool:
        """Resolve the pending choice. Blocked until a required reflection is answered."""
        if not self.can_confirm:
            logger.debug(f"confirm_resolution ignored in phase {self.state.phase.value}")
            return False
        self._resolve()
        return True

    # =========================================================================
    # TIMER CALLBACKS
    # =========================================================================

    def reveal_micro_event(self, token: Optional[int] = None) -> bool:
        """Apply the queued micro-event's effects (once per cooldown)"""
        if token is not None and token != self._generation:
            logger.debug("Stale micro-event timer ignored")
            return False

        state = self.state
        micro = state.micro_event_pending
        if state.phase is not GamePhase.COOLDOWN or micro is None or state.micro_event_revealed:
            return False

        state.stats = apply_stat_delta(state.stats, micro.effects)
        state.micro_event_revealed = True
        state.recent_micro_events.append(micro.id)
        if micro.year_window is not None:
            state.shown_historical.add(micro.id)

        logger.info(f"Micro-event revealed: {micro.id}")
        self._notify("micro_event")
        return True

    def advance_after_cooldown(self, token: Optional[int] = None) -> bool:
        """Cooldown expired: present the next event or finish the session"""
        if token is not None and token != self._generation:
            logger.debug("Stale cooldown timer ignored")
            return False
        if self.state.phase is not GamePhase.COOLDOWN:
            return False

        # The reveal always lands before the next event
        if self.state.micro_event_pending and not self.state.micro_event_revealed:
            self.reveal_micro_event()

        self._cancel_timers()
        event = self._draw_event()
        if event is None:
            self._complete(GameEnding.VICTORY)
        else:
            self._enter_decision(event)
        return True

    def _finish_exhausted(self, token: int) -> bool:
        if token != self._generation or self.state.phase is not GamePhase.RESOLVING:
            return False
        self._complete(GameEnding.VICTORY)
        return True

    # =========================================================================
    # TRANSITIONS
    # =========================================================================

    def _resolve(self):
        state = self.state
        event = state.current_event
        choice = state.pending_choice
        table = self.deck.era_table

        try:
            outcome = pick_weighted(choice.outcomes, create_seeded_rng(self._next_seed()))
        except ValueError as e:
            logger.error(f"Cannot resolve {event.id}/{choice.id}: {e}")
            raise ContentIntegrityError(f"{event.id}/{choice.id}: {e}") from e

        # Later eras move the calendar at least a few years per decision
        elapsed = max(outcome.year_advance, table.min_year_step(state.year))
        new_year = state.year + elapsed

        state.stats = apply_stat_delta(state.stats, outcome.effects)
        state.tags.update(outcome.tags_add)
        state.tags.difference_update(outcome.tags_remove)
        state.year = new_year
        state.status = table.status_for_year(new_year)

        reflection = choice.reflection
        answer = state.pending_reflection_answer
        state.log.append(GameLogEntry(
            timestamp=datetime.now().isoformat(),
            event_id=event.id,
            event_title=event.title,
            choice_id=choice.id,
            choice_label=choice.label,
            outcome_id=outcome.id,
            outcome_description=outcome.description,
            stats_after=state.stats,
            year_after=new_year,
            status_after=state.status,
            reflection_prompt=reflection.prompt if reflection else None,
            reflection_answer=reflection.options[answer] if reflection and answer is not None else None,
            reflection_answer_index=answer if reflection else None,
            reflection_correct_index=reflection.correct_index if reflection else None,
        ))

        state.events_resolved.add(event.id)
        state.resolved_outcome = outcome
        state.clear_decision()
        state.phase = GamePhase.RESOLVING
        logger.info(f"Resolved {event.id}/{choice.id} -> {outcome.id} (year {new_year})")

        ending = detect_ending(state.stats, WIN_TARGET)
        if ending is not None:
            self._complete(ending)
            return

        if not has_next_event(self.deck, state.year, state.events_resolved):
            # Leave the final outcome on screen briefly before the ending
            self._cancel_timers()
            token = self._generation
            self._timers.append(
                self.scheduler.schedule(EXHAUSTION_DELAY_SECONDS, partial(self._finish_exhausted, token))
            )
            self._notify("resolved")
            return

        self._enter_cooldown()

    def _enter_cooldown(self):
        state = self.state
        self._cancel_timers()
        token = self._generation
        duration = self.config.effective_cooldown

        state.phase = GamePhase.COOLDOWN
        state.cooldown_ends_at = self.scheduler.now() + duration
        state.micro_event_pending = select_micro_event(
            self.deck.micro_events,
            resource_level=state.stats.resources,
            current_year=state.year,
            seed=self._next_seed(),
            recent_history=list(state.recent_micro_events),
            shown_historical=state.shown_historical,
        )
        state.micro_event_revealed = False

        if state.micro_event_pending is not None:
            self._timers.append(self.scheduler.schedule(
                duration * MICRO_EVENT_REVEAL_FRACTION, partial(self.reveal_micro_event, token)
            ))
        self._timers.append(self.scheduler.schedule(duration, partial(self.advance_after_cooldown, token)))

        logger.info(f"Cooldown for {duration:.1f}s")
        self._notify("cooldown")

    def _enter_decision(self, event: GameEvent):
        state = self.state
        state.current_event = event
        state.resolved_outcome = None
        state.clear_decision()
        state.clear_cooldown()
        state.status = self.deck.era_table.status_for_year(state.year)
        state.phase = GamePhase.DECISION
        logger.info(f"Presenting {event.id} (year {state.year})")
        self._notify("event")

    def _complete(self, ending: GameEnding):
        self._cancel_timers()
        state = self.state
        state.phase = GamePhase.COMPLETE
        state.ending = ending
        state.current_event = None
        state.clear_decision()
        state.clear_cooldown()
        state.ended_at = datetime.now()
        logger.info(f"Session complete: {ending.value} after {state.decisions_made} decisions")
        self._notify("complete")

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _apply_debug_skip(self):
        """Mark the first N events resolved without effects (development only)"""
        count = self.config.debug_skip_to_event_count
        if not count:
            return

        state = self.state
        for _ in range(count):
            event = self._draw_event()
            if event is None:
                break
            state.events_resolved.add(event.id)
            state.year = max(state.year, event.year_hint)

        state.status = self.deck.era_table.status_for_year(state.year)
        logger.info(f"Debug skip: {len(state.events_resolved)} events pre-resolved, year {state.year}")

    def _draw_event(self) -> Optional[GameEvent]:
        return select_next_event(self.deck, self.state.year, self.state.events_resolved, self._next_seed())

    def _next_seed(self) -> int:
        """A fresh seed per selection; seeded sessions replay exactly"""
        self._draw_count += 1
        if self.config.seed is not None:
            return self.config.seed + self._draw_count * SEED_STRIDE
        return int(time.time() * 1000) + self._draw_count

    def _cancel_timers(self):
        live = [handle for handle in self._timers if handle.active]
        for handle in live:
            handle.cancel()
        if live:
            logger.debug(f"Cancelled {len(live)} pending timer(s)")
        self._timers = []
        # Anything already in flight sees a newer generation and backs off
        self._generation += 1

    def _notify(self, reason: str):
        if self.listener:
            self.listener(reason)

    # =========================================================================
    # SNAPSHOT
    # =========================================================================

    @property
    def cooldown_remaining(self) -> float:
        ends_at = self.state.cooldown_ends_at
        if ends_at is None:
            return 0.0
        return max(0.0, ends_at - self.scheduler.now())

    def _event_view(self, event: GameEvent) -> Dict:
        choices = []
        for choice in event.choices:
            check = self.check_choice(choice)
            choices.append({
                "id": choice.id,
                "label": choice.label,
                "available": check.met,
                "unmet": check.unmet,
                "has_reflection": choice.reflection is not None,
            })
        return {
            "id": event.id,
            "era": event.era,
            "year_hint": event.year_hint,
            "title": event.title,
            "narrative": event.narrative,
            "scene_title": event.scene_title,
            "scene_caption": event.scene_caption,
            "scene_image": event.scene_image,
            "choices": choices,
        }

    def _combined_delta(self) -> Optional[Dict]:
        state = self.state
        if state.resolved_outcome is None:
            return None
        delta = state.resolved_outcome.effects
        if state.micro_event_revealed and state.micro_event_pending:
            delta = delta + state.micro_event_pending.effects
        return delta.to_dict()

    def snapshot(self) -> Dict:
        """Everything the presentation layer renders, as plain data"""
        state = self.state
        choice = state.pending_choice
        micro = state.micro_event_pending

        return {
            "phase": state.phase.value,
            "year": state.year,
            "era": self.deck.era_table.era_for_year(state.year),
            "status": state.status,
            "stats": state.stats.to_dict(),
            "victory_progress": min(100, round(state.stats.members / WIN_TARGET * 100)),
            "cohesion_at_risk": state.stats.cohesion <= COHESION_RISK_THRESHOLD,
            "current_event": self._event_view(state.current_event) if state.current_event else None,
            "pending_choice_id": choice.id if choice else None,
            "reflection": {
                **choice.reflection.to_dict(),
                "answer_index": state.pending_reflection_answer,
            } if choice and choice.reflection else None,
            "can_confirm": self.can_confirm,
            "resolved_outcome": state.resolved_outcome.to_dict() if state.resolved_outcome else None,
            "combined_delta": self._combined_delta(),
            "cooldown_remaining": self.cooldown_remaining,
            "micro_event_pending": micro is not None and not state.micro_event_revealed,
            "micro_event": micro.to_dict() if micro and state.micro_event_revealed else None,
            "tags": sorted(state.tags),
            "log": [entry.to_dict() for entry in state.log],
            "ending": state.ending.value if state.ending else None,
        }
