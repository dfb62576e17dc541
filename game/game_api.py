"""
Ecclesia - Game API Module

JSON-based API for the game, designed for web frontends.
Separates game logic from presentation entirely.

All methods return structured message dicts that frontends can render as
they wish. Changes caused by timers (micro-event reveal, cooldown expiry,
final ending) arrive through the push callback instead.

Features:
- One progression engine per connected client
- Optional session identity; reports saved when one exists
"""

import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from config import SessionConfiguration
from content import GameDeck
from event_deck import load_base_deck
from progression import ProgressionEngine
from session_store import SessionStore
from timers import Scheduler

logger = logging.getLogger(__name__)


# =============================================================================
# MESSAGE TYPES
# =============================================================================

class MessageType:
    """Types of messages the API can emit"""
    STATE = "state"
    EVENT = "event"
    CHOICE_SELECTED = "choice_selected"
    REFLECTION_RECORDED = "reflection_recorded"
    OUTCOME = "outcome"
    MICRO_EVENT = "micro_event"
    GAME_END = "game_end"
    ERROR = "error"


def emit(msg_type: str, data: Dict[str, Any] = None) -> Dict[str, Any]:
    """Create a standardized message"""
    return {
        "type": msg_type,
        "data": data or {},
        "timestamp": datetime.now().isoformat()
    }


# Engine change reason -> message type
REASON_MESSAGES = {
    "reset": MessageType.STATE,
    "event": MessageType.EVENT,
    "choice_selected": MessageType.CHOICE_SELECTED,
    "reflection_recorded": MessageType.REFLECTION_RECORDED,
    "resolved": MessageType.OUTCOME,
    "cooldown": MessageType.OUTCOME,
    "micro_event": MessageType.MICRO_EVENT,
    "complete": MessageType.GAME_END,
}


class GameSession:
    """
    Request/response wrapper around one ProgressionEngine.

    Commands return the messages they produced. Timer-driven messages go to
    `push` (the server forwards them to the client's socket).
    """

    def __init__(self, session_id: Optional[str] = None, store: Optional[SessionStore] = None,
                 config: Optional[SessionConfiguration] = None, scheduler: Optional[Scheduler] = None,
                 deck: Optional[GameDeck] = None,
                 push: Optional[Callable[[Dict[str, Any]], None]] = None):
        self.session_id = session_id
        self.store = store
        self.push = push
        self._outbox: Optional[List[Dict]] = None
        self._report: Optional[Dict] = None

        self.engine = ProgressionEngine(
            deck or load_base_deck(),
            config=config,
            scheduler=scheduler,
            listener=self._on_change,
        )

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def start(self) -> List[Dict]:
        """Present the first event"""
        return self._collect(self.engine.start)

    def select_choice(self, choice_id: str) -> List[Dict]:
        def run():
            if not self.engine.select_choice(choice_id):
                self._outbox.append(self._rejection(f"Choice '{choice_id}' is not available"))
        return self._collect(run)

    def set_reflection_answer(self, option_index: int) -> List[Dict]:
        def run():
            if not self.engine.set_reflection_answer(option_index):
                self._outbox.append(self._rejection("No reflection answer expected"))
        return self._collect(run)

    def confirm(self) -> List[Dict]:
        def run():
            if not self.engine.confirm_resolution():
                self._outbox.append(self._rejection("Answer the reflection before confirming"))
        return self._collect(run)

    def restart(self) -> List[Dict]:
        self._report = None
        return self._collect(self.engine.reset)

    def get_state(self) -> Dict:
        return self.engine.snapshot()

    def close(self):
        self.engine.close()

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _collect(self, action: Callable[[], Any]) -> List[Dict]:
        self._outbox = []
        try:
            action()
            return self._outbox
        finally:
            self._outbox = None

    def _rejection(self, message: str) -> Dict:
        return emit(MessageType.ERROR, {"message": message, "state": self.engine.snapshot()})

    def _on_change(self, reason: str):
        if reason == "complete":
            self._finalize()

        data = {"state": self.engine.snapshot()}
        if reason == "complete":
            data["report"] = self._report
        message = emit(REASON_MESSAGES.get(reason, MessageType.STATE), data)

        if self._outbox is not None:
            self._outbox.append(message)
        elif self.push:
            self.push(message)

    def _finalize(self):
        """Build the report and hand it to the session store if there is an identity"""
        session = None
        if self.session_id and self.store:
            try:
                session = self.store.load(self.session_id)
            except Exception as e:
                logger.error(f"Could not load session {self.session_id}: {e}")

        self._report = self.engine.state.to_report_dict(session.to_dict() if session else None)
        if not session:
            return

        try:
            self.store.save_report(session.id, self._report)
            self.store.mark_completed(session.id)
        except Exception as e:
            logger.error(f"Could not store report for {session.id}: {e}")
