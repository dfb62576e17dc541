"""
Ecclesia - Session Store Module

Persistence for the student's session identity and the end-of-session
report. The engine never needs this; a session plays the same with or
without an identity.

Backends:
- JSONSessionStore: local file
- DatabaseSessionStore (db.py): Postgres, used when DATABASE_URL is set
"""

import json
import os
import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Dict, Optional

logger = logging.getLogger(__name__)

SESSION_STORE_PATH = os.environ.get("SESSION_STORE_PATH", "ecclesia_sessions.json")


class SessionStatus:
    ACTIVE = "active"
    COMPLETED = "completed"


@dataclass
class StudentSession:
    """Who is playing. Opaque to the engine."""

    id: str
    full_name: str
    email: str
    status: str = SessionStatus.ACTIVE
    started_at: str = ""

    @classmethod
    def create(cls, full_name: str, email: str) -> "StudentSession":
        return cls(
            id=uuid.uuid4().hex,
            full_name=full_name.strip(),
            email=email.strip(),
            started_at=datetime.now().isoformat(),
        )

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> Optional["StudentSession"]:
        """Incomplete records load as None"""
        if not data or not data.get("id") or not data.get("full_name") or not data.get("email"):
            return None
        return cls(
            id=data["id"],
            full_name=data["full_name"],
            email=data["email"],
            status=data.get("status", SessionStatus.ACTIVE),
            started_at=data.get("started_at", ""),
        )

    def to_dict(self) -> Dict:
        return asdict(self)


class SessionStore(ABC):
    """Abstract interface for session storage backends"""

    @abstractmethod
    def save(self, session: StudentSession) -> StudentSession:
        """Insert or replace a session"""
        pass

    @abstractmethod
    def load(self, session_id: str) -> Optional[StudentSession]:
        """Get a session by ID"""
        pass

    @abstractmethod
    def mark_completed(self, session_id: str) -> bool:
        """Flag a session as finished; False if unknown"""
        pass

    @abstractmethod
    def save_report(self, session_id: str, report: Dict) -> bool:
        """Store the end-of-session report"""
        pass

    @abstractmethod
    def load_report(self, session_id: str) -> Optional[Dict]:
        """Get the stored report for a session"""
        pass


class JSONSessionStore(SessionStore):
    """Local JSON file storage for sessions and reports"""

    def __init__(self, filepath: str = SESSION_STORE_PATH):
        self.filepath = filepath
        self.data: Dict[str, Dict] = {"sessions": {}, "reports": {}}
        self._load()

    def _load(self):
        if not os.path.exists(self.filepath):
            return
        try:
            with open(self.filepath, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"Failed to parse stored sessions at {self.filepath}: {e}")
            return
        self.data["sessions"] = loaded.get("sessions", {})
        self.data["reports"] = loaded.get("reports", {})

    def _save(self):
        with open(self.filepath, 'w', encoding='utf-8') as f:
            json.dump(self.data, f, indent=2, ensure_ascii=False)

    def save(self, session: StudentSession) -> StudentSession:
        self.data["sessions"][session.id] = session.to_dict()
        self._save()
        return session

    def load(self, session_id: str) -> Optional[StudentSession]:
        return StudentSession.from_dict(self.data["sessions"].get(session_id))

    def mark_completed(self, session_id: str) -> bool:
        session = self.load(session_id)
        if not session:
            return False
        session.status = SessionStatus.COMPLETED
        self.save(session)
        return True

    def save_report(self, session_id: str, report: Dict) -> bool:
        if session_id not in self.data["sessions"]:
            return False
        self.data["reports"][session_id] = report
        self._save()
        return True

    def load_report(self, session_id: str) -> Optional[Dict]:
        return self.data["reports"].get(session_id)


def get_default_session_store() -> SessionStore:
    """Database when DATABASE_URL is configured, else a local JSON file"""
    if os.environ.get("DATABASE_URL"):
        from db import DatabaseSessionStore
        return DatabaseSessionStore()
    return JSONSessionStore()
