"""
Database operations for Ecclesia.
Postgres-backed session identity and report storage via psycopg2.
"""

import os
import logging
from typing import Optional, Dict, Any
from contextlib import contextmanager

import psycopg2
from psycopg2.extras import RealDictCursor, Json

from session_store import SessionStore, SessionStatus, StudentSession

logger = logging.getLogger(__name__)


def get_database_url() -> Optional[str]:
    return os.environ.get('DATABASE_URL')


@contextmanager
def get_db():
    """Get a database connection with automatic cleanup."""
    database_url = get_database_url()
    if not database_url:
        raise RuntimeError("DATABASE_URL environment variable not set")

    conn = psycopg2.connect(database_url)
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def _row_to_session(row: Optional[Dict[str, Any]]) -> Optional[StudentSession]:
    if not row:
        return None
    started_at = row.get('started_at')
    return StudentSession.from_dict({
        'id': row.get('id'),
        'full_name': row.get('full_name'),
        'email': row.get('email'),
        'status': row.get('status'),
        'started_at': started_at.isoformat() if hasattr(started_at, 'isoformat') else (started_at or ""),
    })


class DatabaseSessionStore(SessionStore):
    """Database storage for student sessions and reports."""

    # ==================== Sessions ====================

    def save(self, session: StudentSession) -> StudentSession:
        with get_db() as conn:
            with conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute("""
                    INSERT INTO student_sessions (id, full_name, email, status, started_at)
                    VALUES (%s, %s, %s, %s, %s)
                    ON CONFLICT (id) DO UPDATE SET
                        full_name = EXCLUDED.full_name,
                        email = EXCLUDED.email,
                        status = EXCLUDED.status
                    RETURNING *
                """, (
                    session.id,
                    session.full_name,
                    session.email,
                    session.status,
                    session.started_at or None,
                ))
                return _row_to_session(dict(cur.fetchone())) or session

    def load(self, session_id: str) -> Optional[StudentSession]:
        with get_db() as conn:
            with conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute(
                    "SELECT * FROM student_sessions WHERE id = %s LIMIT 1",
                    (session_id,)
                )
                result = cur.fetchone()
                return _row_to_session(dict(result)) if result else None

    def mark_completed(self, session_id: str) -> bool:
        with get_db() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    "UPDATE student_sessions SET status = %s, completed_at = NOW() WHERE id = %s",
                    (SessionStatus.COMPLETED, session_id)
                )
                return cur.rowcount > 0

    # ==================== Reports ====================

    def save_report(self, session_id: str, report: Dict) -> bool:
        with get_db() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    "SELECT 1 FROM student_sessions WHERE id = %s",
                    (session_id,)
                )
                if not cur.fetchone():
                    return False
                cur.execute("""
                    INSERT INTO session_reports (session_id, outcome, total_decisions, report)
                    VALUES (%s, %s, %s, %s)
                    ON CONFLICT (session_id) DO UPDATE SET
                        outcome = EXCLUDED.outcome,
                        total_decisions = EXCLUDED.total_decisions,
                        report = EXCLUDED.report,
                        created_at = NOW()
                """, (
                    session_id,
                    report.get('outcome'),
                    report.get('total_decisions', 0),
                    Json(report),
                ))
                return True

    def load_report(self, session_id: str) -> Optional[Dict]:
        with get_db() as conn:
            with conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute(
                    "SELECT report FROM session_reports WHERE session_id = %s LIMIT 1",
                    (session_id,)
                )
                result = cur.fetchone()
                return result['report'] if result else None
