"""
test_session_store.py — JSON-backed session identity and reports
"""

import pytest

from session_store import (
    JSONSessionStore, SessionStatus, StudentSession, get_default_session_store
)


@pytest.fixture
def store_path(tmp_path):
    return str(tmp_path / "sessions.json")


@pytest.fixture
def store(store_path):
    return JSONSessionStore(store_path)


class TestStudentSession:
    def test_create_trims_and_ids(self):
        session = StudentSession.create("  Ada Lovelace ", " ada@example.com")
        assert session.full_name == "Ada Lovelace"
        assert session.email == "ada@example.com"
        assert session.status == SessionStatus.ACTIVE
        assert len(session.id) == 32

    def test_incomplete_record_loads_as_none(self):
        assert StudentSession.from_dict({"id": "x", "full_name": "Ada"}) is None
        assert StudentSession.from_dict(None) is None


class TestJSONSessionStore:
    def test_save_and_load(self, store):
        session = store.save(StudentSession.create("Ada", "ada@example.com"))
        assert store.load(session.id) == session

    def test_persists_across_instances(self, store, store_path):
        session = store.save(StudentSession.create("Ada", "ada@example.com"))
        assert JSONSessionStore(store_path).load(session.id) == session

    def test_unknown_session(self, store):
        assert store.load("missing") is None
        assert store.mark_completed("missing") is False
        assert store.save_report("missing", {"outcome": "victory"}) is False

    def test_mark_completed(self, store):
        session = store.save(StudentSession.create("Ada", "ada@example.com"))
        assert store.mark_completed(session.id)
        assert store.load(session.id).status == SessionStatus.COMPLETED

    def test_reports(self, store, store_path):
        session = store.save(StudentSession.create("Ada", "ada@example.com"))
        assert store.load_report(session.id) is None
        assert store.save_report(session.id, {"outcome": "collapse", "total_decisions": 4})
        assert JSONSessionStore(store_path).load_report(session.id)["total_decisions"] == 4

    def test_corrupt_file_starts_empty(self, store_path):
        with open(store_path, "w", encoding="utf-8") as f:
            f.write("{not json")
        assert JSONSessionStore(store_path).data == {"sessions": {}, "reports": {}}


class TestDefaultStore:
    def test_json_without_database(self, monkeypatch, tmp_path):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.chdir(tmp_path)
        assert isinstance(get_default_session_store(), JSONSessionStore)
