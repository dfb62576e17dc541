"""
test_config.py — per-session configuration from the environment
"""

import pytest

from config import COOLDOWN_SECONDS, SessionConfiguration, get_session_configuration


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DEBUG_MODE", "DEBUG_SKIP_TO_EVENT", "DEBUG_SEED"):
        monkeypatch.delenv(name, raising=False)


class TestSessionConfiguration:
    def test_defaults(self):
        config = SessionConfiguration()
        assert config.seed is None
        assert config.debug_skip_to_event_count is None
        assert config.effective_cooldown == COOLDOWN_SECONDS

    def test_cooldown_override(self):
        assert SessionConfiguration(cooldown_seconds=0.5).effective_cooldown == 0.5


class TestFromEnvironment:
    def test_debug_values_ignored_outside_debug_mode(self, monkeypatch):
        monkeypatch.setenv("DEBUG_SKIP_TO_EVENT", "3")
        monkeypatch.setenv("DEBUG_SEED", "7")
        assert get_session_configuration() == SessionConfiguration()

    def test_debug_mode(self, monkeypatch):
        monkeypatch.setenv("DEBUG_MODE", "true")
        monkeypatch.setenv("DEBUG_SKIP_TO_EVENT", "3")
        monkeypatch.setenv("DEBUG_SEED", "7")
        config = get_session_configuration()
        assert config.debug_skip_to_event_count == 3
        assert config.seed == 7

    def test_bad_values_ignored(self, monkeypatch):
        monkeypatch.setenv("DEBUG_MODE", "TRUE")
        monkeypatch.setenv("DEBUG_SKIP_TO_EVENT", "-2")
        monkeypatch.setenv("DEBUG_SEED", "abc")
        assert get_session_configuration() == SessionConfiguration()
