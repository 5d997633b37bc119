"""Tests for in-memory conversation sessions."""

import pytest

from wayfinder.core.exception import SessionNotFoundError
from wayfinder.core.messages import MessageRole
from wayfinder.core.sessions import SessionStore, SessionSweeper


class FakeClock:
    def __init__(self, now: float = 1_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock) -> SessionStore:
    return SessionStore(prefix="session", max_messages=4, idle_timeout=60, clock=clock)


class TestGetOrCreate:
    def test_new_session_id_format(self, store):
        session = store.get_or_create()
        prefix, millis, suffix = session.id.split("_")

        assert prefix == "session"
        assert millis == "1000000"
        assert len(suffix) == 9
        assert session.id in store

    def test_known_id_is_reused_and_refreshed(self, store, clock):
        session = store.get_or_create()
        clock.now += 30

        again = store.get_or_create(session.id)
        assert again is session
        assert again.last_activity == clock.now

    def test_unknown_id_gets_a_fresh_id(self, store):
        session = store.get_or_create("session_123_abc")

        assert session.id != "session_123_abc"
        assert "session_123_abc" not in store
        assert len(store) == 1


class TestMessages:
    def test_add_message_trims_oldest(self, store):
        session = store.get_or_create()
        for i in range(6):
            store.add_message(session.id, MessageRole.USER, f"m{i}")

        assert [m.content for m in session.messages] == ["m2", "m3", "m4", "m5"]

    def test_default_cap_keeps_last_thirty(self, clock):
        store = SessionStore(clock=clock)
        session = store.get_or_create()
        for i in range(35):
            store.add_message(session.id, "user", f"m{i}")

        assert len(session.messages) == 30
        assert session.messages[0].content == "m5"
        assert session.messages[-1].content == "m34"

    def test_add_message_to_missing_session(self, store):
        with pytest.raises(SessionNotFoundError):
            store.add_message("nope", "user", "hello")

    def test_history_starts_with_system_prompt(self, store):
        session = store.get_or_create()
        store.add_message(session.id, "user", "hi")
        store.add_message(session.id, "assistant", "hello")

        history = store.get_conversation_history(session.id, "system text")
        assert [m.role for m in history] == [
            MessageRole.SYSTEM,
            MessageRole.USER,
            MessageRole.ASSISTANT,
        ]
        assert history[0].content == "system text"

    def test_history_for_unknown_session(self, store):
        history = store.get_conversation_history("missing", "prompt")
        assert len(history) == 1

    def test_history_limit(self, clock):
        store = SessionStore(max_messages=10, history_limit=2, clock=clock)
        session = store.get_or_create()
        for i in range(5):
            store.add_message(session.id, "user", f"m{i}")

        history = store.get_conversation_history(session.id, "prompt")
        assert [m.content for m in history[1:]] == ["m3", "m4"]

    def test_history_is_a_copy(self, store):
        session = store.get_or_create()
        store.add_message(session.id, "user", "hi")

        history = store.get_conversation_history(session.id, "prompt")
        history[1].content = "changed"
        assert session.messages[0].content == "hi"

    def test_invalid_max_messages(self):
        with pytest.raises(ValueError):
            SessionStore(max_messages=0)


class TestSweep:
    def test_sweep_evicts_idle_sessions(self, store, clock):
        old = store.get_or_create()
        clock.now += 45
        fresh = store.get_or_create()
        clock.now += 30

        assert store.sweep() == 1
        assert old.id not in store
        assert fresh.id in store

    def test_swept_id_is_not_revived(self, store, clock):
        old = store.get_or_create()
        clock.now += 61
        store.sweep()

        session = store.get_or_create(old.id)
        assert session.id != old.id
        assert old.id not in store
        assert session.messages == []

    def test_activity_keeps_session_alive(self, store, clock):
        session = store.get_or_create()
        clock.now += 50
        store.add_message(session.id, "user", "still here")
        clock.now += 50

        assert store.sweep() == 0

    def test_clear(self, store):
        session = store.get_or_create()
        assert store.clear(session.id) is True
        assert store.clear(session.id) is False

    def test_stats(self, store):
        session = store.get_or_create()
        store.add_message(session.id, "user", "hi")

        stats = store.stats()
        assert stats.total_sessions == 1
        assert stats.sessions[0].id == session.id
        assert stats.sessions[0].message_count == 1


class TestSessionSweeper:
    def test_run_once_sweeps_every_store(self, clock):
        first = SessionStore(prefix="a", idle_timeout=10, clock=clock)
        second = SessionStore(prefix="b", idle_timeout=10, clock=clock)
        first.get_or_create()
        second.get_or_create()
        clock.now += 20

        assert SessionSweeper([first, second]).run_once() == 2

    def test_invalid_interval(self):
        with pytest.raises(ValueError):
            SessionSweeper([], interval=0)

    async def test_start_and_stop(self):
        sweeper = SessionSweeper([SessionStore()], interval=60)
        sweeper.start()
        assert sweeper.is_running

        await sweeper.stop()
        assert not sweeper.is_running
