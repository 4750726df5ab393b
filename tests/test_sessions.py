"""Tests for the in-memory session store."""

from datetime import datetime, timedelta

from tango.sessions import SessionStore


class TestSessionStore:
    def test_create_and_get(self, catalog):
        store = SessionStore(catalog)
        session_id, session = store.create()
        assert store.get(session_id) is session

    def test_unknown_or_missing_id(self, catalog):
        store = SessionStore(catalog)
        assert store.get("nope") is None
        assert store.get(None) is None

    def test_sessions_are_independent(self, catalog):
        """Each learner gets their own run."""
        store = SessionStore(catalog)
        first_id, first = store.create()
        second_id, second = store.create()
        assert first_id != second_id
        assert first is not second

    def test_idle_session_expires(self, catalog):
        """Sessions idle past the timeout are dropped."""
        store = SessionStore(catalog, timeout_minutes=5)
        session_id, _ = store.create()
        store.last_seen[session_id] = datetime.now() - timedelta(minutes=6)

        assert store.get(session_id) is None
        assert session_id not in store.sessions

    def test_get_refreshes_idle_timer(self, catalog):
        store = SessionStore(catalog, timeout_minutes=5)
        session_id, session = store.create()
        store.last_seen[session_id] = datetime.now() - timedelta(minutes=4)

        assert store.get(session_id) is session
        assert datetime.now() - store.last_seen[session_id] < timedelta(minutes=1)

    def test_discard(self, catalog):
        store = SessionStore(catalog)
        session_id, _ = store.create()
        store.discard(session_id)
        store.discard("never-existed")
        assert store.get(session_id) is None

    def test_create_purges_idle_sessions(self, catalog):
        """Idle sessions are dropped even if nobody looks them up again."""
        store = SessionStore(catalog, timeout_minutes=5)
        stale_id, _ = store.create()
        fresh_id, _ = store.create()
        store.last_seen[stale_id] = datetime.now() - timedelta(minutes=10)

        new_id, _ = store.create()

        assert set(store.sessions) == {fresh_id, new_id}
        assert set(store.last_seen) == {fresh_id, new_id}

    def test_purge_expired_counts(self, catalog):
        store = SessionStore(catalog, timeout_minutes=5)
        ids = [store.create()[0] for _ in range(3)]
        for session_id in ids[:2]:
            store.last_seen[session_id] = datetime.now() - timedelta(minutes=6)

        assert store.purge_expired() == 2
        assert store.purge_expired() == 0
        assert list(store.sessions) == [ids[2]]
