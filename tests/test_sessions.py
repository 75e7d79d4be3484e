"""Tests for SessionStore, including idle eviction."""

from datetime import datetime, timedelta, timezone

from tourism_catalog.browse.tab_controller import TabController
from tourism_catalog.services.catalog_api import CatalogApiService
from tourism_catalog.sessions import SessionStore


def _controller() -> TabController:
    return TabController(CatalogApiService(None))


def test_create_and_get_session():
    store = SessionStore()
    session = store.create_session(_controller())

    assert store.get_session(session.session_id) is session
    assert len(session.session_id) == 12


def test_get_unknown_session():
    store = SessionStore()
    assert store.get_session("missing") is None


def test_get_session_touches_last_seen():
    store = SessionStore()
    session = store.create_session(_controller())
    session.last_seen_at = datetime.now(timezone.utc) - timedelta(minutes=5)
    before = session.last_seen_at

    store.get_session(session.session_id)

    assert session.last_seen_at > before


def test_delete_session():
    store = SessionStore()
    session = store.create_session(_controller())

    assert store.delete_session(session.session_id) is True
    assert store.delete_session(session.session_id) is False
    assert store.get_session(session.session_id) is None


def test_evicts_longest_idle_session():
    store = SessionStore(max_sessions=2)
    first = store.create_session(_controller())
    second = store.create_session(_controller())
    # Make the first one recently used and the second one stale
    first.last_seen_at = datetime.now(timezone.utc)
    second.last_seen_at = datetime.now(timezone.utc) - timedelta(hours=1)

    third = store.create_session(_controller())

    assert len(store) == 2
    assert store.get_session(second.session_id) is None
    assert store.get_session(first.session_id) is first
    assert store.get_session(third.session_id) is third
