from __future__ import annotations

import pytest

from src.attendance_portal.attendance_portal.portal.registry import SessionRegistry


def test_new_session_is_not_stored():
    registry = SessionRegistry()

    registry.new_session()
    registry.new_session()

    assert len(registry) == 0


def test_add_get_discard():
    registry = SessionRegistry()
    ps = registry.new_session()

    token = registry.add(ps)

    assert registry.get(token) is ps
    registry.discard(token)
    assert registry.get(token) is None
    assert len(registry) == 0


def test_unknown_or_missing_token():
    registry = SessionRegistry()

    assert registry.get(None) is None
    assert registry.get("nope") is None
    registry.discard(None)
    registry.discard("nope")


def test_least_recently_used_session_is_evicted():
    registry = SessionRegistry(max_sessions=2)
    first = registry.add(registry.new_session())
    second = registry.add(registry.new_session())

    registry.get(first)
    third = registry.add(registry.new_session())

    assert len(registry) == 2
    assert registry.get(second) is None
    assert registry.get(first) is not None
    assert registry.get(third) is not None


def test_new_session_rejects_epoch_of_earlier_one():
    registry = SessionRegistry()
    first = registry.new_session()
    old_epoch = first.epoch
    first.logout()

    second = registry.new_session()

    assert second.epoch != old_epoch
    assert not second.is_current(old_epoch)


def test_limit_must_be_positive():
    with pytest.raises(ValueError):
        SessionRegistry(max_sessions=0)
