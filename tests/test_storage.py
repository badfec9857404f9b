# tests/test_storage.py

from datetime import date

import pytest

import mebcal
from mebcal.core.errors import InvalidHijriDate
from mebcal.core.types import Category, Event
from mebcal.storage import EventStore


@pytest.fixture
def store():
    """In-memory SQLite store, fresh per test."""
    s = EventStore("sqlite://")
    s.init()
    yield s
    s.close()


def test_year_exists(store):
    assert not store.year_exists(2024)
    store.insert_events(mebcal.evaluate(2024))
    assert store.year_exists(2024)
    assert not store.year_exists(2025)

def test_events_ordered_by_start_date(store):
    events = [
        Event("b", Category.SCHOOL, date(2024, 5, 1), date(2024, 5, 2), 2024),
        Event("a", Category.OFFICIAL, date(2024, 1, 1), date(2024, 1, 1), 2024),
        Event("c", Category.COMMEMORATIVE, date(2024, 5, 1), date(2024, 5, 1), 2024),
    ]
    assert store.insert_events(events) == 3
    got = store.events_by_year(2024)
    assert [ev.name for ev in got] == ["a", "b", "c"]
    assert got[1] == events[0]

def test_settle_computes_then_reads(store):
    events, computed = mebcal.settle(2024, store)
    assert computed
    again, computed = mebcal.settle(2024, store)
    assert not computed
    assert again == events

def test_settle_is_idempotent(store):
    stored, _ = mebcal.settle(2025, store)
    recomputed = sorted(mebcal.evaluate(2025), key=lambda ev: ev.start_date)
    assert stored == recomputed

def test_recompute_replaces_year(store):
    mebcal.settle(2024, store)
    events, computed = mebcal.settle(2024, store, recompute=True)
    assert computed
    assert len(events) == len(mebcal.evaluate(2024))

def test_delete_year(store):
    store.insert_events(mebcal.evaluate(2024))
    n = store.delete_year(2024)
    assert n == len(mebcal.evaluate(2024))
    assert store.events_by_year(2024) == []

def test_context_manager(tmp_path):
    url = f"sqlite:///{tmp_path / 'cal.sqlite'}"
    with EventStore(url) as s:
        s.insert_events(mebcal.evaluate(2030))
    with EventStore(url) as s:
        assert s.year_exists(2030)

def test_replace_year(store):
    store.insert_events(mebcal.evaluate(2024))
    store.insert_events(mebcal.evaluate(2025))
    ev = Event("only", Category.SCHOOL, date(2024, 9, 9), date(2024, 9, 9), 2024)
    assert store.replace_year(2024, [ev]) == 1
    assert store.events_by_year(2024) == [ev]
    assert len(store.events_by_year(2025)) == len(mebcal.evaluate(2025))

def test_failed_recompute_keeps_stored_year(store, monkeypatch):
    stored, _ = mebcal.settle(2024, store)

    def boom(year, *, calendar=None):
        raise InvalidHijriDate(f"no calendar for {year}")

    monkeypatch.setattr("mebcal.api.evaluate", boom)
    with pytest.raises(InvalidHijriDate):
        mebcal.settle(2024, store, recompute=True)
    assert store.year_exists(2024)
    assert store.events_by_year(2024) == stored
