from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta

import pytest

from spendtrack.services.ledger import Ledger


def test_new_ledger_is_empty(ledger: Ledger):
    assert ledger.is_empty
    assert len(ledger) == 0
    assert ledger.entries == ()


def test_prepend_keeps_newest_first(ledger, entry_factory):
    first = entry_factory(amount=1.0)
    second = entry_factory(amount=2.0)
    ledger.prepend(first)
    ledger.prepend(second)

    assert ledger.entries == (second, first)
    assert list(ledger) == [second, first]
    assert not ledger.is_empty


def test_duplicate_id_is_rejected(ledger, entry_factory):
    entry = entry_factory()
    ledger.prepend(entry)
    with pytest.raises(ValueError):
        ledger.prepend(entry)
    assert len(ledger) == 1


def test_entries_snapshot_is_not_live(ledger, entry_factory):
    snapshot = ledger.entries
    ledger.prepend(entry_factory())
    assert snapshot == ()


def test_entries_are_immutable(entry_factory):
    entry = entry_factory(amount=5.0)
    with pytest.raises(FrozenInstanceError):
        entry.amount = 6.0  # type: ignore[misc]


def test_ids_derive_from_timestamp(ledger):
    moment = datetime(2024, 1, 2, 3, 4, 5)
    assert ledger.next_id(moment) == int(moment.timestamp() * 1000)


def test_ids_never_collide_within_same_millisecond(ledger):
    moment = datetime(2024, 1, 2, 3, 4, 5)
    ids = [ledger.next_id(moment) for _ in range(5)]
    assert len(set(ids)) == 5
    assert ids == sorted(ids)


def test_ids_stay_monotonic_if_clock_goes_backwards(ledger):
    later = datetime(2024, 1, 2, 3, 4, 5)
    earlier = later - timedelta(seconds=30)
    first = ledger.next_id(later)
    assert ledger.next_id(earlier) == first + 1
