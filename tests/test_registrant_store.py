"""Tests for the registrant store."""

import sys
import os
from datetime import datetime
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.registrant import Registrant
from data.registrant_store import RegistrantStore


def make_registrant(rid="Alice", role="melee", created_at=None):
    return Registrant(rid, role, "unwilling", "familiar", "domestic", "Mon 6:30pm CN", created_at)


class TestUpsert:
    def test_trims_id_and_sets_created_at(self):
        store = RegistrantStore()
        stored = store.upsert(make_registrant("  Alice  "))

        assert stored.id == "Alice"
        assert stored.created_at is not None
        assert "Alice" in store
        assert len(store) == 1

    def test_replace_keeps_registration_time(self):
        store = RegistrantStore()
        first = store.upsert(make_registrant("Alice", created_at=datetime(2026, 10, 16, 12)))
        second = store.upsert(make_registrant("Alice", role="healer"))

        assert len(store) == 1
        assert store.get("Alice").role == "healer"
        assert second.created_at == first.created_at

    def test_blank_id_rejected(self):
        store = RegistrantStore()
        with pytest.raises(ValueError):
            store.upsert(make_registrant("   "))
        assert len(store) == 0

    def test_revision_bumps_on_change(self):
        store = RegistrantStore()
        start = store.revision
        store.upsert(make_registrant("Alice"))
        store.delete("Alice")
        assert store.revision == start + 2


class TestDeleteAndClear:
    def test_delete(self):
        store = RegistrantStore([make_registrant("Alice"), make_registrant("Bob")])
        assert store.delete("Alice")
        assert not store.delete("Alice")
        assert [r.id for r in store.snapshot()] == ["Bob"]

    def test_clear(self):
        store = RegistrantStore([make_registrant("Alice"), make_registrant("Bob")])
        assert store.clear() == 2
        assert store.snapshot() == []


class TestSnapshot:
    def test_ordered_by_registration_time(self):
        store = RegistrantStore()
        store.upsert(make_registrant("Late", created_at=datetime(2026, 10, 17, 9)))
        store.upsert(make_registrant("Early", created_at=datetime(2026, 10, 16, 13)))
        assert [r.id for r in store.snapshot()] == ["Early", "Late"]

    def test_snapshot_is_a_copy(self):
        store = RegistrantStore([make_registrant("Alice")])
        snap = store.snapshot()
        snap.clear()
        assert len(store) == 1
