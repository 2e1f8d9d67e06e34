"""Tests for the metric row builders."""

import random
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.registrant import Registrant
from engine.team_allocator import assign, assign_pool
from components.metrics_cards import roster_metrics, result_metrics, slot_metrics
from config.defaults import TIME_SLOTS

SLOT = TIME_SLOTS[0]


def make_registrant(rid, role="melee", leadership="unwilling", region="other"):
    return Registrant(rid, role, leadership, "familiar", region, SLOT)


def as_dict(metrics):
    return {m["label"]: m["value"] for m in metrics}


class TestRosterMetrics:
    def test_counts(self):
        regs = (
            [make_registrant(f"H{i}", role="healer") for i in range(3)]
            + [make_registrant(f"L{i}", leadership="semi-willing") for i in range(2)]
            + [make_registrant(f"P{i}") for i in range(18)]
        )
        assert as_dict(roster_metrics(regs)) == {
            "Registered": 23,
            "Full Teams": 2,
            "Standby": 3,
            "Healers": 3,
            "Leaders": 2,
        }

    def test_empty_roster(self):
        assert as_dict(roster_metrics([]))["Full Teams"] == 0


class TestResultMetrics:
    def test_result_and_slot_rows(self):
        regs = [make_registrant(f"P{i}") for i in range(23)]
        result = assign(regs, rng=random.Random(1))

        assert as_dict(result_metrics(result)) == {
            "Registrants": 23,
            "Full Teams": 2,
            "Standby": 3,
            "Warnings": 3,
        }
        assert as_dict(slot_metrics(result.slot(SLOT))) == {
            "In Teams": 20,
            "Standby": 3,
            "Flagged": 3,
        }

    def test_small_slot(self):
        slot = assign_pool([make_registrant("A", region="domestic")], SLOT, random.Random(1))
        assert as_dict(slot_metrics(slot)) == {"In Teams": 0, "Standby": 1, "Flagged": 0}
