"""Tests for the registration window."""

import sys
import os
from datetime import datetime, timezone
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from engine.registration_window import (
    WINDOW_TZ,
    is_window_open,
    is_registration_open,
    describe_window,
)


def pst(day, hour, minute=0):
    # October 2026: the 16th is a Friday
    return datetime(2026, 10, day, hour, minute, tzinfo=WINDOW_TZ)


class TestIsWindowOpen:
    def test_friday_boundary(self):
        assert not is_window_open(pst(16, 11, 59))
        assert is_window_open(pst(16, 12, 0))

    def test_saturday_open_all_day(self):
        assert is_window_open(pst(17, 0, 0))
        assert is_window_open(pst(17, 23, 59))

    def test_sunday_boundary(self):
        assert is_window_open(pst(18, 11, 59))
        assert not is_window_open(pst(18, 12, 0))

    def test_weekdays_closed(self):
        for day in range(12, 16):
            assert not is_window_open(pst(day, 18))
        assert not is_window_open(pst(19, 9))

    def test_utc_input_converted(self):
        # 20:00 UTC Friday is 12:00 in UTC-8
        assert is_window_open(datetime(2026, 10, 16, 20, 0, tzinfo=timezone.utc))
        assert not is_window_open(datetime(2026, 10, 16, 19, 59, tzinfo=timezone.utc))

    def test_naive_treated_as_utc(self):
        assert is_window_open(datetime(2026, 10, 16, 20, 0))
        assert not is_window_open(datetime(2026, 10, 16, 19, 59))


class TestOverride:
    def test_force_open(self):
        assert is_registration_open(pst(14, 9), override="open")

    def test_force_closed(self):
        assert not is_registration_open(pst(17, 9), override="closed")

    def test_automatic(self):
        assert is_registration_open(pst(17, 9), override=None)
        assert not is_registration_open(pst(14, 9), override=None)

    def test_describe(self):
        assert "opened manually" in describe_window("open", True)
        assert "closed manually" in describe_window("closed", False)
        assert "Friday 12:00 PST" in describe_window(None, True)
        assert "opens Friday" in describe_window(None, False)
