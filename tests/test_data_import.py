"""Tests for roster parsing, validation and sample data."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pandas as pd
import pytest

from data.loader import load_file, parse_registrants, registrants_to_df
from data.validator import validate_registrants
from data.sample_data import generate_registrants_df
from config.defaults import TIME_SLOTS


def make_df(rows):
    return pd.DataFrame(rows, columns=["ID", "Role", "Leadership", "Proficiency", "Region", "Time Slot"])


def row(rid="Alice", role="healer", leadership="willing", proficiency="expert",
        region="domestic", time_slot=TIME_SLOTS[0]):
    return [rid, role, leadership, proficiency, region, time_slot]


class TestValidateRegistrants:
    def test_valid_roster(self):
        result = validate_registrants(make_df([row("Alice"), row("Bob")]))
        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []

    def test_missing_columns(self):
        df = pd.DataFrame({"ID": ["Alice"], "Role": ["melee"]})
        result = validate_registrants(df)
        assert not result.is_valid
        assert "Leadership" in result.errors[0]

    def test_empty_file(self):
        result = validate_registrants(make_df([]))
        assert not result.is_valid
        assert any("no data rows" in e for e in result.errors)

    def test_blank_id_is_error(self):
        result = validate_registrants(make_df([row("Alice"), row("  ")]))
        assert not result.is_valid

    def test_duplicates_and_unknown_values_are_warnings(self):
        df = make_df([row("Alice"), row("Alice", role="tank"), row("Bob", time_slot="Tue 8pm")])
        result = validate_registrants(df)

        assert result.is_valid
        assert any("Duplicate IDs" in w for w in result.warnings)
        assert any("'tank'" in w for w in result.warnings)
        assert any("'Tue 8pm'" in w for w in result.warnings)

    def test_enum_values_matched_case_insensitively(self):
        df = make_df([row("Alice", role="Healer", leadership="Willing", proficiency="Expert", region=" Domestic ")])
        result = validate_registrants(df)

        assert result.is_valid
        assert result.warnings == []

    def test_time_slot_is_case_sensitive(self):
        df = make_df([row("Alice", time_slot=TIME_SLOTS[0].upper())])
        result = validate_registrants(df)
        assert any("Time Slot" in w for w in result.warnings)


class TestParseRegistrants:
    def test_parse_normalizes_values(self):
        df = make_df([row(" Alice ", role="Healer", region="Domestic")])
        regs = parse_registrants(df)

        assert len(regs) == 1
        assert regs[0].id == "Alice"
        assert regs[0].role == "healer"
        assert regs[0].is_domestic
        assert regs[0].time_slot == TIME_SLOTS[0]

    def test_blank_ids_skipped(self):
        df = make_df([row("Alice"), row(None)])
        assert [r.id for r in parse_registrants(df)] == ["Alice"]

    def test_dataframe_round_trip(self):
        regs = parse_registrants(make_df([row("Alice"), row("Bob", role="melee")]))
        df = registrants_to_df(regs)
        assert list(df["ID"]) == ["Alice", "Bob"]
        assert list(df["Role"]) == ["healer", "melee"]


class TestLoadFile:
    def test_csv_ids_kept_as_text(self, tmp_path):
        path = tmp_path / "roster.csv"
        make_df([
            row("007"),
            row(None, role="melee"),
            row("12", role="ranged"),
        ]).to_csv(path, index=False)

        with open(path) as fh:
            regs = parse_registrants(load_file(fh))

        assert [r.id for r in regs] == ["007", "12"]
        assert [r.role for r in regs] == ["healer", "ranged"]

    def test_xlsx_ids_kept_as_text(self, tmp_path):
        path = tmp_path / "roster.xlsx"
        make_df([row("007"), row("12")]).to_excel(path, index=False, engine="openpyxl")

        with open(path, "rb") as fh:
            regs = parse_registrants(load_file(fh))

        assert [r.id for r in regs] == ["007", "12"]

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "roster.txt"
        path.write_text("ID\n1\n")
        with open(path) as fh:
            with pytest.raises(ValueError):
                load_file(fh)


class TestSampleData:
    def test_sample_roster_validates(self):
        df = generate_registrants_df(count=30)
        result = validate_registrants(df)

        assert len(df) == 30
        assert result.is_valid
        assert result.warnings == []

    def test_sample_is_reproducible(self):
        assert generate_registrants_df(seed=7).equals(generate_registrants_df(seed=7))
