"""Schema validation for uploaded registrant files."""

from dataclasses import dataclass, field
from typing import List
import pandas as pd

from config.defaults import ROLES, LEADERSHIP_OPTIONS, PROFICIENCY_ORDER, REGIONS, TIME_SLOTS


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


REGISTRANT_REQUIRED_COLUMNS = [
    "ID",
    "Role",
    "Leadership",
    "Proficiency",
    "Region",
    "Time Slot",
]

# Column -> accepted values. Unknown values are kept (the allocator treats them
# best-effort) but reported.
ENUM_COLUMNS = {
    "Role": ROLES,
    "Leadership": LEADERSHIP_OPTIONS,
    "Proficiency": PROFICIENCY_ORDER,
    "Region": REGIONS,
    "Time Slot": TIME_SLOTS,
}

# Matched after lowercasing, as parse_registrants does
CASE_INSENSITIVE_COLUMNS = {"Role", "Leadership", "Proficiency", "Region"}


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    return result


def validate_registrants(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, REGISTRANT_REQUIRED_COLUMNS, "Registrants")
    if not result.is_valid:
        return result

    ids = df["ID"].fillna("").astype(str).str.strip()
    if (ids == "").any():
        result.is_valid = False
        result.errors.append(f"Registrants: {int((ids == '').sum())} row(s) have a blank ID.")

    dupes = ids[(ids != "") & ids.duplicated(keep=False)]
    if not dupes.empty:
        result.warnings.append(
            f"Registrants: Duplicate IDs {sorted(dupes.unique().tolist())}. "
            "The last row for each ID wins."
        )

    for column, allowed in ENUM_COLUMNS.items():
        values = df[column].fillna("").astype(str).str.strip()
        if column in CASE_INSENSITIVE_COLUMNS:
            values = values.str.lower()
        unknown = sorted(set(values) - set(allowed))
        if unknown:
            result.warnings.append(
                f"Registrants: Unrecognized {column} value(s): {', '.join(repr(u) for u in unknown)}."
            )

    return result
