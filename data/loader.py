"""File upload parsing: CSV/XLSX into Registrant lists."""

import logging
import pandas as pd
from typing import List
from models.registrant import Registrant

logger = logging.getLogger(__name__)


def _cell(row, column: str) -> str:
    value = row[column]
    if pd.isna(value):
        return ""
    return str(value).strip()


def parse_registrants(df: pd.DataFrame) -> List[Registrant]:
    """Convert a registrants DataFrame into Registrant objects, skipping blank IDs."""
    registrants = []
    for _, row in df.iterrows():
        registrant_id = _cell(row, "ID")
        if not registrant_id:
            continue
        registrants.append(Registrant(
            id=registrant_id,
            role=_cell(row, "Role").lower(),
            leadership=_cell(row, "Leadership").lower(),
            proficiency=_cell(row, "Proficiency").lower(),
            region=_cell(row, "Region").lower(),
            time_slot=_cell(row, "Time Slot"),
        ))
    logger.info("Parsed %d registrants from %d rows", len(registrants), len(df))
    return registrants


def registrants_to_df(registrants: List[Registrant]) -> pd.DataFrame:
    """Inverse of parse_registrants, used for the member table and export."""
    return pd.DataFrame([
        {
            "ID": r.id,
            "Role": r.role,
            "Leadership": r.leadership,
            "Proficiency": r.proficiency,
            "Region": r.region,
            "Time Slot": r.time_slot,
        }
        for r in registrants
    ], columns=["ID", "Role", "Leadership", "Proficiency", "Region", "Time Slot"])


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame.

    Every column is read as text so IDs like "007" survive unchanged.
    """
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file, dtype=str)
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        return pd.read_excel(uploaded_file, engine="openpyxl", dtype=str)
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")
