"""Generate a synthetic registrant roster for demos and manual testing."""

import pandas as pd
import random
import os

from config.defaults import ROLES, LEADERSHIP_OPTIONS, PROFICIENCY_ORDER, REGIONS, TIME_SLOTS


def generate_registrants_df(count: int = 47, seed: int = 42) -> pd.DataFrame:
    """Generate a roster spread over the configured time slots.

    Roughly a fifth are healers and a quarter are from the domestic region,
    so a typical run shows both balanced teams and region warnings.
    """
    rng = random.Random(seed)
    rows = []
    for n in range(1, count + 1):
        rows.append({
            "ID": f"Player{n:03d}",
            "Role": rng.choices(ROLES, weights=[4, 4, 2])[0],
            "Leadership": rng.choices(LEADERSHIP_OPTIONS, weights=[1, 6, 2])[0],
            "Proficiency": rng.choice(PROFICIENCY_ORDER),
            "Region": rng.choices(REGIONS, weights=[6, 3, 1])[0],
            "Time Slot": rng.choices(TIME_SLOTS, weights=[3, 2])[0],
        })
    return pd.DataFrame(rows)


def generate_sample_csv(output_dir: str):
    """Write a sample registrants CSV to the given directory."""
    os.makedirs(output_dir, exist_ok=True)
    generate_registrants_df().to_csv(os.path.join(output_dir, "registrants.csv"), index=False)


def generate_sample_excel(output_dir: str):
    """Write the sample roster as an Excel workbook."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "registrants.xlsx")
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        generate_registrants_df().to_excel(writer, sheet_name="Registrants", index=False)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csv(out)
    generate_sample_excel(out)
    print("Sample CSV and Excel files generated in sample_files/")
