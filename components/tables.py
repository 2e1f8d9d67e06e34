"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import Optional, Sequence

from models.registrant import Registrant
from config.defaults import ROLE_COLORS, PROFICIENCY_EMOJI


def team_to_df(team: Sequence[Registrant], leader_id: Optional[str] = None) -> pd.DataFrame:
    return pd.DataFrame([
        {
            "ID": ("★ " if m.id == leader_id else "") + m.id,
            "Role": m.role,
            "Leadership": m.leadership,
            "Proficiency": f"{PROFICIENCY_EMOJI.get(m.proficiency, '')} {m.proficiency}".strip(),
            "Region": m.region,
        }
        for m in team
    ], columns=["ID", "Role", "Leadership", "Proficiency", "Region"])


def render_team_table(team: Sequence[Registrant], leader_id: Optional[str] = None):
    """Render a team roster with role colour coding."""
    def color_role(val):
        color = ROLE_COLORS.get(val)
        if color:
            return f"color: {color}; font-weight: bold"
        return ""

    df = team_to_df(team, leader_id)
    styled = df.style.map(color_role, subset=["Role"])
    st.dataframe(styled, use_container_width=True, hide_index=True)
