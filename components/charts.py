"""Plotly chart builders for the Raid Team Planner."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import List

from models.allocation import SlotAllocation
from engine.explainer import team_label
from config.defaults import ROLES, ROLE_COLORS, PROFICIENCY_ORDER


def team_composition_bar(slot: SlotAllocation, title: str = "Role Mix by Team") -> go.Figure:
    """Stacked bar of role counts per team, standby last."""
    rows = []
    for idx in range(len(slot.teams) + 1):
        team = slot.members(idx)
        if not team:
            continue
        for role in ROLES:
            rows.append({
                "team": team_label(slot, idx),
                "role": role,
                "count": sum(1 for m in team if m.role == role),
            })
    df = pd.DataFrame(rows, columns=["team", "role", "count"])
    fig = px.bar(
        df, x="team", y="count", color="role",
        barmode="stack",
        labels={"count": "Members", "team": "", "role": "Role"},
        title=title,
        color_discrete_map=ROLE_COLORS,
    )
    fig.update_layout(legend_title_text="", height=350)
    return fig


def proficiency_heatmap(slot: SlotAllocation) -> go.Figure:
    """Heatmap of proficiency tier counts per team."""
    labels: List[str] = []
    matrix = []
    for idx in range(len(slot.teams) + 1):
        team = slot.members(idx)
        if not team:
            continue
        labels.append(team_label(slot, idx))
        matrix.append([sum(1 for m in team if m.proficiency == tier) for tier in PROFICIENCY_ORDER])

    fig = go.Figure(data=go.Heatmap(
        z=matrix,
        x=PROFICIENCY_ORDER,
        y=labels,
        colorscale="YlOrRd",
        text=matrix,
        texttemplate="%{text}",
        hovertemplate="Team: %{y}<br>Tier: %{x}<br>Members: %{z}<extra></extra>",
    ))
    fig.update_layout(
        title="Proficiency Spread",
        xaxis_title="Proficiency",
        height=max(250, len(labels) * 45),
    )
    return fig

