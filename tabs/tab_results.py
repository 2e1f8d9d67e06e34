"""Tab 3: Results. Teams, standby and warnings per time slot."""

import streamlit as st

from data.session_store import get_allocation_result, is_allocation_stale
from components.metrics_cards import render_result_metrics, render_slot_metrics, render_warning_banner
from components.tables import render_team_table
from components.charts import team_composition_bar, proficiency_heatmap
from engine.explainer import (
    describe_team, explain_warning, find_leader, team_label,
)


def _render_team(slot, result, idx):
    team = slot.members(idx)
    flagged = result.has_warning(slot.time_slot, idx)
    icon = "🔶" if idx == slot.standby_index else "⚔️"
    title = f"{icon} {team_label(slot, idx)}" + (" ⚠️" if flagged else "")

    with st.expander(title, expanded=flagged):
        leader = find_leader(team)
        st.caption(" · ".join(describe_team(team)))
        render_team_table(team, leader.id if leader else None)


def render(sidebar_state):
    """Render the Results tab."""
    st.header("Team Results")

    result = get_allocation_result()
    if result is None:
        st.info("No allocation yet. An admin can allocate teams from the Admin tab.")
        return

    if is_allocation_stale():
        st.warning("Registrations have changed since this allocation. Re-run it from the Admin tab.")

    render_result_metrics(result)

    if not result.slots:
        st.info("No registrants to allocate.")
        return

    if result.all_warnings:
        render_warning_banner(result)
        for slot in result.slots:
            for w in slot.warnings:
                st.caption(explain_warning(slot, w))

    for slot in result.slots:
        st.divider()
        st.subheader(slot.time_slot)
        st.caption(f"{slot.size} registrants · {len(slot.teams)} team(s)")
        render_slot_metrics(slot)

        for idx in range(len(slot.teams)):
            _render_team(slot, result, idx)
        if slot.standby:
            _render_team(slot, result, slot.standby_index)

        col1, col2 = st.columns(2)
        with col1:
            st.plotly_chart(team_composition_bar(slot), use_container_width=True)
        with col2:
            st.plotly_chart(proficiency_heatmap(slot), use_container_width=True)
