"""KPI metric rows for the roster and allocation results."""

import streamlit as st
from typing import List, Sequence

from models.registrant import Registrant
from models.allocation import AllocationResult, SlotAllocation
from engine.explainer import summarize_result
from config.defaults import TEAM_SIZE


def roster_metrics(registrants: Sequence[Registrant], team_size: int = TEAM_SIZE) -> List[dict]:
    """Headline counts for the admin panel.

    Team-ready and standby figures treat the roster as one pool; each time
    slot is allocated separately, so these are upper bounds.
    """
    total = len(registrants)
    healers = sum(1 for r in registrants if r.is_healer)
    leaders = sum(1 for r in registrants if r.can_lead)
    return [
        {"label": "Registered", "value": total},
        {"label": "Full Teams", "value": total // team_size},
        {"label": "Standby", "value": total % team_size},
        {"label": "Healers", "value": healers},
        {"label": "Leaders", "value": leaders},
    ]


def result_metrics(result: AllocationResult) -> List[dict]:
    summary = summarize_result(result)
    return [
        {"label": "Registrants", "value": summary["registrants"]},
        {"label": "Full Teams", "value": summary["teams"]},
        {"label": "Standby", "value": summary["standby"]},
        {"label": "Warnings", "value": summary["warnings"]},
    ]


def slot_metrics(slot: SlotAllocation) -> List[dict]:
    teamed = sum(len(t) for t in slot.teams)
    return [
        {"label": "In Teams", "value": teamed},
        {"label": "Standby", "value": len(slot.standby)},
        {"label": "Flagged", "value": len(slot.warnings)},
    ]


def _render_metric_row(metrics: List[dict]):
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=m.get("delta"),
                delta_color=m.get("delta_color", "normal"),
            )


def render_roster_metrics(registrants: Sequence[Registrant]):
    _render_metric_row(roster_metrics(registrants))


def render_result_metrics(result: AllocationResult):
    _render_metric_row(result_metrics(result))


def render_slot_metrics(slot: SlotAllocation):
    _render_metric_row(slot_metrics(slot))


def render_warning_banner(result: AllocationResult):
    """Warning banner naming how many teams were flagged, if any."""
    count = len(result.all_warnings)
    if count:
        st.warning(f"{count} team(s) have warnings", icon="🟡")
