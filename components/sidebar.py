"""Global sidebar: registration status and roster counts."""

import streamlit as st
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from data.session_store import (
    get_registrants, get_registration_override, get_allocation_result, is_allocation_stale,
)
from engine.registration_window import is_registration_open
from config.defaults import TEAM_SIZE


@dataclass
class SidebarState:
    is_open: bool
    override: Optional[str]
    registrant_count: int


def render_sidebar() -> SidebarState:
    """Render the global sidebar and return current state."""
    override = get_registration_override()
    is_open = is_registration_open(datetime.now(timezone.utc), override)
    registrants = get_registrants()

    with st.sidebar:
        st.title("Raid Team Planner")
        st.divider()

        if is_open:
            st.success("Registration open")
        else:
            st.error("Registration closed")
        st.caption("Control: " + (f"admin ({override})" if override else "automatic"))

        st.divider()
        st.metric("Registered", len(registrants))
        st.caption(f"Full teams possible: {len(registrants) // TEAM_SIZE}")

        if get_allocation_result() is not None:
            if is_allocation_stale():
                st.warning("Roster changed since the last allocation")
            else:
                st.caption("Allocation is up to date")

    return SidebarState(
        is_open=is_open,
        override=override,
        registrant_count=len(registrants),
    )
