"""Tab 1: Register, the weekly sign-up form."""

import streamlit as st

from data.session_store import (
    register, get_registrants, get_registration_override, get_last_submitted, set_last_submitted,
)
from engine.registration_window import describe_window
from models.registrant import Registrant
from config.defaults import (
    ROLES, LEADERSHIP_OPTIONS, PROFICIENCY_ORDER, REGIONS, TIME_SLOTS, DEFAULT_FORM, ROLE_COLORS,
)


def _render_confirmation(registrant: Registrant):
    st.success("Registration received!")
    st.markdown(f"**ID:** {registrant.id}")
    color = ROLE_COLORS.get(registrant.role, "#f1f5f9")
    st.markdown(f"**Role:** <span style='color:{color}'>{registrant.role}</span>", unsafe_allow_html=True)
    st.caption(f"Total registered: {len(get_registrants())}")
    if st.button("Register someone else", key="btn_register_again"):
        set_last_submitted(None)
        st.rerun()


def render(sidebar_state):
    """Render the registration tab."""
    st.header("Weekly Raid Registration")

    if sidebar_state.is_open:
        st.markdown("🟢 **Registration is open**")
    else:
        st.markdown("🔴 **Registration is closed**")
    st.caption(describe_window(get_registration_override(), sidebar_state.is_open))

    last = get_last_submitted()
    if last is not None:
        _render_confirmation(last)
        return

    disabled = not sidebar_state.is_open
    with st.form("registration_form", clear_on_submit=True):
        col1, col2 = st.columns(2)
        with col1:
            registrant_id = st.text_input("In-game ID", value=DEFAULT_FORM["id"], disabled=disabled)
            role = st.selectbox("Role", ROLES, index=ROLES.index(DEFAULT_FORM["role"]), disabled=disabled)
            leadership = st.selectbox(
                "Willing to lead",
                LEADERSHIP_OPTIONS,
                index=LEADERSHIP_OPTIONS.index(DEFAULT_FORM["leadership"]),
                disabled=disabled,
            )
        with col2:
            proficiency = st.selectbox(
                "Raid familiarity",
                PROFICIENCY_ORDER,
                index=PROFICIENCY_ORDER.index(DEFAULT_FORM["proficiency"]),
                disabled=disabled,
            )
            region = st.selectbox("Region", REGIONS, index=REGIONS.index(DEFAULT_FORM["region"]), disabled=disabled)
            time_slot = st.selectbox("Time slot", TIME_SLOTS, disabled=disabled)

        submitted = st.form_submit_button(
            "Submit registration" if sidebar_state.is_open else "Registration closed",
            type="primary",
            disabled=disabled,
        )

    if submitted:
        try:
            stored = register(Registrant(
                id=registrant_id,
                role=role,
                leadership=leadership,
                proficiency=proficiency,
                region=region,
                time_slot=time_slot,
            ))
        except ValueError as e:
            st.error(str(e))
            return
        set_last_submitted(stored)
        st.rerun()

    count = len(get_registrants())
    if count:
        st.caption(f"Currently registered: {count}")
