"""Tab 2: Admin. Window control, roster management, bulk import, audit trail."""

import streamlit as st
import pandas as pd

from data.loader import load_file, parse_registrants, registrants_to_df
from data.validator import validate_registrants
from data.sample_data import generate_registrants_df
from data.session_store import (
    get_registrants, get_registration_override, set_registration_override,
    register, delete_registrant, clear_registrants, set_allocation_result,
    get_audit_log, add_audit_entry, is_admin_authed, set_admin_authed,
)
from components.metrics_cards import render_roster_metrics
from engine.team_allocator import assign
from config.defaults import ADMIN_PASSWORD, OVERRIDE_OPEN, OVERRIDE_CLOSED


def _import_registrants(df: pd.DataFrame, source: str) -> bool:
    """Validate and upsert an uploaded roster."""
    result = validate_registrants(df)
    if not result.is_valid:
        for e in result.errors:
            st.error(e)
        return False

    for w in result.warnings:
        st.warning(w)

    registrants = parse_registrants(df)
    for r in registrants:
        register(r)
    add_audit_entry("import", None, "", str(len(registrants)), rationale=source)
    st.success(f"Imported {len(registrants)} registrants from {source}.")
    return True


def _render_login():
    st.subheader("Admin Login")
    password = st.text_input("Admin password", type="password", key="admin_password")
    if st.button("Log in", type="primary", key="btn_admin_login"):
        if password == ADMIN_PASSWORD:
            set_admin_authed(True)
            st.rerun()
        else:
            st.error("Incorrect password.")


def _render_window_control(sidebar_state):
    st.subheader("Registration Window")
    override = get_registration_override()
    st.caption(
        f"Currently {'open' if sidebar_state.is_open else 'closed'} "
        f"({'admin ' + override if override else 'automatic'})"
    )
    col1, col2, col3 = st.columns(3)
    if col1.button("Force open", disabled=override == OVERRIDE_OPEN, key="btn_force_open"):
        set_registration_override(OVERRIDE_OPEN)
        st.rerun()
    if col2.button("Force close", disabled=override == OVERRIDE_CLOSED, key="btn_force_close"):
        set_registration_override(OVERRIDE_CLOSED)
        st.rerun()
    if col3.button("Automatic", disabled=override is None, key="btn_auto"):
        set_registration_override(None)
        st.rerun()


def render(sidebar_state):
    """Render the Admin tab."""
    st.header("Admin")

    if not is_admin_authed():
        _render_login()
        return

    _render_window_control(sidebar_state)
    st.divider()

    # --- Stats ---
    registrants = get_registrants()
    total = len(registrants)
    render_roster_metrics(registrants)
    st.caption("Totals across all time slots; each slot is allocated separately.")

    col_assign, col_clear = st.columns(2)
    with col_assign:
        if st.button("🎲 Allocate teams", type="primary", disabled=total == 0, key="btn_assign"):
            set_allocation_result(assign(registrants))
            add_audit_entry("assign", None, "", str(total))
            st.success("Teams allocated. See the Results tab.")
    with col_clear:
        confirm = st.checkbox("Confirm clear", key="confirm_clear")
        if st.button("🗑 Clear all registrations", disabled=not confirm, key="btn_clear"):
            count = clear_registrants()
            st.success(f"Cleared {count} registrations.")
            st.rerun()

    st.divider()

    # --- Bulk Import ---
    st.subheader("Bulk Import")
    st.caption("CSV or XLSX with columns: **ID**, **Role**, **Leadership**, **Proficiency**, **Region**, **Time Slot**")
    uploaded = st.file_uploader("Registrant roster", type=["csv", "xlsx"], key="upload_registrants")

    col_upload, col_sample = st.columns(2)
    with col_upload:
        if st.button("Upload & Validate", key="btn_upload"):
            if uploaded:
                try:
                    _import_registrants(load_file(uploaded), uploaded.name)
                except Exception as e:
                    st.error(f"Error loading file: {e}")
            else:
                st.warning("Please upload a file.")
    with col_sample:
        if st.button("Load Sample Data", key="btn_sample"):
            _import_registrants(generate_registrants_df(), "sample data")

    st.divider()

    # --- Member List ---
    if registrants:
        st.subheader(f"Registrants ({total})")
        st.dataframe(registrants_to_df(registrants), use_container_width=True, hide_index=True)

        col_sel, col_del = st.columns([3, 1])
        with col_sel:
            target = st.selectbox("Remove registrant", [r.id for r in registrants], key="delete_target")
        with col_del:
            if st.button("Delete", key="btn_delete"):
                if delete_registrant(target):
                    st.success(f"Deleted {target}.")
                    st.rerun()
                else:
                    st.warning(f"{target} was already removed.")

        st.download_button(
            "Export CSV",
            registrants_to_df(registrants).to_csv(index=False),
            file_name="registrants.csv",
            mime="text/csv",
            key="btn_export",
        )

    # --- Audit Trail ---
    log = get_audit_log()
    if log:
        st.divider()
        st.subheader("Audit Trail")
        audit_df = pd.DataFrame([{
            "Time": e.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
            "Action": e.action,
            "Registrant": e.registrant_id or "",
            "Old": e.old_value,
            "New": e.new_value,
            "Note": e.rationale,
        } for e in reversed(log)])
        st.dataframe(audit_df, use_container_width=True, hide_index=True)
