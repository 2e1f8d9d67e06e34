"""Typed wrapper around st.session_state for application data."""

import streamlit as st
from typing import List, Optional
from datetime import datetime
from models.registrant import Registrant
from models.allocation import AllocationResult
from models.audit import AuditEntry
from data.registrant_store import RegistrantStore


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "registrant_store": RegistrantStore(),
        "registration_override": None,
        "allocation_result": None,
        "allocation_revision": None,
        "audit_log": [],
        "admin_authed": False,
        "last_submitted": None,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_store() -> RegistrantStore:
    return st.session_state["registrant_store"]


def get_registrants() -> List[Registrant]:
    return get_store().snapshot()


def get_registration_override() -> Optional[str]:
    return st.session_state.get("registration_override")


def get_allocation_result() -> Optional[AllocationResult]:
    return st.session_state.get("allocation_result")


def is_allocation_stale() -> bool:
    """True when registrants changed since the last allocation run."""
    revision = st.session_state.get("allocation_revision")
    return revision is not None and revision != get_store().revision


def get_audit_log() -> List[AuditEntry]:
    return st.session_state.get("audit_log", [])


def is_admin_authed() -> bool:
    return st.session_state.get("admin_authed", False)


def get_last_submitted() -> Optional[Registrant]:
    return st.session_state.get("last_submitted")


# --- Setters ---

def set_registration_override(value: Optional[str]):
    old = get_registration_override()
    st.session_state["registration_override"] = value
    add_audit_entry("override", None, str(old), str(value))


def set_allocation_result(result: Optional[AllocationResult]):
    st.session_state["allocation_result"] = result
    st.session_state["allocation_revision"] = get_store().revision if result else None


def set_admin_authed(authed: bool):
    st.session_state["admin_authed"] = authed


def set_last_submitted(registrant: Optional[Registrant]):
    st.session_state["last_submitted"] = registrant


# --- Registrant Management ---

def register(registrant: Registrant) -> Registrant:
    existing = get_store().get(registrant.id)
    stored = get_store().upsert(registrant)
    add_audit_entry(
        "register", stored.id,
        old_value=existing.role if existing else "",
        new_value=stored.role,
    )
    return stored


def delete_registrant(registrant_id: str) -> bool:
    removed = get_store().delete(registrant_id)
    if removed:
        add_audit_entry("delete", registrant_id, old_value="registered", new_value="")
    return removed


def clear_registrants() -> int:
    count = get_store().clear()
    set_allocation_result(None)
    add_audit_entry("clear", None, old_value=str(count), new_value="0")
    return count


# --- Audit ---

def add_audit_entry(
    action: str,
    registrant_id: Optional[str],
    old_value: str,
    new_value: str,
    rationale: str = "",
):
    entry = AuditEntry(
        timestamp=datetime.now(),
        action=action,
        registrant_id=registrant_id,
        old_value=old_value,
        new_value=new_value,
        rationale=rationale,
    )
    st.session_state["audit_log"].append(entry)
