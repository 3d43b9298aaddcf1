"""Typed wrapper around st.session_state for application data."""

import streamlit as st
from typing import List, Optional
from datetime import datetime
from models.inventory import RoomInventory
from models.allocation import Assignment
from models.audit import AuditEntry
from data.hotel_layout import initialize
from config.defaults import DEFAULT_RULE_CONFIG


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    if "inventory" not in st.session_state:
        st.session_state["inventory"] = initialize()

    defaults = {
        "last_assignment": None,
        "audit_log": [],
        "rule_config": dict(DEFAULT_RULE_CONFIG),
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_inventory() -> RoomInventory:
    return st.session_state["inventory"]


def get_last_assignment() -> Optional[Assignment]:
    return st.session_state.get("last_assignment")


def get_audit_log() -> List[AuditEntry]:
    return st.session_state.get("audit_log", [])


def get_rule_config() -> dict:
    return st.session_state.get("rule_config", dict(DEFAULT_RULE_CONFIG))


# --- Setters ---

def set_last_assignment(assignment: Optional[Assignment]):
    st.session_state["last_assignment"] = assignment


def set_rule_config(config: dict):
    st.session_state["rule_config"] = config


# --- Audit ---

def add_audit_entry(
    action: str,
    room_numbers: Optional[List[int]] = None,
    travel_cost: int = 0,
    detail: str = "",
):
    entry = AuditEntry(
        timestamp=datetime.now(),
        action=action,
        room_numbers=list(room_numbers or []),
        travel_cost=travel_cost,
        detail=detail,
    )
    st.session_state["audit_log"].append(entry)
