"""Tab 3 (Admin): occupancy controls, rule settings and action log."""

import streamlit as st

from data.session_store import (
    get_inventory, get_rule_config, get_audit_log,
    set_rule_config, set_last_assignment, add_audit_entry,
)
from data.occupancy import randomize_occupancy
from data.validator import validate_rule_config
from engine.allocation_engine import release, reset_all
from components.tables import render_audit_table
from config.defaults import DEFAULT_RULE_CONFIG


def _render_occupancy_controls():
    inventory = get_inventory()
    col1, col2 = st.columns(2)

    with col1:
        if st.button("Generate Random Occupancy", use_container_width=True):
            occupied = randomize_occupancy(inventory)
            set_last_assignment(None)
            rate = occupied / len(inventory)
            add_audit_entry("randomize", detail=f"{occupied}/{len(inventory)} rooms ({rate:.0%})")
            st.success(f"Generated random occupancy: {rate:.0%}")

    with col2:
        if st.button("Reset All Bookings", use_container_width=True):
            reset_all(inventory)
            set_last_assignment(None)
            add_audit_entry("reset")
            st.success("All bookings have been reset.")

    occupied_numbers = [r.number for r in inventory.occupied_rooms()]
    with st.form("release_form"):
        to_release = st.multiselect("Release rooms", options=occupied_numbers)
        if st.form_submit_button("Release") and to_release:
            result = release(inventory, to_release)
            if result.is_valid:
                add_audit_entry("release", to_release)
                st.success(f"Released {len(to_release)} room(s).")
            for err in result.errors:
                st.error(err)
            for warn in result.warnings:
                st.warning(warn)


def _render_rule_settings():
    current = get_rule_config()
    with st.form("rule_config_form"):
        edited = {}
        for key, default in DEFAULT_RULE_CONFIG.items():
            label = key.replace("_", " ").capitalize()
            edited[key] = int(st.number_input(label, min_value=0, value=int(current.get(key, default)), step=1))
        if st.form_submit_button("Save Rules"):
            result = validate_rule_config(edited)
            if result.is_valid:
                set_rule_config(edited)
                changed = [k for k in edited if edited[k] != current.get(k)]
                add_audit_entry("rule_change", detail=", ".join(changed) or "no changes")
                st.success("Rules saved.")
            for err in result.errors:
                st.error(err)
            for warn in result.warnings:
                st.warning(warn)


def render(sidebar_state):
    """Render the Admin tab."""
    st.header("Admin")

    st.subheader("Occupancy")
    _render_occupancy_controls()

    st.divider()
    st.subheader("Allocation Rules")
    _render_rule_settings()

    st.divider()
    st.subheader("Action Log")
    render_audit_table(get_audit_log())
