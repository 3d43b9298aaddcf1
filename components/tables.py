"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import List

from models.allocation import Hop
from models.audit import AuditEntry


def render_travel_path_table(hops: List[Hop]):
    """Numbered hop list for the last booking."""
    if not hops:
        st.caption("Single room booked: no travel between rooms.")
        return
    df = pd.DataFrame([{
        "Step": i,
        "From": h.from_room,
        "To": h.to_room,
        "Minutes": h.cost,
    } for i, h in enumerate(hops, start=1)])
    st.dataframe(df, hide_index=True, use_container_width=True)


def render_floor_table(floor_stats: List[dict]):
    """Per-floor occupancy with color-coded status."""
    def color_status(val):
        if val == "Saturated":
            return "background-color: #ffcccc; color: #cc0000; font-weight: bold"
        elif val == "Surplus":
            return "background-color: #d4edda; color: #155724; font-weight: bold"
        return ""

    df = pd.DataFrame([{
        "Floor": f["floor"],
        "Occupied": f["occupied_rooms"],
        "Total": f["total_rooms"],
        "Available": f["available_rooms"],
        "Occupancy": f"{f['occupancy_rate']:.0%}",
        "Status": f["status"],
    } for f in floor_stats])
    st.dataframe(df.style.map(color_status, subset=["Status"]), hide_index=True, use_container_width=True)


def render_audit_table(entries: List[AuditEntry]):
    """Most recent action first."""
    if not entries:
        st.caption("No actions recorded yet.")
        return
    df = pd.DataFrame([{
        "Time": e.timestamp.strftime("%H:%M:%S"),
        "Action": e.action,
        "Rooms": ", ".join(str(n) for n in e.room_numbers),
        "Travel (min)": e.travel_cost if e.action == "book" else None,
        "Detail": e.detail,
    } for e in reversed(entries)])
    st.dataframe(df, hide_index=True, use_container_width=True)
