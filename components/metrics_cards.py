"""KPI metric cards and booking result messages."""

import streamlit as st

from models.allocation import AllocationResult, AllocationErrorKind


def render_occupancy_metrics(summary: dict):
    """Available / occupied / rate, side by side."""
    cols = st.columns(3)
    cols[0].metric("Available Rooms", summary["available_rooms"])
    cols[1].metric("Occupied Rooms", summary["occupied_rooms"])
    cols[2].metric("Occupancy Rate", f"{summary['occupancy_rate']:.0%}")


def render_allocation_result(result: AllocationResult):
    """Success or error banner for a booking attempt."""
    if result.ok:
        numbers = ", ".join(str(n) for n in result.assignment.room_numbers)
        st.success(f"Successfully booked {result.requested} room(s): {numbers}", icon="✅")
    elif result.error.kind == AllocationErrorKind.VALIDATION:
        st.warning(result.error.message, icon="🟡")
    else:
        st.error(result.error.message, icon="🔴")
