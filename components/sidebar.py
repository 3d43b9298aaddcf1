"""Global sidebar: hotel summary and room grid display options."""

import streamlit as st
from dataclasses import dataclass
from data.session_store import get_inventory, get_last_assignment
from engine.occupancy_stats import get_occupancy_summary
from config.defaults import STRATEGY_LABELS


@dataclass
class SidebarState:
    show_room_numbers: bool
    highlight_last_booking: bool


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Hotel Room Allocation")
        st.divider()

        summary = get_occupancy_summary(get_inventory())
        st.caption(f"{summary['available_rooms']} of {summary['total_rooms']} rooms available")
        st.progress(summary["occupancy_rate"], text=f"Occupancy {summary['occupancy_rate']:.0%}")

        st.divider()

        show_numbers = st.checkbox("Show room numbers", value=True, key="sidebar_numbers")
        highlight = st.checkbox("Highlight last booking", value=True, key="sidebar_highlight")

        last = get_last_assignment()
        if last:
            st.divider()
            st.caption(f"Last booking: {', '.join(str(n) for n in last.room_numbers)}")
            st.caption(f"Strategy: {STRATEGY_LABELS.get(last.strategy, last.strategy)}")
            st.caption(f"Travel time: {last.total_cost} minutes")

    return SidebarState(
        show_room_numbers=show_numbers,
        highlight_last_booking=highlight,
    )
