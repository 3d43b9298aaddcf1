"""Tab 2 (Statistics): hotel-wide and per-floor occupancy."""

import streamlit as st

from data.session_store import get_inventory
from engine.occupancy_stats import get_occupancy_summary
from components.charts import floor_occupancy_bar, occupancy_donut
from components.metrics_cards import render_occupancy_metrics
from components.tables import render_floor_table


def render(sidebar_state):
    """Render the Statistics tab."""
    st.header("Occupancy Statistics")

    summary = get_occupancy_summary(get_inventory())
    render_occupancy_metrics(summary)

    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(floor_occupancy_bar(summary["floors"]), use_container_width=True)
    with col2:
        st.plotly_chart(
            occupancy_donut(summary["occupied_rooms"], summary["total_rooms"]),
            use_container_width=True,
        )
        st.metric("Most Occupied Floor", f"Floor {summary['most_occupied_floor']}")
        st.metric("Least Occupied Floor", f"Floor {summary['least_occupied_floor']}")

    st.divider()
    st.subheader("Floor Detail")
    render_floor_table(summary["floors"])
