"""Tab 1 (Booking): request rooms and inspect the resulting travel path."""

import streamlit as st

from data.session_store import (
    get_inventory, get_last_assignment, get_rule_config,
    set_last_assignment, add_audit_entry,
)
from data.hotel_layout import inventory_to_df
from engine.allocation_engine import allocate
from engine.explainer import describe_floor_distribution
from components.charts import room_grid
from components.metrics_cards import render_allocation_result
from components.tables import render_travel_path_table
from config.defaults import MIN_ROOMS_PER_BOOKING, MAX_ROOMS_PER_BOOKING, STRATEGY_LABELS


def render(sidebar_state):
    """Render the Booking tab."""
    st.header("Book Rooms")

    inventory = get_inventory()
    rule_config = get_rule_config()
    min_rooms = rule_config.get("min_rooms_per_booking", MIN_ROOMS_PER_BOOKING)
    max_rooms = rule_config.get("max_rooms_per_booking", MAX_ROOMS_PER_BOOKING)

    with st.form("booking_form"):
        count = st.number_input(
            f"Number of rooms ({min_rooms}-{max_rooms})",
            min_value=min_rooms,
            max_value=max_rooms,
            value=min_rooms,
            step=1,
        )
        submitted = st.form_submit_button("Book Rooms", type="primary")

    if submitted:
        result = allocate(inventory, int(count), rule_config)
        render_allocation_result(result)
        if result.ok:
            set_last_assignment(result.assignment)
            add_audit_entry(
                "book",
                result.assignment.room_numbers,
                result.assignment.total_cost,
                STRATEGY_LABELS.get(result.assignment.strategy, result.assignment.strategy),
            )

    col1, col2 = st.columns([3, 2])

    with col1:
        fig = room_grid(
            inventory_to_df(inventory),
            highlight_selected=sidebar_state.highlight_last_booking,
            show_numbers=sidebar_state.show_room_numbers,
        )
        st.plotly_chart(fig, use_container_width=True)
        st.caption("Green: available · Orange: occupied · Yellow: last booking")

    with col2:
        st.subheader("Last Booking")
        last = get_last_assignment()
        if not last:
            st.info("No bookings made yet.")
            return

        st.markdown(f"**Rooms:** {', '.join(str(n) for n in last.room_numbers)}")
        st.markdown(f"**Floor Distribution:** {describe_floor_distribution(last.rooms)}")
        st.markdown(f"**Total Travel Time:** {last.total_cost} minutes")
        st.markdown(f"**Strategy:** {STRATEGY_LABELS.get(last.strategy, last.strategy)}")

        st.markdown("**Travel Path**")
        render_travel_path_table(last.hops)

        with st.expander("Explanation"):
            for step in last.explanation_steps:
                st.write(step)
