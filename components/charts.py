"""Plotly chart builders for the Hotel Room Allocation Engine."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import List

# Cell states for the room grid
STATE_EMPTY, STATE_AVAILABLE, STATE_OCCUPIED, STATE_SELECTED = 0, 1, 2, 3

GRID_COLORSCALE = [
    [0.00, "#FFFFFF"], [0.25, "#FFFFFF"],
    [0.25, "#4CAF50"], [0.50, "#4CAF50"],
    [0.50, "#E8734A"], [0.75, "#E8734A"],
    [0.75, "#F5C542"], [1.00, "#F5C542"],
]


def _cell_state(row: pd.Series, highlight_selected: bool) -> int:
    if highlight_selected and row["Selected"]:
        return STATE_SELECTED
    if row["Occupied"]:
        return STATE_OCCUPIED
    return STATE_AVAILABLE


def room_grid(rooms_df: pd.DataFrame, highlight_selected: bool = True, show_numbers: bool = True) -> go.Figure:
    """Floors as rows (top floor first), positions as columns.

    Priority: selected > occupied > available. Positions a floor does not
    have are left blank.
    """
    floors = sorted(rooms_df["Floor"].unique(), reverse=True)
    positions = list(range(1, int(rooms_df["Position"].max()) + 1))

    lookup = {(r["Floor"], r["Position"]): r for _, r in rooms_df.iterrows()}
    z, text = [], []
    for floor in floors:
        z_row, text_row = [], []
        for pos in positions:
            room = lookup.get((floor, pos))
            if room is None:
                z_row.append(STATE_EMPTY)
                text_row.append("")
            else:
                z_row.append(_cell_state(room, highlight_selected))
                text_row.append(str(room["Room"]) if show_numbers else "")
        z.append(z_row)
        text.append(text_row)

    fig = go.Figure(data=go.Heatmap(
        z=z,
        x=[f"#{p}" for p in positions],
        y=[f"Floor {f}" for f in floors],
        text=text,
        texttemplate="%{text}",
        colorscale=GRID_COLORSCALE,
        zmin=0,
        zmax=3,
        showscale=False,
        xgap=4,
        ygap=4,
        hovertemplate="%{y}, position %{x}<br>Room %{text}<extra></extra>",
    ))
    fig.update_layout(
        title="Room Grid",
        height=max(400, len(floors) * 45),
        yaxis_type="category",
        xaxis_side="top",
    )
    return fig


def floor_occupancy_bar(floor_stats: List[dict]) -> go.Figure:
    """Horizontal bar of occupancy rate per floor."""
    df = pd.DataFrame(floor_stats)
    df = df.sort_values("floor", ascending=False)
    df["floor_label"] = "Floor " + df["floor"].astype(str)

    fig = px.bar(
        df, x="occupancy_rate", y="floor_label",
        orientation="h",
        title="Occupancy by Floor",
        labels={"occupancy_rate": "Occupancy %", "floor_label": "Floor"},
        color="occupancy_rate",
        color_continuous_scale=["#4CAF50", "#F5C542", "#E8734A"],
        range_color=[0, 1],
    )
    fig.update_layout(height=max(300, len(df) * 35), yaxis_type="category")
    fig.update_traces(texttemplate="%{x:.0%}", textposition="auto")
    return fig


def occupancy_donut(occupied: int, total: int, title: str = "Overall Occupancy") -> go.Figure:
    """Donut chart showing occupied vs available rooms."""
    available = total - occupied
    fig = go.Figure(data=[go.Pie(
        labels=["Occupied", "Available"],
        values=[occupied, available],
        hole=0.6,
        marker_colors=["#E8734A", "#4CAF50"],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{occupied}/{total}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig
