"""Generates human-readable explanations for room assignments."""

from typing import List

from models.room import Room
from models.allocation import Hop
from config.defaults import STRATEGY_LABELS


def describe_floor_distribution(rooms: List[Room]) -> str:
    """e.g. 'Floor 3: 2 rooms, Floor 5: 1 room'."""
    counts = {}
    for r in rooms:
        counts[r.floor] = counts.get(r.floor, 0) + 1
    return ", ".join(
        f"Floor {floor}: {n} room{'s' if n > 1 else ''}" for floor, n in counts.items()
    )


def describe_travel_path(hops: List[Hop]) -> List[str]:
    return [
        f"{i}. Room {h.from_room} → Room {h.to_room}: {h.cost} minutes"
        for i, h in enumerate(hops, start=1)
    ]


def explain_assignment(
    rooms: List[Room],
    total_cost: int,
    hops: List[Hop],
    strategy: str,
) -> List[str]:
    """Produce step-by-step explanation for a booking."""
    steps = []

    room_list = ", ".join(str(r.number) for r in rooms)
    steps.append(f"Booked {len(rooms)} room(s): {room_list}")

    steps.append(f"Strategy: {STRATEGY_LABELS.get(strategy, strategy)}")

    steps.append(f"Floor distribution: {describe_floor_distribution(rooms)}")

    steps.append(f"Total travel time: {total_cost} minutes")

    if hops:
        steps.append("Travel path:")
        steps.extend(describe_travel_path(hops))

    return steps
