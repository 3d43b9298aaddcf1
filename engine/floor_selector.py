"""Same-floor fast path: fill a booking from the lowest floor that can hold it."""

import logging
from collections import defaultdict
from typing import Dict, List, Optional

from models.room import Room

logger = logging.getLogger(__name__)


def group_rooms_by_floor(rooms: List[Room]) -> Dict[int, List[Room]]:
    """Group rooms by floor, each floor sorted by position ascending."""
    grouped: Dict[int, List[Room]] = defaultdict(list)
    for r in rooms:
        grouped[r.floor].append(r)
    return {floor: sorted(floor_rooms, key=lambda r: r.position)
            for floor, floor_rooms in sorted(grouped.items())}


def select_same_floor(available_rooms: List[Room], count: int) -> Optional[List[Room]]:
    """Return the `count` lowest-position rooms on the lowest floor that has enough.

    Returns None when no single floor has `count` free rooms.
    """
    by_floor = group_rooms_by_floor(available_rooms)
    for floor, floor_rooms in by_floor.items():
        if len(floor_rooms) >= count:
            selected = floor_rooms[:count]
            logger.debug(f"Same-floor hit on floor {floor}: {[r.number for r in selected]}")
            return selected
    return None
