"""Build the fixed hotel layout: floors 1-9 with 10 rooms, floor 10 with 7."""

from typing import List

import pandas as pd

from models.room import Room
from models.inventory import RoomInventory
from config.defaults import (
    STANDARD_FLOORS, ROOMS_PER_STANDARD_FLOOR, TOP_FLOOR, ROOMS_ON_TOP_FLOOR,
    ROOM_NUMBER_FLOOR_MULTIPLIER,
)


def room_number_for(floor: int, position: int) -> int:
    return floor * ROOM_NUMBER_FLOOR_MULTIPLIER + position


def generate_rooms() -> List[Room]:
    """All 97 rooms, ordered by floor then position, none occupied."""
    rooms = []
    for floor in STANDARD_FLOORS:
        for position in range(1, ROOMS_PER_STANDARD_FLOOR + 1):
            rooms.append(Room(room_number_for(floor, position), floor, position))
    for position in range(1, ROOMS_ON_TOP_FLOOR + 1):
        rooms.append(Room(room_number_for(TOP_FLOOR, position), TOP_FLOOR, position))
    return rooms


def initialize() -> RoomInventory:
    """Create the hotel's room inventory with every room free."""
    return RoomInventory(generate_rooms())


def inventory_to_df(inventory: RoomInventory) -> pd.DataFrame:
    """One row per room, for tables and the room grid."""
    return pd.DataFrame([{
        "Room": r.number,
        "Floor": r.floor,
        "Position": r.position,
        "Occupied": r.occupied,
        "Selected": r.selected,
    } for r in inventory.rooms])
