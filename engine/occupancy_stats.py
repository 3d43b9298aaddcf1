"""Floor-level and hotel-wide occupancy statistics."""

from typing import List

from models.inventory import RoomInventory
from config.defaults import FLOOR_SATURATION_THRESHOLD, FLOOR_SURPLUS_THRESHOLD


def get_floor_occupancy(inventory: RoomInventory) -> List[dict]:
    """Compute occupancy stats per floor, lowest floor first."""
    results = []
    for floor, rooms in sorted(inventory.rooms_by_floor().items()):
        total = len(rooms)
        occupied = sum(1 for r in rooms if r.occupied)
        rate = occupied / total if total > 0 else 0
        if rate > FLOOR_SATURATION_THRESHOLD:
            status = "Saturated"
        elif rate < FLOOR_SURPLUS_THRESHOLD:
            status = "Surplus"
        else:
            status = "Normal"
        results.append({
            "floor": floor,
            "total_rooms": total,
            "occupied_rooms": occupied,
            "available_rooms": total - occupied,
            "occupancy_rate": rate,
            "status": status,
            "available_numbers": [r.number for r in rooms if not r.occupied],
        })
    return results


def get_occupancy_summary(inventory: RoomInventory) -> dict:
    """Hotel totals plus most and least occupied floors.

    Ties go to the lowest floor number.
    """
    floors = get_floor_occupancy(inventory)
    total = len(inventory)
    occupied = sum(f["occupied_rooms"] for f in floors)

    most = least = None
    for f in floors:
        if most is None or f["occupancy_rate"] > most["occupancy_rate"]:
            most = f
        if least is None or f["occupancy_rate"] < least["occupancy_rate"]:
            least = f

    return {
        "total_rooms": total,
        "occupied_rooms": occupied,
        "available_rooms": total - occupied,
        "occupancy_rate": occupied / total if total > 0 else 0,
        "most_occupied_floor": most["floor"] if most else None,
        "least_occupied_floor": least["floor"] if least else None,
        "floors": floors,
    }
