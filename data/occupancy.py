"""Random occupancy for demos. Not used by allocation itself."""

import logging
import math
import random
from typing import Optional

from models.inventory import RoomInventory
from config.defaults import MIN_RANDOM_OCCUPANCY_RATE, MAX_RANDOM_OCCUPANCY_RATE

logger = logging.getLogger(__name__)


def randomize_occupancy(
    inventory: RoomInventory,
    rate: Optional[float] = None,
    rng: Optional[random.Random] = None,
) -> int:
    """Reset every room, then occupy floor(total * rate) rooms at random.

    When `rate` is omitted one is drawn uniformly between the configured
    minimum and maximum. Pass a seeded `rng` for reproducible layouts.
    Returns the number of rooms occupied.
    """
    rng = rng or random.Random()
    if rate is None:
        rate = rng.uniform(MIN_RANDOM_OCCUPANCY_RATE, MAX_RANDOM_OCCUPANCY_RATE)
    if not 0.0 <= rate <= 1.0:
        raise ValueError(f"Occupancy rate must be between 0 and 1, got {rate}")

    with inventory.lock:
        inventory.reset_all()
        rooms = inventory.rooms
        to_occupy = math.floor(len(rooms) * rate)

        # Fisher-Yates
        for i in range(len(rooms) - 1, 0, -1):
            j = rng.randint(0, i)
            rooms[i], rooms[j] = rooms[j], rooms[i]

        for room in rooms[:to_occupy]:
            room.occupied = True

    logger.info(f"Generated {round(rate * 100)}% occupancy: {to_occupy}/{len(rooms)} rooms")
    return to_occupy
