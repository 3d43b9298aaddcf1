"""Tests for occupancy statistics and booking explanations."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.room import Room
from models.allocation import Hop
from data.hotel_layout import initialize
from engine.occupancy_stats import get_floor_occupancy, get_occupancy_summary
from engine.explainer import describe_floor_distribution, describe_travel_path, explain_assignment


def occupy(inventory, numbers):
    for n in numbers:
        inventory.get(n).occupied = True


class TestFloorOccupancy:
    def test_empty_hotel(self):
        floors = get_floor_occupancy(initialize())
        assert len(floors) == 10
        assert all(f["occupied_rooms"] == 0 for f in floors)
        assert floors[9]["total_rooms"] == 7
        assert all(f["status"] == "Surplus" for f in floors)

    def test_floor_rates(self):
        inventory = initialize()
        occupy(inventory, range(1001, 1008))
        occupy(inventory, range(201, 206))
        floors = {f["floor"]: f for f in get_floor_occupancy(inventory)}

        assert floors[10]["occupancy_rate"] == 1.0
        assert floors[10]["status"] == "Saturated"
        assert floors[2]["occupancy_rate"] == 0.5
        assert floors[2]["status"] == "Normal"
        assert floors[2]["available_numbers"] == [206, 207, 208, 209, 210]


class TestOccupancySummary:
    def test_totals(self):
        inventory = initialize()
        occupy(inventory, [101, 102, 501])
        summary = get_occupancy_summary(inventory)
        assert summary["total_rooms"] == 97
        assert summary["occupied_rooms"] == 3
        assert summary["available_rooms"] == 94

    def test_most_and_least_occupied(self):
        inventory = initialize()
        occupy(inventory, range(1001, 1004))   # 3/7
        occupy(inventory, range(401, 405))     # 4/10
        summary = get_occupancy_summary(inventory)
        assert summary["most_occupied_floor"] == 10
        assert summary["least_occupied_floor"] == 1


class TestExplainer:
    def test_floor_distribution(self):
        rooms = [Room(303, 3, 3), Room(307, 3, 7), Room(502, 5, 2)]
        assert describe_floor_distribution(rooms) == "Floor 3: 2 rooms, Floor 5: 1 room"

    def test_travel_path(self):
        lines = describe_travel_path([Hop(303, 307, 4), Hop(307, 502, 9)])
        assert lines == [
            "1. Room 303 → Room 307: 4 minutes",
            "2. Room 307 → Room 502: 9 minutes",
        ]

    def test_single_room_has_no_path(self):
        steps = explain_assignment([Room(101, 1, 1)], 0, [], "same_floor")
        assert steps[-1] == "Total travel time: 0 minutes"
        assert "Strategy: Same floor" in steps


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
