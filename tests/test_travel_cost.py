"""Tests for the travel cost model."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.room import Room
from engine.travel_cost import (
    pairwise_cost,
    path_cost,
    path_breakdown,
    optimal_travel_cost,
    visiting_order,
)


def make_room(floor=1, position=1):
    return Room(floor * 100 + position, floor, position)


class TestPairwiseCost:
    def test_same_room_is_free(self):
        r = make_room(3, 4)
        assert pairwise_cost(r, r) == 0

    def test_horizontal_only(self):
        assert pairwise_cost(make_room(1, 1), make_room(1, 5)) == 4

    def test_vertical_only(self):
        assert pairwise_cost(make_room(1, 3), make_room(4, 3)) == 6

    def test_combined(self):
        # 2 floors * 2 + 3 positions * 1
        assert pairwise_cost(make_room(3, 7), make_room(5, 4)) == 7

    def test_symmetric(self):
        a, b = make_room(2, 9), make_room(7, 1)
        assert pairwise_cost(a, b) == pairwise_cost(b, a)

    def test_weights_from_rule_config(self):
        cfg = {"vertical_cost_per_floor": 5, "horizontal_cost_per_room": 2}
        assert pairwise_cost(make_room(1, 1), make_room(2, 3), cfg) == 9


class TestPathCost:
    def test_empty_and_single(self):
        assert path_cost([]) == 0
        assert path_cost([make_room(5, 5)]) == 0

    def test_consecutive_rooms(self):
        rooms = [make_room(1, p) for p in range(1, 6)]
        assert path_cost(rooms) == 4

    def test_breakdown_hops(self):
        rooms = [make_room(3, 3), make_room(3, 7), make_room(5, 2)]
        total, hops = path_breakdown(rooms)
        assert total == 4 + 9
        assert [(h.from_room, h.to_room, h.cost) for h in hops] == [(303, 307, 4), (307, 502, 9)]

    def test_order_matters(self):
        a, b, c = make_room(1, 1), make_room(5, 1), make_room(1, 2)
        assert path_cost([a, b, c]) == 8 + 9
        assert path_cost([a, c, b]) == 1 + 9

    def test_reversal_symmetric(self):
        rooms = [make_room(2, 1), make_room(2, 6), make_room(4, 3), make_room(9, 10)]
        assert path_cost(rooms) == path_cost(list(reversed(rooms)))
        assert path_cost(rooms) >= 0


class TestOptimalTravelCost:
    def test_sorts_by_floor_then_position(self):
        rooms = [make_room(5, 2), make_room(3, 7), make_room(3, 3)]
        ordered = visiting_order(rooms)
        assert [r.number for r in ordered] == [303, 307, 502]
        assert optimal_travel_cost(rooms) == path_cost(ordered)

    def test_input_not_reordered(self):
        rooms = [make_room(5, 2), make_room(3, 7)]
        optimal_travel_cost(rooms)
        assert [r.number for r in rooms] == [502, 307]

    def test_single_room(self):
        assert optimal_travel_cost([make_room(10, 7)]) == 0


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
