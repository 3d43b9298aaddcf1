"""Tests for the same-floor fast path."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.room import Room
from engine.floor_selector import group_rooms_by_floor, select_same_floor


def make_rooms(floor, positions):
    return [Room(floor * 100 + p, floor, p) for p in positions]


class TestGroupRoomsByFloor:
    def test_groups_sorted_by_position(self):
        rooms = make_rooms(2, [5, 1, 3]) + make_rooms(1, [9])
        grouped = group_rooms_by_floor(rooms)
        assert list(grouped.keys()) == [1, 2]
        assert [r.position for r in grouped[2]] == [1, 3, 5]


class TestSelectSameFloor:
    def test_lowest_floor_wins(self):
        rooms = make_rooms(1, range(1, 11)) + make_rooms(2, range(1, 11))
        selected = select_same_floor(rooms, 5)
        assert [r.number for r in selected] == [101, 102, 103, 104, 105]

    def test_skips_floor_without_capacity(self):
        rooms = make_rooms(1, [1, 2]) + make_rooms(4, [2, 8, 6])
        selected = select_same_floor(rooms, 3)
        assert [r.number for r in selected] == [402, 406, 408]

    def test_lowest_positions_even_if_gaps(self):
        rooms = make_rooms(3, [10, 2, 7, 4])
        selected = select_same_floor(rooms, 2)
        assert [r.number for r in selected] == [302, 304]

    def test_no_single_floor(self):
        rooms = make_rooms(1, [1, 2]) + make_rooms(2, [1, 2])
        assert select_same_floor(rooms, 3) is None

    def test_empty(self):
        assert select_same_floor([], 1) is None

    def test_read_only(self):
        rooms = make_rooms(1, [1, 2, 3])
        select_same_floor(rooms, 2)
        assert not any(r.occupied for r in rooms)


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
