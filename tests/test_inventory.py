"""Tests for the hotel layout, room inventory and demo occupancy generator."""

import sys
import os
import random
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.room import Room
from models.inventory import RoomInventory, RoomUnavailableError
from data.hotel_layout import initialize, generate_rooms, inventory_to_df
from data.occupancy import randomize_occupancy


class TestHotelLayout:
    def test_room_count(self):
        inventory = initialize()
        assert len(inventory) == 97
        assert inventory.floors == list(range(1, 11))

    def test_standard_floors(self):
        by_floor = initialize().rooms_by_floor()
        for floor in range(1, 10):
            assert [r.number for r in by_floor[floor]] == [floor * 100 + p for p in range(1, 11)]

    def test_top_floor(self):
        top = initialize().rooms_by_floor()[10]
        assert [r.number for r in top] == list(range(1001, 1008))
        assert [r.position for r in top] == list(range(1, 8))

    def test_all_free(self):
        assert len(initialize().available_rooms()) == 97

    def test_dataframe(self):
        df = inventory_to_df(initialize())
        assert len(df) == 97
        assert list(df.columns) == ["Room", "Floor", "Position", "Occupied", "Selected"]


class TestRoomInventory:
    def test_duplicate_number_rejected(self):
        with pytest.raises(ValueError):
            RoomInventory([Room(101, 1, 1), Room(101, 1, 2)])

    def test_duplicate_slot_rejected(self):
        with pytest.raises(ValueError):
            RoomInventory([Room(101, 1, 1), Room(999, 1, 1)])

    def test_commit_is_all_or_nothing(self):
        inventory = initialize()
        inventory.get(103).occupied = True
        rooms = [inventory.get(n) for n in (101, 102, 103)]

        with pytest.raises(RoomUnavailableError):
            inventory.commit(rooms)
        assert not inventory.get(101).occupied
        assert not inventory.get(102).occupied

    def test_commit_marks_rooms(self):
        inventory = initialize()
        inventory.commit([inventory.get(205), inventory.get(206)])
        assert {r.number for r in inventory.occupied_rooms()} == {205, 206}

    def test_unknown_room(self):
        with pytest.raises(KeyError):
            initialize().get(1100)

    def test_release_and_reset(self):
        inventory = initialize()
        inventory.commit([inventory.get(n) for n in (101, 102, 103)])
        inventory.release([102])
        assert {r.number for r in inventory.occupied_rooms()} == {101, 103}
        inventory.reset_all()
        assert inventory.occupied_rooms() == []
        assert not any(r.selected for r in inventory.rooms)


class TestRandomizeOccupancy:
    def test_explicit_rate(self):
        inventory = initialize()
        occupied = randomize_occupancy(inventory, rate=0.5, rng=random.Random(42))
        assert occupied == 48
        assert len(inventory.occupied_rooms()) == 48

    def test_reproducible_with_seed(self):
        a, b = initialize(), initialize()
        randomize_occupancy(a, rng=random.Random(7))
        randomize_occupancy(b, rng=random.Random(7))
        assert [r.number for r in a.occupied_rooms()] == [r.number for r in b.occupied_rooms()]

    def test_default_rate_range(self):
        for seed in range(20):
            occupied = randomize_occupancy(initialize(), rng=random.Random(seed))
            assert 29 <= occupied <= 87

    def test_resets_first(self):
        inventory = initialize()
        randomize_occupancy(inventory, rate=1.0, rng=random.Random(1))
        assert len(inventory.occupied_rooms()) == 97
        randomize_occupancy(inventory, rate=0.0, rng=random.Random(1))
        assert inventory.occupied_rooms() == []

    def test_invalid_rate(self):
        with pytest.raises(ValueError):
            randomize_occupancy(initialize(), rate=1.5)

    def test_room_set_unchanged(self):
        inventory = initialize()
        randomize_occupancy(inventory, rate=0.6, rng=random.Random(3))
        assert [r.number for r in inventory.rooms] == [r.number for r in generate_rooms()]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
