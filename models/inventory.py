"""Owned room inventory: availability reads and the atomic occupancy commit."""

import threading
from collections import defaultdict
from typing import Dict, Iterable, List

from models.room import Room


class RoomUnavailableError(RuntimeError):
    """Raised when a commit targets a room that is already occupied."""


class RoomInventory:
    """Fixed set of rooms keyed by room number.

    The room set never grows or shrinks after construction; only the
    ``occupied`` and ``selected`` flags change. ``lock`` serializes the
    read-search-commit cycle of an allocation against other mutations.
    """

    def __init__(self, rooms: Iterable[Room]):
        self._rooms: Dict[int, Room] = {}
        seen_slots = set()
        for room in rooms:
            if room.number in self._rooms:
                raise ValueError(f"Duplicate room number {room.number}")
            slot = (room.floor, room.position)
            if slot in seen_slots:
                raise ValueError(f"Duplicate floor/position {slot} for room {room.number}")
            seen_slots.add(slot)
            self._rooms[room.number] = room
        self.lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, room_number: int) -> bool:
        return room_number in self._rooms

    def get(self, room_number: int) -> Room:
        return self._rooms[room_number]

    @property
    def rooms(self) -> List[Room]:
        return sorted(self._rooms.values(), key=lambda r: r.sort_key)

    @property
    def floors(self) -> List[int]:
        return sorted({r.floor for r in self._rooms.values()})

    def available_rooms(self) -> List[Room]:
        return [r for r in self.rooms if r.is_available]

    def occupied_rooms(self) -> List[Room]:
        return [r for r in self.rooms if r.occupied]

    def rooms_by_floor(self) -> Dict[int, List[Room]]:
        grouped: Dict[int, List[Room]] = defaultdict(list)
        for r in self.rooms:
            grouped[r.floor].append(r)
        return dict(grouped)

    def clear_selection(self):
        for r in self._rooms.values():
            r.selected = False

    def commit(self, rooms: List[Room]):
        """Mark every room occupied, or none of them."""
        with self.lock:
            targets = [self._rooms[r.number] for r in rooms]
            taken = [r.number for r in targets if r.occupied]
            if taken:
                raise RoomUnavailableError(f"Rooms already occupied: {taken}")
            for r in targets:
                r.occupied = True
                r.selected = True

    def release(self, room_numbers: Iterable[int]):
        with self.lock:
            targets = [self._rooms[n] for n in room_numbers]
            for r in targets:
                r.occupied = False
                r.selected = False

    def reset_all(self):
        with self.lock:
            for r in self._rooms.values():
                r.occupied = False
                r.selected = False
