from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from models.room import Room


class AllocationState(Enum):
    """Lifecycle states for a single allocation request."""
    IDLE = "Idle"
    SELECTING = "Selecting"
    SAME_FLOOR_HIT = "SameFloorHit"
    CROSS_FLOOR_SEARCH = "CrossFloorSearch"
    RESOLVED = "Resolved"
    FAILED = "Failed"


class AllocationErrorKind(Enum):
    VALIDATION = "ValidationError"
    INSUFFICIENT_ROOMS = "InsufficientRooms"


@dataclass
class AllocationError:
    kind: AllocationErrorKind
    message: str


@dataclass
class Hop:
    from_room: int
    to_room: int
    cost: int


@dataclass
class Assignment:
    rooms: List[Room]               # visiting order
    total_cost: int                 # minutes-equivalent
    hops: List[Hop] = field(default_factory=list)
    strategy: str = "same_floor"    # "same_floor", "exhaustive", "heuristic"
    explanation_steps: List[str] = field(default_factory=list)

    @property
    def room_numbers(self) -> List[int]:
        return [r.number for r in self.rooms]

    @property
    def floor_counts(self) -> Dict[int, int]:
        counts: Dict[int, int] = {}
        for r in self.rooms:
            counts[r.floor] = counts.get(r.floor, 0) + 1
        return counts

    @property
    def is_same_floor(self) -> bool:
        return len(self.floor_counts) <= 1


@dataclass
class AllocationResult:
    requested: int
    assignment: Optional[Assignment] = None
    error: Optional[AllocationError] = None
    state: AllocationState = AllocationState.IDLE
    transitions: List[AllocationState] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.assignment is not None and self.error is None
