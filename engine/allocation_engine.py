"""Room allocation engine: validate, select, search, commit."""

import logging
from typing import Iterable, List, Optional, Tuple

from models.room import Room
from models.inventory import RoomInventory
from models.allocation import (
    AllocationError, AllocationErrorKind, AllocationResult, AllocationState, Assignment,
)
from engine.floor_selector import select_same_floor
from engine.combination_search import find_cross_floor_combination
from engine.travel_cost import path_breakdown, visiting_order
from engine.explainer import explain_assignment
from data.validator import validate_room_count, validate_room_numbers, ValidationResult
from config.defaults import STRATEGY_SAME_FLOOR

logger = logging.getLogger(__name__)


class _Tracker:
    """Records the state path of one allocation request."""

    def __init__(self, result: AllocationResult):
        self.result = result
        self.move(AllocationState.IDLE)

    def move(self, state: AllocationState):
        self.result.state = state
        self.result.transitions.append(state)
        logger.debug(f"Allocation of {self.result.requested} room(s): -> {state.value}")

    def fail(self, kind: AllocationErrorKind, message: str) -> AllocationResult:
        self.result.error = AllocationError(kind=kind, message=message)
        self.move(AllocationState.FAILED)
        logger.info(f"Allocation of {self.result.requested} room(s) failed: {message}")
        return self.result


def find_rooms(
    available_rooms: List[Room],
    count: int,
    rule_config: Optional[dict] = None,
) -> Tuple[Optional[List[Room]], str]:
    """Pure selection step. Returns (rooms or None, strategy)."""
    same_floor = select_same_floor(available_rooms, count)
    if same_floor is not None:
        return same_floor, STRATEGY_SAME_FLOOR
    return find_cross_floor_combination(available_rooms, count, rule_config)


def build_assignment(rooms: List[Room], strategy: str, rule_config: Optional[dict] = None) -> Assignment:
    """Order rooms for visiting and attach the cost breakdown."""
    ordered = visiting_order(rooms)
    total, hops = path_breakdown(ordered, rule_config)
    return Assignment(
        rooms=ordered,
        total_cost=total,
        hops=hops,
        strategy=strategy,
        explanation_steps=explain_assignment(ordered, total, hops, strategy),
    )


def allocate(
    inventory: RoomInventory,
    count: int,
    rule_config: Optional[dict] = None,
) -> AllocationResult:
    """Book `count` rooms with the lowest travel cost.

    Expected failures (bad count, not enough rooms) come back as
    ``result.error``; the inventory is only touched on success.
    """
    result = AllocationResult(requested=count)
    tracker = _Tracker(result)

    validation = validate_room_count(count, rule_config)
    if not validation.is_valid:
        return tracker.fail(AllocationErrorKind.VALIDATION, "; ".join(validation.errors))

    with inventory.lock:
        tracker.move(AllocationState.SELECTING)
        available = inventory.available_rooms()
        if len(available) < count:
            return tracker.fail(
                AllocationErrorKind.INSUFFICIENT_ROOMS,
                f"Not enough rooms available! Requested {count}, {len(available)} free.",
            )

        rooms, strategy = find_rooms(available, count, rule_config)
        if strategy == STRATEGY_SAME_FLOOR:
            tracker.move(AllocationState.SAME_FLOOR_HIT)
        else:
            tracker.move(AllocationState.CROSS_FLOOR_SEARCH)
        if rooms is None:
            return tracker.fail(
                AllocationErrorKind.INSUFFICIENT_ROOMS,
                f"Not enough rooms available! No combination of {count} rooms found.",
            )

        assignment = build_assignment(rooms, strategy, rule_config)
        inventory.clear_selection()
        inventory.commit(assignment.rooms)

    result.assignment = assignment
    tracker.move(AllocationState.RESOLVED)
    logger.info(
        f"Booked {count} room(s) via {strategy}: {assignment.room_numbers}, "
        f"travel time {assignment.total_cost} minutes"
    )
    return result


def release(inventory: RoomInventory, room_numbers: Iterable[int]) -> ValidationResult:
    """Free the given rooms. Nothing is released if any number is unknown."""
    numbers = list(room_numbers)
    validation = validate_room_numbers(inventory, numbers)
    if not validation.is_valid:
        logger.info(f"Release rejected: {'; '.join(validation.errors)}")
        return validation
    inventory.release(numbers)
    logger.info(f"Released rooms: {numbers}")
    return validation


def reset_all(inventory: RoomInventory):
    """Free every room."""
    inventory.reset_all()
    logger.info("All bookings have been reset.")
