"""Cross-floor combination search: exhaustive floor-subset enumeration and heuristic fallback."""

import logging
import math
from itertools import combinations
from typing import Dict, Iterator, List, Optional, Tuple

from models.room import Room
from engine.floor_selector import group_rooms_by_floor
from engine.travel_cost import optimal_travel_cost
from config.defaults import (
    EXHAUSTIVE_SEARCH_THRESHOLD, HEURISTIC_CANDIDATE_LIMIT, TOP_FLOOR,
    STRATEGY_EXHAUSTIVE, STRATEGY_HEURISTIC,
)

logger = logging.getLogger(__name__)


def floor_combinations(floors: List[int], size: int) -> Iterator[Tuple[int, ...]]:
    """Subsets of `floors` of the given size, in lexicographic index order.

    The order matters: it decides which candidate wins a cost tie.
    """
    if size <= 0 or size > len(floors):
        return iter(())
    return combinations(floors, size)


def plan_distribution(capacities: List[int], count: int) -> Optional[List[int]]:
    """How many rooms to take from each floor, given each floor's free capacity.

    First pass: left to right, take ceil(remaining / floors_left) capped by
    capacity. Second pass: hand out any shortfall one room at a time,
    round-robin over floors that still have spare capacity.
    """
    if sum(capacities) < count:
        return None

    n = len(capacities)
    distribution = [0] * n
    remaining = count

    for i, capacity in enumerate(capacities):
        if remaining <= 0:
            break
        target = min(remaining, math.ceil(remaining / (n - i)))
        take = min(target, capacity)
        distribution[i] = take
        remaining -= take

    idx = 0
    while remaining > 0:
        if distribution[idx] < capacities[idx]:
            distribution[idx] += 1
            remaining -= 1
        idx = (idx + 1) % n

    return distribution


def distribute_rooms(
    rooms_by_floor: Dict[int, List[Room]],
    floors: Tuple[int, ...],
    count: int,
) -> Optional[List[Room]]:
    """Pick exactly `count` rooms from the given floors, lowest positions first.

    Returns None if the floors cannot supply `count` rooms between them.
    """
    capacities = [len(rooms_by_floor.get(f, [])) for f in floors]
    distribution = plan_distribution(capacities, count)
    if distribution is None:
        return None

    selected: List[Room] = []
    for floor, take in zip(floors, distribution):
        if take > 0:
            selected.extend(rooms_by_floor[floor][:take])

    return selected if len(selected) == count else None


def _pick_cheapest(
    candidates: List[List[Room]],
    rule_config: Optional[dict] = None,
) -> Tuple[Optional[List[Room]], Optional[int]]:
    """Minimum-cost candidate; on ties the earliest candidate wins."""
    best: Optional[List[Room]] = None
    best_cost: Optional[int] = None
    for candidate in candidates:
        cost = optimal_travel_cost(candidate, rule_config)
        logger.debug(f"Candidate {[r.number for r in candidate]} costs {cost}")
        if best_cost is None or cost < best_cost:
            best, best_cost = candidate, cost
    return best, best_cost


def iter_exhaustive_candidates(
    available_rooms: List[Room],
    count: int,
) -> Iterator[List[Room]]:
    """Every distribution of `count` rooms over 2..min(floors, count) floor subsets."""
    by_floor = group_rooms_by_floor(available_rooms)
    floors = list(by_floor.keys())

    for num_floors in range(2, min(len(floors), count) + 1):
        for subset in floor_combinations(floors, num_floors):
            candidate = distribute_rooms(by_floor, subset, count)
            if candidate is not None:
                yield candidate


def exhaustive_search(
    available_rooms: List[Room],
    count: int,
    rule_config: Optional[dict] = None,
) -> Optional[List[Room]]:
    """Cheapest cross-floor combination over all floor subsets.

    Optimal only among the distributions `distribute_rooms` can produce,
    not over arbitrary room subsets.
    """
    best, best_cost = _pick_cheapest(iter_exhaustive_candidates(available_rooms, count), rule_config)
    if best is not None:
        logger.debug(f"Exhaustive search best: {[r.number for r in best]} (cost {best_cost})")
    return best


def heuristic_candidates(
    available_rooms: List[Room],
    count: int,
    limit: int = HEURISTIC_CANDIDATE_LIMIT,
) -> List[List[Room]]:
    """Bounded candidate list built around the floors with the most free rooms.

    Each floor, richest first, acts as primary. If it cannot hold the whole
    booking, the shortfall comes from each adjacent floor that can cover it,
    or failing both, from the first floor in the ranking that can.
    """
    by_floor = group_rooms_by_floor(available_rooms)
    ranked = sorted(by_floor.keys(), key=lambda f: -len(by_floor[f]))

    candidates: List[List[Room]] = []
    for primary in ranked:
        primary_rooms = by_floor[primary]
        if len(primary_rooms) >= count:
            candidates.append(primary_rooms[:count])
            continue

        shortfall = count - len(primary_rooms)
        adjacent = [f for f in (primary - 1, primary + 1)
                    if 1 <= f <= TOP_FLOOR and len(by_floor.get(f, [])) >= shortfall]
        for secondary in adjacent:
            candidates.append(primary_rooms + by_floor[secondary][:shortfall])

        if not adjacent:
            for secondary in ranked:
                if secondary != primary and len(by_floor[secondary]) >= shortfall:
                    candidates.append(primary_rooms + by_floor[secondary][:shortfall])
                    break

    return candidates[:limit]


def heuristic_search(
    available_rooms: List[Room],
    count: int,
    rule_config: Optional[dict] = None,
) -> Optional[List[Room]]:
    """Approximate search for large free-room sets. Not guaranteed optimal."""
    cfg = rule_config or {}
    limit = cfg.get("heuristic_candidate_limit", HEURISTIC_CANDIDATE_LIMIT)
    candidates = heuristic_candidates(available_rooms, count, limit)
    best, best_cost = _pick_cheapest(candidates, rule_config)
    if best is not None:
        logger.debug(
            f"Heuristic search best of {len(candidates)}: {[r.number for r in best]} (cost {best_cost})"
        )
    return best


def find_cross_floor_combination(
    available_rooms: List[Room],
    count: int,
    rule_config: Optional[dict] = None,
) -> Tuple[Optional[List[Room]], str]:
    """Choose exhaustive or heuristic mode by free-room count and run it."""
    cfg = rule_config or {}
    threshold = cfg.get("exhaustive_search_threshold", EXHAUSTIVE_SEARCH_THRESHOLD)

    if len(available_rooms) <= threshold:
        return exhaustive_search(available_rooms, count, rule_config), STRATEGY_EXHAUSTIVE
    return heuristic_search(available_rooms, count, rule_config), STRATEGY_HEURISTIC
