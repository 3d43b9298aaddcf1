"""Travel cost model: minutes a guest spends walking between assigned rooms."""

from typing import List, Optional, Tuple

from models.room import Room
from models.allocation import Hop
from config.defaults import VERTICAL_COST_PER_FLOOR, HORIZONTAL_COST_PER_ROOM


def pairwise_cost(a: Room, b: Room, rule_config: Optional[dict] = None) -> int:
    """Cost of moving between two rooms: 2 per floor crossed, 1 per position."""
    cfg = rule_config or {}
    vertical = cfg.get("vertical_cost_per_floor", VERTICAL_COST_PER_FLOOR)
    horizontal = cfg.get("horizontal_cost_per_room", HORIZONTAL_COST_PER_ROOM)
    return abs(a.floor - b.floor) * vertical + abs(a.position - b.position) * horizontal


def path_breakdown(rooms: List[Room], rule_config: Optional[dict] = None) -> Tuple[int, List[Hop]]:
    """Walk the rooms in the given order; return total cost and one hop per pair."""
    total = 0
    hops: List[Hop] = []
    for current, nxt in zip(rooms, rooms[1:]):
        cost = pairwise_cost(current, nxt, rule_config)
        total += cost
        hops.append(Hop(from_room=current.number, to_room=nxt.number, cost=cost))
    return total, hops


def path_cost(rooms: List[Room], rule_config: Optional[dict] = None) -> int:
    total, _ = path_breakdown(rooms, rule_config)
    return total


def visiting_order(rooms: List[Room]) -> List[Room]:
    """Ascending floor, then ascending position."""
    return sorted(rooms, key=lambda r: r.sort_key)


def optimal_travel_cost(rooms: List[Room], rule_config: Optional[dict] = None) -> int:
    """Cost of a candidate set when visited in floor/position order.

    The order is taken as optimal; other permutations are not checked.
    """
    if len(rooms) <= 1:
        return 0
    return path_cost(visiting_order(rooms), rule_config)
