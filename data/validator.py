"""Input validation for booking requests, room releases and rule settings."""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from models.inventory import RoomInventory
from config.defaults import (
    MIN_ROOMS_PER_BOOKING, MAX_ROOMS_PER_BOOKING, DEFAULT_RULE_CONFIG,
)


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def validate_room_count(count, rule_config: Optional[dict] = None) -> ValidationResult:
    """Check a requested room count against the booking bounds."""
    cfg = rule_config or {}
    min_rooms = cfg.get("min_rooms_per_booking", MIN_ROOMS_PER_BOOKING)
    max_rooms = cfg.get("max_rooms_per_booking", MAX_ROOMS_PER_BOOKING)

    result = ValidationResult()
    if isinstance(count, bool) or not isinstance(count, int):
        result.is_valid = False
        result.errors.append(f"Room count must be a whole number, got {count!r}.")
        return result

    if count < min_rooms or count > max_rooms:
        result.is_valid = False
        result.errors.append(f"Please enter a number between {min_rooms} and {max_rooms}.")
    return result


def validate_room_numbers(inventory: RoomInventory, room_numbers: Iterable[int]) -> ValidationResult:
    """All numbers must exist; numbers of rooms already free only warn."""
    result = ValidationResult()
    numbers = list(room_numbers)

    unknown = [n for n in numbers if n not in inventory]
    if unknown:
        result.is_valid = False
        result.errors.append(f"Unknown room numbers: {', '.join(str(n) for n in unknown)}")
        return result

    already_free = [n for n in numbers if not inventory.get(n).occupied]
    if already_free:
        result.warnings.append(
            f"Rooms already available: {', '.join(str(n) for n in already_free)}. "
            "Nothing to release for these."
        )
    return result


def validate_rule_config(config: dict) -> ValidationResult:
    """Sanity-check an edited rule config before it is stored."""
    result = ValidationResult()

    unknown = sorted(set(config) - set(DEFAULT_RULE_CONFIG))
    if unknown:
        result.warnings.append(f"Unrecognised rule keys will be ignored: {', '.join(unknown)}")

    for key in DEFAULT_RULE_CONFIG:
        value = config.get(key)
        if value is None:
            continue
        if not isinstance(value, int) or value < 0:
            result.is_valid = False
            result.errors.append(f"{key} must be a non-negative whole number.")

    min_rooms = config.get("min_rooms_per_booking", MIN_ROOMS_PER_BOOKING)
    max_rooms = config.get("max_rooms_per_booking", MAX_ROOMS_PER_BOOKING)
    if isinstance(min_rooms, int) and isinstance(max_rooms, int):
        if min_rooms < 1:
            result.is_valid = False
            result.errors.append("min_rooms_per_booking must be at least 1.")
        if max_rooms < min_rooms:
            result.is_valid = False
            result.errors.append("max_rooms_per_booking cannot be below min_rooms_per_booking.")

    if config.get("heuristic_candidate_limit") == 0:
        result.is_valid = False
        result.errors.append("heuristic_candidate_limit must be at least 1.")

    return result
