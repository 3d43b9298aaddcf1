"""Default configuration constants for the Hotel Room Allocation Engine."""

# Building layout
STANDARD_FLOORS = range(1, 10)       # Floors 1-9
ROOMS_PER_STANDARD_FLOOR = 10
TOP_FLOOR = 10
ROOMS_ON_TOP_FLOOR = 7
ROOM_NUMBER_FLOOR_MULTIPLIER = 100   # room number = floor * 100 + position

# Travel cost weights (minutes)
VERTICAL_COST_PER_FLOOR = 2
HORIZONTAL_COST_PER_ROOM = 1

# Booking request bounds
MIN_ROOMS_PER_BOOKING = 1
MAX_ROOMS_PER_BOOKING = 5

# Cross-floor search
EXHAUSTIVE_SEARCH_THRESHOLD = 20     # Above this many free rooms, use the heuristic
HEURISTIC_CANDIDATE_LIMIT = 10       # Max candidates the heuristic evaluates

# Demo occupancy generator
MIN_RANDOM_OCCUPANCY_RATE = 0.30
MAX_RANDOM_OCCUPANCY_RATE = 0.90

# Floor status thresholds for the statistics view
FLOOR_SATURATION_THRESHOLD = 0.90
FLOOR_SURPLUS_THRESHOLD = 0.30

# Strategy labels
STRATEGY_SAME_FLOOR = "same_floor"
STRATEGY_EXHAUSTIVE = "exhaustive"
STRATEGY_HEURISTIC = "heuristic"

STRATEGY_LABELS = {
    STRATEGY_SAME_FLOOR: "Same floor",
    STRATEGY_EXHAUSTIVE: "Cross-floor (exhaustive)",
    STRATEGY_HEURISTIC: "Cross-floor (heuristic)",
}

# Editable rule keys exposed in the Admin tab
DEFAULT_RULE_CONFIG = {
    "min_rooms_per_booking": MIN_ROOMS_PER_BOOKING,
    "max_rooms_per_booking": MAX_ROOMS_PER_BOOKING,
    "exhaustive_search_threshold": EXHAUSTIVE_SEARCH_THRESHOLD,
    "heuristic_candidate_limit": HEURISTIC_CANDIDATE_LIMIT,
    "vertical_cost_per_floor": VERTICAL_COST_PER_FLOOR,
    "horizontal_cost_per_room": HORIZONTAL_COST_PER_ROOM,
}
