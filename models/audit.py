from dataclasses import dataclass, field
from datetime import datetime
from typing import List


@dataclass
class AuditEntry:
    timestamp: datetime
    action: str              # "book", "release", "reset", "randomize", "rule_change"
    room_numbers: List[int] = field(default_factory=list)
    travel_cost: int = 0
    detail: str = ""
