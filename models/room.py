from dataclasses import dataclass


@dataclass
class Room:
    number: int
    floor: int
    position: int                 # 1-based, left to right
    occupied: bool = False
    selected: bool = False        # highlighted as part of the most recent booking

    @property
    def is_available(self) -> bool:
        return not self.occupied

    @property
    def sort_key(self) -> tuple:
        """Visiting order: floor first, then position."""
        return (self.floor, self.position)
