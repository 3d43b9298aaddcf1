from models.room import Room
from models.inventory import RoomInventory, RoomUnavailableError
from models.allocation import (
    AllocationError, AllocationErrorKind, AllocationResult, AllocationState,
    Assignment, Hop,
)
from models.audit import AuditEntry
