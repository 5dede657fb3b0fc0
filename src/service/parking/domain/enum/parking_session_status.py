from enum import StrEnum


class ParkingSessionStatus(StrEnum):
    REQUESTED = 'requested'
    RESERVED = 'reserved'
    CHARGED = 'charged'
    ACTIVE = 'active'
    COMPENSATED = 'compensated'
    FAILED = 'failed'
