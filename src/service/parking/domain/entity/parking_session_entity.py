from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.parking.domain.enum.parking_session_status import ParkingSessionStatus


_TRANSITIONS: dict[ParkingSessionStatus, frozenset[ParkingSessionStatus]] = {
    ParkingSessionStatus.REQUESTED: frozenset(
        {ParkingSessionStatus.RESERVED, ParkingSessionStatus.FAILED}
    ),
    ParkingSessionStatus.RESERVED: frozenset(
        {ParkingSessionStatus.CHARGED, ParkingSessionStatus.COMPENSATED}
    ),
    ParkingSessionStatus.CHARGED: frozenset({ParkingSessionStatus.ACTIVE}),
    ParkingSessionStatus.ACTIVE: frozenset(),
    ParkingSessionStatus.COMPENSATED: frozenset(),
    ParkingSessionStatus.FAILED: frozenset(),
}


@attrs.define
class ParkingSession:
    """
    One reserve-then-charge flow.

    requested -> reserved -> charged -> active, with two terminal failure states:
    failed (nothing was reserved) and compensated (reservation released after the
    charge failed).
    """

    username: str
    location: str
    site: str
    status: ParkingSessionStatus = ParkingSessionStatus.REQUESTED
    available_after_reserve: Optional[int] = None
    price: Optional[Decimal] = None
    balance_after_charge: Optional[Decimal] = None
    started_at: Optional[datetime] = None

    @classmethod
    def request(cls, *, username: str, location: str, site: str) -> 'ParkingSession':
        return cls(username=username, location=location, site=site)

    def _transition(self, target: ParkingSessionStatus) -> None:
        if target not in _TRANSITIONS[self.status]:
            raise DomainError(f'Cannot move parking session from {self.status} to {target}')
        self.status = target

    def mark_reserved(self, *, available: int) -> None:
        self._transition(ParkingSessionStatus.RESERVED)
        self.available_after_reserve = available

    def mark_charged(self, *, price: Decimal, balance: Decimal) -> None:
        self._transition(ParkingSessionStatus.CHARGED)
        self.price = price
        self.balance_after_charge = balance

    def activate(self) -> None:
        self._transition(ParkingSessionStatus.ACTIVE)
        self.started_at = datetime.now(timezone.utc)

    def mark_compensated(self) -> None:
        self._transition(ParkingSessionStatus.COMPENSATED)

    def mark_failed(self) -> None:
        self._transition(ParkingSessionStatus.FAILED)
