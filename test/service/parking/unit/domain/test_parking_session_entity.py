from decimal import Decimal

import pytest

from src.platform.exception.exceptions import DomainError
from src.service.parking.domain.entity.parking_session_entity import ParkingSession
from src.service.parking.domain.enum.parking_session_status import ParkingSessionStatus


def _session() -> ParkingSession:
    return ParkingSession.request(username='alice', location='stirling', site='ONE')


class TestParkingSession:
    def test_happy_path(self):
        session = _session()

        session.mark_reserved(available=99)
        session.mark_charged(price=Decimal('2.50'), balance=Decimal('-2.50'))
        session.activate()

        assert session.status == ParkingSessionStatus.ACTIVE
        assert session.started_at is not None

    def test_compensated_after_reservation(self):
        session = _session()
        session.mark_reserved(available=0)

        session.mark_compensated()

        assert session.status == ParkingSessionStatus.COMPENSATED

    def test_cannot_charge_without_reservation(self):
        with pytest.raises(DomainError):
            _session().mark_charged(price=Decimal('1'), balance=Decimal('0'))

    def test_terminal_states_are_final(self):
        session = _session()
        session.mark_failed()

        with pytest.raises(DomainError):
            session.mark_reserved(available=1)
