"""Row <-> entity mapping and LWT result decoding shared by the Scylla repositories"""

from decimal import Decimal
from typing import Any

from src.service.parking.domain.entity.parking_site_entity import ParkingSite
from src.service.parking.domain.entity.user_entity import NO_PREFERENCE, User
from src.service.parking.domain.value_object.cas_outcome import CasOutcome


def row_to_user(row: Any) -> User:
    return User(
        username=row.username,
        password_hash=row.password or '',
        salt=row.salt or '',
        setting_location=row.setting_location or NO_PREFERENCE,
        setting_site=row.setting_site or NO_PREFERENCE,
        balance=row.balance if row.balance is not None else Decimal('0'),
    )


def row_to_parking_site(row: Any) -> ParkingSite:
    return ParkingSite(
        location=row.location,
        site=row.site,
        capacity=row.capacity,
        available=row.available,
        latitude=row.lat if row.lat is not None else 0.0,
        longitude=row.lon if row.lon is not None else 0.0,
        access_code=row.code or '',
        price=row.price if row.price is not None else Decimal('0'),
    )


def cas_outcome_from_result(result: Any, *, column: str, new_value: Any) -> CasOutcome[Any]:
    """
    Decode ``UPDATE ... IF <column> = <expected>``

    Not applied on an existing row: the row carries the current value of ``column``.
    Not applied on a missing row: the row only carries ``[applied]``.
    """
    if result.was_applied:
        return CasOutcome.success(new_value)

    row = result.one()
    current = getattr(row, column, None) if row is not None else None
    if current is None:
        return CasOutcome.missing()
    return CasOutcome.conflict(current)
