from decimal import Decimal

import attrs

from src.platform.exception.exceptions import SiteFullError, ValidationError


@attrs.define
class ParkingSite:
    location: str
    site: str
    capacity: int
    available: int
    latitude: float = 0.0
    longitude: float = 0.0
    access_code: str = attrs.field(default='', repr=False)
    price: Decimal = attrs.field(default=Decimal('0'), converter=Decimal)

    @classmethod
    def create(
        cls,
        *,
        location: str,
        site: str,
        capacity: int,
        latitude: float,
        longitude: float,
        access_code: str,
        price: Decimal,
    ) -> 'ParkingSite':
        if not location or not location.strip() or not site or not site.strip():
            raise ValidationError('Location / Site cannot be empty')
        if capacity < 0:
            raise ValidationError('Capacity cannot be negative')
        if Decimal(price) < 0:
            raise ValidationError('Price cannot be negative')

        return cls(
            location=location,
            site=site,
            capacity=capacity,
            available=capacity,
            latitude=latitude,
            longitude=longitude,
            access_code=access_code,
            price=price,
        )

    @staticmethod
    def available_after_reserve(*, location: str, site: str, available: int) -> int:
        if available <= 0:
            raise SiteFullError(location, site)
        return available - 1

    @staticmethod
    def available_after_release(*, available: int, capacity: int) -> int:
        return min(available + 1, capacity)
