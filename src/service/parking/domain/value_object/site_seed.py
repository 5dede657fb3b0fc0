from decimal import Decimal
from typing import NamedTuple


class SiteSeed(NamedTuple):
    location: str
    site: str
    capacity: int
    latitude: float = 0.0
    longitude: float = 0.0
    price: Decimal | None = None  # None -> DEFAULT_SITE_PRICE


DEFAULT_SITE_SEEDS: tuple[SiteSeed, ...] = (
    SiteSeed('stirling', 'ONE', 100),
    SiteSeed('stirling', 'TWO', 50),
    SiteSeed('stirling', 'THREE', 30),
)
