from decimal import Decimal
from typing import Optional

from src.platform.logging.loguru_io import Logger
from src.service.parking.app.interface import IAccessCodeGenerator, IParkingSiteCommandRepo
from src.service.parking.domain.entity.parking_site_entity import ParkingSite
from src.service.parking.domain.value_object.storage_key import clean_site_key


class CreateParkingSiteUseCase:
    """Create a site with a fresh access code; re-creating an existing site is a no-op"""

    def __init__(
        self,
        *,
        parking_site_command_repo: IParkingSiteCommandRepo,
        access_code_generator: IAccessCodeGenerator,
        default_price: Decimal,
    ) -> None:
        self.parking_site_command_repo = parking_site_command_repo
        self.access_code_generator = access_code_generator
        self.default_price = default_price

    @Logger.io
    async def create_site(
        self,
        *,
        location: str,
        site: str,
        capacity: int,
        latitude: float = 0.0,
        longitude: float = 0.0,
        price: Optional[Decimal] = None,
    ) -> ParkingSite:
        location, site = clean_site_key(location, site)
        parking_site = ParkingSite.create(
            location=location,
            site=site,
            capacity=capacity,
            latitude=latitude,
            longitude=longitude,
            access_code=self.access_code_generator.generate(location=location, site=site),
            price=self.default_price if price is None else price,
        )
        return await self.parking_site_command_repo.create_if_not_exists(parking_site)
