from src.platform.exception.exceptions import SiteNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.interface import IParkingSiteQueryRepo
from src.service.parking.domain.entity.parking_site_entity import ParkingSite
from src.service.parking.domain.value_object.storage_key import clean_site_key


class GetParkingSiteUseCase:
    def __init__(self, *, parking_site_query_repo: IParkingSiteQueryRepo) -> None:
        self.parking_site_query_repo = parking_site_query_repo

    @Logger.io
    async def get_site(self, *, location: str, site: str) -> ParkingSite:
        location, site = clean_site_key(location, site)
        parking_site = await self.parking_site_query_repo.get(location=location, site=site)
        if parking_site is None:
            raise SiteNotFoundError(location, site)
        return parking_site
