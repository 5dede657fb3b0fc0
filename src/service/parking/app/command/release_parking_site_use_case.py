from src.platform.exception.exceptions import LedgerConflictError, SiteNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.dto import ReleaseResult
from src.service.parking.app.interface import IParkingSiteCommandRepo, IParkingSiteQueryRepo
from src.service.parking.domain.entity.parking_site_entity import ParkingSite
from src.service.parking.domain.value_object.storage_key import clean_site_key


class ReleaseParkingSiteUseCase:
    """Give one slot back; ``available`` never goes above ``capacity``"""

    def __init__(
        self,
        *,
        parking_site_command_repo: IParkingSiteCommandRepo,
        parking_site_query_repo: IParkingSiteQueryRepo,
        max_retries: int,
    ) -> None:
        self.parking_site_command_repo = parking_site_command_repo
        self.parking_site_query_repo = parking_site_query_repo
        self.max_retries = max_retries

    @Logger.io
    async def release(self, *, location: str, site: str) -> ReleaseResult:
        location, site = clean_site_key(location, site)
        parking_site = await self.parking_site_query_repo.get(location=location, site=site)
        if parking_site is None:
            raise SiteNotFoundError(location, site)

        observed = parking_site.available
        for _ in range(self.max_retries):
            new_available = ParkingSite.available_after_release(
                available=observed, capacity=parking_site.capacity
            )
            if new_available == observed:
                Logger.base.warning(f'⚠️ [RELEASE] {location}/{site} already at capacity')
                return ReleaseResult(
                    location=location, site=site, available=observed, released=False
                )

            outcome = await self.parking_site_command_repo.compare_and_set_available(
                location=location, site=site, expected=observed, new=new_available
            )
            if outcome.applied:
                return ReleaseResult(
                    location=location, site=site, available=new_available, released=True
                )
            if not outcome.row_exists or outcome.current is None:
                raise SiteNotFoundError(location, site)
            observed = outcome.current

        raise LedgerConflictError(
            f'Could not release {location}/{site} after {self.max_retries} attempts',
            attempts=self.max_retries,
        )
