from src.platform.exception.exceptions import LedgerConflictError, SiteNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.dto import ReservationResult
from src.service.parking.app.interface import IParkingSiteCommandRepo, IParkingSiteQueryRepo
from src.service.parking.domain.entity.parking_site_entity import ParkingSite
from src.service.parking.domain.value_object.storage_key import clean_site_key


class ReserveParkingSiteUseCase:
    """
    Take one slot of a parking site

    The decrement is a compare-and-swap on ``available``:
        UPDATE parkingsite SET available = n - 1 ... IF available = n
    A lost swap returns the value the store holds, which becomes ``n`` for the next
    attempt. Every lost swap means another caller committed, so N callers against
    k free slots end with exactly min(N, k) successes.
    """

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
    async def reserve(self, *, location: str, site: str) -> ReservationResult:
        location, site = clean_site_key(location, site)
        parking_site = await self.parking_site_query_repo.get(location=location, site=site)
        if parking_site is None:
            raise SiteNotFoundError(location, site)

        observed = parking_site.available
        for attempt in range(1, self.max_retries + 1):
            # Raises SiteFullError once the observed count reaches zero
            new_available = ParkingSite.available_after_reserve(
                location=location, site=site, available=observed
            )
            outcome = await self.parking_site_command_repo.compare_and_set_available(
                location=location, site=site, expected=observed, new=new_available
            )
            if outcome.applied:
                return ReservationResult(
                    location=location, site=site, available=new_available, attempts=attempt
                )
            if not outcome.row_exists or outcome.current is None:
                raise SiteNotFoundError(location, site)
            observed = outcome.current

        raise LedgerConflictError(
            f'Could not reserve {location}/{site} after {self.max_retries} attempts',
            attempts=self.max_retries,
        )
