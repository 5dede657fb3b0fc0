from src.platform.exception.exceptions import StorageUnavailableError
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.command.charge_for_session_use_case import ChargeForSessionUseCase
from src.service.parking.app.command.release_parking_site_use_case import (
    ReleaseParkingSiteUseCase,
)
from src.service.parking.app.command.reserve_parking_site_use_case import (
    ReserveParkingSiteUseCase,
)
from src.service.parking.app.dto import ReleaseResult
from src.service.parking.domain.entity.parking_session_entity import ParkingSession
from src.service.parking.domain.value_object.storage_key import clean_key, clean_site_key


class ParkingSessionFlowUseCase:
    """
    Reserve a slot, then charge for it; release it when the driver leaves

    Flow:
    1. requested -> reserved: capacity decremented
    2. reserved -> charged: balance debited
    3. charged -> active

    The store has no multi-row transaction, so a failed charge is undone by releasing
    the slot again (reserved -> compensated). A charge whose outcome is unknown
    (timeout on the conditional write) keeps the slot: the user may already have paid.
    A reserve whose outcome is unknown fails the session without a release.
    """

    def __init__(
        self,
        *,
        reserve_use_case: ReserveParkingSiteUseCase,
        release_use_case: ReleaseParkingSiteUseCase,
        charge_use_case: ChargeForSessionUseCase,
    ) -> None:
        self.reserve_use_case = reserve_use_case
        self.release_use_case = release_use_case
        self.charge_use_case = charge_use_case

    @Logger.io
    async def start_session(self, *, username: str, location: str, site: str) -> ParkingSession:
        username = clean_key(username, 'Username')
        location, site = clean_site_key(location, site)
        session = ParkingSession.request(username=username, location=location, site=site)
        target = f'{location}/{site}'

        try:
            reservation = await self.reserve_use_case.reserve(location=location, site=site)
        except Exception as e:
            session.mark_failed()
            if _outcome_unknown(e):
                # Not compensated: releasing a slot that was never taken would over-count
                Logger.base.warning(
                    f'⚠️ [SESSION] Reserve outcome unknown for {username} at {target}, '
                    'a slot may be held until released'
                )
            raise
        session.mark_reserved(available=reservation.available)

        try:
            charge = await self.charge_use_case.charge_for_session(
                username=username, location=location, site=site
            )
        except Exception as e:
            if _outcome_unknown(e):
                Logger.base.warning(
                    f'⚠️ [SESSION] Charge outcome unknown for {username} at {target}, '
                    'keeping the reservation'
                )
            else:
                await self._compensate(session)
            raise

        session.mark_charged(price=charge.price, balance=charge.balance)
        session.activate()
        Logger.base.info(f'🅿️ [SESSION] {username} parked at {target}')
        return session

    @Logger.io
    async def end_session(self, *, location: str, site: str) -> ReleaseResult:
        return await self.release_use_case.release(location=location, site=site)

    async def _compensate(self, session: ParkingSession) -> None:
        target = f'{session.location}/{session.site}'
        try:
            await self.release_use_case.release(location=session.location, site=session.site)
        except Exception as e:
            # The caller still gets the charge error; the stranded slot is only logged
            Logger.base.opt(exception=e).error(
                f'❌ [SESSION] Compensating release failed for {target}: {e}'
            )
            return
        session.mark_compensated()
        Logger.base.info(f'↩️ [SESSION] Reservation at {target} released after failed charge')


def _outcome_unknown(e: Exception) -> bool:
    return isinstance(e, StorageUnavailableError) and e.outcome_unknown
