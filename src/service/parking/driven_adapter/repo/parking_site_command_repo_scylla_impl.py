from src.platform.database.scylla_setting import ScyllaDatabase
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.interface.i_parking_site_command_repo import IParkingSiteCommandRepo
from src.service.parking.domain.entity.parking_site_entity import ParkingSite
from src.service.parking.domain.value_object.cas_outcome import CasOutcome
from src.service.parking.driven_adapter.repo.scylla_row_mapper import (
    cas_outcome_from_result,
    row_to_parking_site,
)


class ParkingSiteCommandRepoScyllaImpl(IParkingSiteCommandRepo):
    def __init__(self, *, database: ScyllaDatabase) -> None:
        self.database = database

    @Logger.io
    async def create_if_not_exists(self, parking_site: ParkingSite) -> ParkingSite:
        query = f"""
            INSERT INTO {self.database.table('parkingsite')} (
                location, site, capacity, available, lat, lon, code, price
            )
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
            IF NOT EXISTS
            """

        result = await self.database.write(
            query,
            (
                parking_site.location,
                parking_site.site,
                parking_site.capacity,
                parking_site.available,
                parking_site.latitude,
                parking_site.longitude,
                parking_site.access_code,
                parking_site.price,
            ),
            conditional=True,
        )
        if result.was_applied:
            Logger.base.info(
                f'🅿️ [SCYLLA] Created site {parking_site.location}/{parking_site.site} '
                f'(capacity={parking_site.capacity})'
            )
            return parking_site

        # Already there: the rejected LWT hands back the stored row
        return row_to_parking_site(result.one())

    @Logger.io
    async def compare_and_set_available(
        self, *, location: str, site: str, expected: int, new: int
    ) -> CasOutcome[int]:
        query = f"""
            UPDATE {self.database.table('parkingsite')}
            SET available = %s
            WHERE location = %s AND site = %s
            IF available = %s
            """

        result = await self.database.write(
            query, (new, location, site, expected), conditional=True
        )
        return cas_outcome_from_result(result, column='available', new_value=new)
