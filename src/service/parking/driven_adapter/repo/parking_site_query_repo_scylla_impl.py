from typing import Optional

from src.platform.database.scylla_setting import ScyllaDatabase
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.interface.i_parking_site_query_repo import IParkingSiteQueryRepo
from src.service.parking.domain.entity.parking_site_entity import ParkingSite
from src.service.parking.driven_adapter.repo.scylla_row_mapper import row_to_parking_site


class ParkingSiteQueryRepoScyllaImpl(IParkingSiteQueryRepo):
    def __init__(self, *, database: ScyllaDatabase) -> None:
        self.database = database

    @Logger.io
    async def get(self, *, location: str, site: str) -> Optional[ParkingSite]:
        query = f"""
            SELECT location, site, capacity, available, lat, lon, code, price
            FROM {self.database.table('parkingsite')}
            WHERE location = %s AND site = %s
            """

        result = await self.database.read(query, (location, site))
        row = result.one()

        if not row:
            return None

        return row_to_parking_site(row)
