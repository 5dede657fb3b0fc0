from collections.abc import Iterable
from typing import List

from src.platform.logging.loguru_io import Logger
from src.service.parking.app.command.create_parking_site_use_case import CreateParkingSiteUseCase
from src.service.parking.app.interface import ISchemaCommandRepo
from src.service.parking.domain.entity.parking_site_entity import ParkingSite
from src.service.parking.domain.value_object.site_seed import DEFAULT_SITE_SEEDS, SiteSeed


class BootstrapSchemaUseCase:
    """Keyspace, tables and seed sites; every step is IF NOT EXISTS so re-runs are harmless"""

    def __init__(
        self,
        *,
        schema_command_repo: ISchemaCommandRepo,
        create_parking_site_use_case: CreateParkingSiteUseCase,
    ) -> None:
        self.schema_command_repo = schema_command_repo
        self.create_parking_site_use_case = create_parking_site_use_case

    @Logger.io
    async def create_all_schema(self, seeds: Iterable[SiteSeed] = DEFAULT_SITE_SEEDS) -> List[str]:
        await self.schema_command_repo.create_keyspace()
        created_tables = [
            await self.schema_command_repo.create_user_table(),
            await self.schema_command_repo.create_parking_site_table(),
        ]
        await self.seed_sites(seeds)

        Logger.base.info(f'🏗️ [SCHEMA] Tables ready: {created_tables}')
        return created_tables

    @Logger.io
    async def seed_sites(self, seeds: Iterable[SiteSeed]) -> List[ParkingSite]:
        return [
            await self.create_parking_site_use_case.create_site(
                location=seed.location,
                site=seed.site,
                capacity=seed.capacity,
                latitude=seed.latitude,
                longitude=seed.longitude,
                price=seed.price,
            )
            for seed in seeds
        ]
