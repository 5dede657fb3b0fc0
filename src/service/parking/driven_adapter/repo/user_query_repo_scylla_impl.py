from typing import Optional

from src.platform.database.scylla_setting import ScyllaDatabase
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.parking.domain.entity.user_entity import User
from src.service.parking.driven_adapter.repo.scylla_row_mapper import row_to_user


class UserQueryRepoScyllaImpl(IUserQueryRepo):
    def __init__(self, *, database: ScyllaDatabase) -> None:
        self.database = database

    @Logger.io
    async def get_by_username(self, username: str, *, serial: bool = False) -> Optional[User]:
        query = f"""
            SELECT username, password, salt, setting_location, setting_site, balance
            FROM {self.database.table('user')}
            WHERE username = %s
            """

        result = await self.database.read(query, (username,), serial=serial)
        row = result.one()

        if not row:
            return None

        return row_to_user(row)

    @Logger.io
    async def exists(self, username: str) -> bool:
        query = f"""
            SELECT username
            FROM {self.database.table('user')}
            WHERE username = %s
            LIMIT 1
            """

        result = await self.database.read(query, (username,))
        return result.one() is not None
