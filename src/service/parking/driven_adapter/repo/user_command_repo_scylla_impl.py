from decimal import Decimal

from src.platform.database.scylla_setting import ScyllaDatabase
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.parking.domain.entity.user_entity import User
from src.service.parking.domain.value_object.cas_outcome import CasOutcome
from src.service.parking.driven_adapter.repo.scylla_row_mapper import cas_outcome_from_result


class UserCommandRepoScyllaImpl(IUserCommandRepo):
    """
    ScyllaDB User Command Repository

    Every write is a lightweight transaction so that it is ordered against the
    balance compare-and-swap on the same partition.
    """

    def __init__(self, *, database: ScyllaDatabase) -> None:
        self.database = database

    @Logger.io
    async def create_if_not_exists(self, user: User) -> bool:
        query = f"""
            INSERT INTO {self.database.table('user')} (
                username, password, salt, setting_location, setting_site, balance
            )
            VALUES (%s, %s, %s, %s, %s, %s)
            IF NOT EXISTS
            """

        result = await self.database.write(
            query,
            (
                user.username,
                user.password_hash,
                user.salt,
                user.setting_location,
                user.setting_site,
                user.balance,
            ),
            conditional=True,
        )
        return result.was_applied

    @Logger.io
    async def update_settings(self, *, username: str, location: str, site: str) -> bool:
        # IF EXISTS: a plain UPDATE would upsert a half-empty row for an unknown username
        query = f"""
            UPDATE {self.database.table('user')}
            SET setting_location = %s, setting_site = %s
            WHERE username = %s
            IF EXISTS
            """

        result = await self.database.write(query, (location, site, username), conditional=True)
        return result.was_applied

    @Logger.io
    async def compare_and_set_balance(
        self, *, username: str, expected: Decimal, new: Decimal
    ) -> CasOutcome[Decimal]:
        query = f"""
            UPDATE {self.database.table('user')}
            SET balance = %s
            WHERE username = %s
            IF balance = %s
            """

        result = await self.database.write(query, (new, username, expected), conditional=True)
        return cas_outcome_from_result(result, column='balance', new_value=new)
