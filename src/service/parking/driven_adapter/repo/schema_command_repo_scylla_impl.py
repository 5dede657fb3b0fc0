from src.platform.database.scylla_setting import ScyllaDatabase
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.interface.i_schema_command_repo import ISchemaCommandRepo


class SchemaCommandRepoScyllaImpl(ISchemaCommandRepo):
    """Idempotent DDL: IF NOT EXISTS lets bootstrap run any number of times"""

    def __init__(self, *, database: ScyllaDatabase, replication_factor: int) -> None:
        self.database = database
        self.replication_factor = replication_factor

    @Logger.io
    async def create_keyspace(self) -> None:
        query = (
            f'CREATE KEYSPACE IF NOT EXISTS {self.database.keyspace} '
            f"WITH replication = {{'class': 'SimpleStrategy', "
            f"'replication_factor': {int(self.replication_factor)}}}"
        )
        await self.database.write(query)

    @Logger.io
    async def create_user_table(self) -> str:
        query = f"""
            CREATE TABLE IF NOT EXISTS {self.database.table('user')} (
                username text,
                password text,
                salt text,
                setting_location text,
                setting_site text,
                balance decimal,
                PRIMARY KEY (username)
            )
            """
        await self.database.write(query)
        return 'user'

    @Logger.io
    async def create_parking_site_table(self) -> str:
        query = f"""
            CREATE TABLE IF NOT EXISTS {self.database.table('parkingsite')} (
                location text,
                site text,
                capacity int,
                available int,
                lat double,
                lon double,
                code text,
                price decimal,
                PRIMARY KEY (location, site)
            )
            """
        await self.database.write(query)
        return 'parkingsite'
