from abc import ABC, abstractmethod


class ISchemaCommandRepo(ABC):
    @abstractmethod
    async def create_keyspace(self) -> None:
        pass

    @abstractmethod
    async def create_user_table(self) -> str:
        pass

    @abstractmethod
    async def create_parking_site_table(self) -> str:
        pass
