from src.platform.exception.exceptions import UserNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.interface import IUserQueryRepo
from src.service.parking.domain.entity.user_entity import User
from src.service.parking.domain.value_object.storage_key import clean_key


class GetUserUseCase:
    def __init__(self, *, user_query_repo: IUserQueryRepo) -> None:
        self.user_query_repo = user_query_repo

    @Logger.io
    async def get_user(self, *, username: str) -> User:
        username = clean_key(username, 'Username')
        user = await self.user_query_repo.get_by_username(username)
        if user is None:
            raise UserNotFoundError(username)
        return user
