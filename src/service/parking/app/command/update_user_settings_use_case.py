from src.platform.exception.exceptions import UserNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.interface import IUserCommandRepo, IUserQueryRepo
from src.service.parking.domain.entity.user_entity import User
from src.service.parking.domain.value_object.storage_key import clean_key, clean_site_key


class UpdateUserSettingsUseCase:
    """Overwrite the preferred location/site; concurrent updates resolve last-writer-wins"""

    def __init__(
        self, *, user_command_repo: IUserCommandRepo, user_query_repo: IUserQueryRepo
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo

    @Logger.io
    async def update_settings(self, *, username: str, location: str, site: str) -> User:
        username = clean_key(username, 'Username')
        location, site = clean_site_key(location, site)

        updated = await self.user_command_repo.update_settings(
            username=username, location=location, site=site
        )
        if not updated:
            raise UserNotFoundError(username)

        user = await self.user_query_repo.get_by_username(username, serial=True)
        if user is None:
            raise UserNotFoundError(username)
        return user
