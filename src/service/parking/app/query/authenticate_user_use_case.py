from pydantic import SecretStr

from src.platform.exception.exceptions import InvalidCredentialsError, UserNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.dto import AuthResult
from src.service.parking.app.interface import ICredentialManager, IUserQueryRepo
from src.service.parking.domain.entity.user_entity import User
from src.service.parking.domain.value_object.storage_key import clean_key


class AuthenticateUserUseCase:
    def __init__(
        self, *, user_query_repo: IUserQueryRepo, credential_manager: ICredentialManager
    ) -> None:
        self.user_query_repo = user_query_repo
        self.credential_manager = credential_manager

    @Logger.io
    async def authenticate(self, *, username: str, password: str) -> AuthResult:
        User.validate_credentials_input(username, password)
        username = clean_key(username, 'Username')

        user = await self.user_query_repo.get_by_username(username)
        if user is None:
            raise UserNotFoundError(username)

        if not self.credential_manager.verify(
            salt=user.salt, plaintext=SecretStr(password), digest=user.password_hash
        ):
            raise InvalidCredentialsError()

        return AuthResult(user=user)
