from pydantic import SecretStr

from src.platform.exception.exceptions import DuplicateUserError, StorageUnavailableError
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.dto import RegistrationResult
from src.service.parking.app.interface import ICredentialManager, IUserCommandRepo, IUserQueryRepo
from src.service.parking.domain.entity.user_entity import User
from src.service.parking.domain.value_object.storage_key import clean_key


class RegisterUserUseCase:
    """
    Register a new user

    Flow:
    1. Validate input (Fail Fast)
    2. Existence pre-check at quorum: skips hashing for names that are obviously taken
    3. Conditional insert (INSERT ... IF NOT EXISTS): the only uniqueness guarantee
    4. If the insert timed out, re-read at serial consistency to learn whether it committed
    """

    def __init__(
        self,
        *,
        user_command_repo: IUserCommandRepo,
        user_query_repo: IUserQueryRepo,
        credential_manager: ICredentialManager,
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo
        self.credential_manager = credential_manager

    @Logger.io
    async def register(self, *, username: str, password: str) -> RegistrationResult:
        User.validate_credentials_input(username, password)
        username = clean_key(username, 'Username')

        if await self.user_query_repo.exists(username):
            raise DuplicateUserError(username)

        salt = self.credential_manager.generate_salt()
        password_hash = self.credential_manager.hash(salt=salt, plaintext=SecretStr(password))
        user = User.register(username=username, password_hash=password_hash, salt=salt)

        try:
            applied = await self.user_command_repo.create_if_not_exists(user)
        except StorageUnavailableError as e:
            if not e.outcome_unknown:
                raise
            applied = await self._verify_unknown_insert(user=user, error=e)

        if not applied:
            # Lost the race to a concurrent registration after passing the pre-check
            raise DuplicateUserError(username)

        Logger.base.info(f'👤 [REGISTER] User {username} registered')
        return RegistrationResult(user=user)

    async def _verify_unknown_insert(self, *, user: User, error: StorageUnavailableError) -> bool:
        Logger.base.warning(
            f'⚠️ [REGISTER] Insert for {user.username} timed out, verifying with serial read'
        )
        stored = await self.user_query_repo.get_by_username(user.username, serial=True)
        if stored is None:
            raise error
        # Our salt is unique to this call, so a matching row can only be our own insert
        return stored.salt == user.salt
