import hmac

import bcrypt
from pydantic import SecretStr

from src.platform.exception.exceptions import CryptoUnavailableError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.interface.i_credential_manager import ICredentialManager


# bcrypt only reads the first 72 bytes; newer releases reject longer input
BCRYPT_MAX_PASSWORD_BYTES = 72


class BcryptCredentialManager(ICredentialManager):
    """bcrypt: the salt is a 29-char '$2b$<cost>$<22 chars>' string, the digest embeds it"""

    def __init__(self, *, rounds: int = 12) -> None:
        self.rounds = rounds

    def generate_salt(self) -> str:
        try:
            return bcrypt.gensalt(rounds=self.rounds).decode('utf-8')
        except (NotImplementedError, OSError) as e:
            raise CryptoUnavailableError(f'Random source unavailable: {e}') from e

    def hash(self, *, salt: str, plaintext: SecretStr) -> str:
        password_bytes = plaintext.get_secret_value().encode('utf-8')
        if len(password_bytes) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValidationError(f'Password cannot exceed {BCRYPT_MAX_PASSWORD_BYTES} bytes')
        try:
            return bcrypt.hashpw(password_bytes, salt.encode('utf-8')).decode('utf-8')
        except ValueError as e:
            raise CryptoUnavailableError(f'Cannot derive password digest: {e}') from e

    @Logger.io
    def verify(self, *, salt: str, plaintext: SecretStr, digest: str) -> bool:
        try:
            derived = self.hash(salt=salt, plaintext=plaintext)
        except ValidationError:
            return False
        return hmac.compare_digest(derived.encode('utf-8'), digest.encode('utf-8'))
