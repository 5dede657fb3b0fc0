from abc import ABC, abstractmethod

from pydantic import SecretStr


class ICredentialManager(ABC):
    """Salted one-way password derivation"""

    @abstractmethod
    def generate_salt(self) -> str:
        """Fresh random salt of fixed length"""
        pass

    @abstractmethod
    def hash(self, *, salt: str, plaintext: SecretStr) -> str:
        """Deterministic digest of (salt, plaintext)"""
        pass

    @abstractmethod
    def verify(self, *, salt: str, plaintext: SecretStr, digest: str) -> bool:
        pass
