from abc import ABC, abstractmethod


class IAccessCodeGenerator(ABC):
    @abstractmethod
    def generate(self, *, location: str, site: str) -> str:
        """Unique opaque code used for on-site validation"""
        pass
