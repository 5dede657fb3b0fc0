from abc import ABC, abstractmethod
from decimal import Decimal

from src.service.parking.domain.entity.user_entity import User
from src.service.parking.domain.value_object.cas_outcome import CasOutcome


class IUserCommandRepo(ABC):
    """User Command Repository Abstract Interface - Handles write operations"""

    @abstractmethod
    async def create_if_not_exists(self, user: User) -> bool:
        """Conditional insert; False when a row with this username already exists"""
        pass

    @abstractmethod
    async def update_settings(self, *, username: str, location: str, site: str) -> bool:
        """Overwrite preferences of an existing user; False when the user does not exist"""
        pass

    @abstractmethod
    async def compare_and_set_balance(
        self, *, username: str, expected: Decimal, new: Decimal
    ) -> CasOutcome[Decimal]:
        pass
