from abc import ABC, abstractmethod
from typing import Optional

from src.service.parking.domain.entity.user_entity import User


class IUserQueryRepo(ABC):
    """User Query Repository Abstract Interface - Handles read operations"""

    @abstractmethod
    async def get_by_username(self, username: str, *, serial: bool = False) -> Optional[User]:
        """``serial=True`` observes every committed conditional write"""
        pass

    @abstractmethod
    async def exists(self, username: str) -> bool:
        pass
