from abc import ABC, abstractmethod
from typing import Optional

from src.service.parking.domain.entity.parking_site_entity import ParkingSite


class IParkingSiteQueryRepo(ABC):
    @abstractmethod
    async def get(self, *, location: str, site: str) -> Optional[ParkingSite]:
        pass
