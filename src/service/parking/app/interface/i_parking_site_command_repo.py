from abc import ABC, abstractmethod

from src.service.parking.domain.entity.parking_site_entity import ParkingSite
from src.service.parking.domain.value_object.cas_outcome import CasOutcome


class IParkingSiteCommandRepo(ABC):
    @abstractmethod
    async def create_if_not_exists(self, parking_site: ParkingSite) -> ParkingSite:
        """Conditional insert; returns the stored site, which is the existing one on a re-run"""
        pass

    @abstractmethod
    async def compare_and_set_available(
        self, *, location: str, site: str, expected: int, new: int
    ) -> CasOutcome[int]:
        pass
