"""
Unit tests for ReserveParkingSiteUseCase / ReleaseParkingSiteUseCase

Focus:
1. Capacity is never oversold under concurrent reservations
2. available stays within [0, capacity]
3. Lost swaps retry from the value the store returned, bounded by max_retries
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import (
    LedgerConflictError,
    SiteFullError,
    SiteNotFoundError,
    ValidationError,
)
from src.service.parking.app.command.reserve_parking_site_use_case import (
    ReserveParkingSiteUseCase,
)
from src.service.parking.domain.entity.parking_site_entity import ParkingSite
from src.service.parking.domain.value_object.cas_outcome import CasOutcome


def _site(*, available: int) -> ParkingSite:
    return ParkingSite(location='stirling', site='ONE', capacity=10, available=available)


async def _create(create_site_use_case, *, capacity: int, location='stirling', site='ONE'):
    return await create_site_use_case.create_site(
        location=location, site=site, capacity=capacity
    )


class TestReserveParkingSite:
    @pytest.mark.asyncio
    async def test_reserve_decrements_available(
        self, create_site_use_case, reserve_use_case, store
    ):
        await _create(create_site_use_case, capacity=3)

        result = await reserve_use_case.reserve(location='stirling', site='ONE')

        assert result.available == 2
        assert result.attempts == 1
        assert store.sites[('stirling', 'ONE')].available == 2

    @pytest.mark.asyncio
    async def test_full_site_is_rejected_without_mutation(
        self, create_site_use_case, reserve_use_case, store
    ):
        await _create(create_site_use_case, capacity=1)
        await reserve_use_case.reserve(location='stirling', site='ONE')

        with pytest.raises(SiteFullError):
            await reserve_use_case.reserve(location='stirling', site='ONE')

        assert store.sites[('stirling', 'ONE')].available == 0

    @pytest.mark.asyncio
    async def test_zero_capacity_site_is_always_full(self, create_site_use_case, reserve_use_case):
        await _create(create_site_use_case, capacity=0)

        with pytest.raises(SiteFullError):
            await reserve_use_case.reserve(location='stirling', site='ONE')

    @pytest.mark.asyncio
    async def test_unknown_site(self, reserve_use_case):
        with pytest.raises(SiteNotFoundError):
            await reserve_use_case.reserve(location='nowhere', site='X')

    @pytest.mark.asyncio
    async def test_padded_keys_reach_the_stored_site(
        self, create_site_use_case, reserve_use_case, store
    ):
        await _create(create_site_use_case, capacity=3, location=' stirling', site='ONE ')

        result = await reserve_use_case.reserve(location='stirling ', site=' ONE')

        assert (result.location, result.site) == ('stirling', 'ONE')
        assert store.sites[('stirling', 'ONE')].available == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize('location, site', [('', 'ONE'), ('stirling', '  ')])
    async def test_empty_key_is_rejected(self, reserve_use_case, location, site):
        with pytest.raises(ValidationError):
            await reserve_use_case.reserve(location=location, site=site)

    @pytest.mark.asyncio
    async def test_reservation_storm_never_oversells(
        self, create_site_use_case, reserve_use_case, store
    ):
        """
        Given: stirling/ONE with capacity 100
        When: 150 reservations run concurrently
        Then: exactly 100 succeed, 50 see SiteFullError, available ends at 0
        """
        await _create(create_site_use_case, capacity=100)

        results = await asyncio.gather(
            *[reserve_use_case.reserve(location='stirling', site='ONE') for _ in range(150)],
            return_exceptions=True,
        )

        successes = [r for r in results if not isinstance(r, Exception)]
        full = [r for r in results if isinstance(r, SiteFullError)]
        assert len(successes) == 100
        assert len(full) == 50
        assert store.sites[('stirling', 'ONE')].available == 0
        assert sorted(r.available for r in successes) == list(range(100))

    @pytest.mark.asyncio
    async def test_lost_swap_retries_from_returned_value(self):
        """
        Given: the store answers the first swap with a newer count
        When: reserve retries
        Then: the second swap expects that count, without re-reading the site
        """
        command_repo = AsyncMock()
        command_repo.compare_and_set_available.side_effect = [
            CasOutcome.conflict(7),
            CasOutcome.success(6),
        ]
        query_repo = AsyncMock()
        query_repo.get.return_value = _site(available=10)
        use_case = ReserveParkingSiteUseCase(
            parking_site_command_repo=command_repo,
            parking_site_query_repo=query_repo,
            max_retries=5,
        )

        result = await use_case.reserve(location='stirling', site='ONE')

        assert result.available == 6
        assert result.attempts == 2
        query_repo.get.assert_awaited_once()
        second_call = command_repo.compare_and_set_available.await_args_list[1]
        assert second_call.kwargs['expected'] == 7
        assert second_call.kwargs['new'] == 6

    @pytest.mark.asyncio
    async def test_exhausted_retries_raise_ledger_conflict(self):
        command_repo = AsyncMock()
        command_repo.compare_and_set_available.return_value = CasOutcome.conflict(10)
        query_repo = AsyncMock()
        query_repo.get.return_value = _site(available=10)
        use_case = ReserveParkingSiteUseCase(
            parking_site_command_repo=command_repo,
            parking_site_query_repo=query_repo,
            max_retries=3,
        )

        with pytest.raises(LedgerConflictError) as exc_info:
            await use_case.reserve(location='stirling', site='ONE')

        assert exc_info.value.attempts == 3
        assert command_repo.compare_and_set_available.await_count == 3

    @pytest.mark.asyncio
    async def test_site_deleted_mid_reservation(self):
        command_repo = AsyncMock()
        command_repo.compare_and_set_available.return_value = CasOutcome.missing()
        query_repo = AsyncMock()
        query_repo.get.return_value = _site(available=10)
        use_case = ReserveParkingSiteUseCase(
            parking_site_command_repo=command_repo,
            parking_site_query_repo=query_repo,
            max_retries=3,
        )

        with pytest.raises(SiteNotFoundError):
            await use_case.reserve(location='stirling', site='ONE')


class TestReleaseParkingSite:
    @pytest.mark.asyncio
    async def test_release_then_reserve_restores_state(
        self, create_site_use_case, reserve_use_case, release_use_case, store
    ):
        await _create(create_site_use_case, capacity=5)
        await reserve_use_case.reserve(location='stirling', site='ONE')

        released = await release_use_case.release(location='stirling', site='ONE')
        assert released.released is True
        assert released.available == 5

        reserved = await reserve_use_case.reserve(location='stirling', site='ONE')
        assert reserved.available == 4
        assert store.sites[('stirling', 'ONE')].available == 4

    @pytest.mark.asyncio
    async def test_release_at_capacity_is_a_noop(
        self, create_site_use_case, release_use_case, store
    ):
        await _create(create_site_use_case, capacity=5)

        result = await release_use_case.release(location='stirling', site='ONE')

        assert result.released is False
        assert result.available == 5
        assert store.sites[('stirling', 'ONE')].available == 5

    @pytest.mark.asyncio
    async def test_concurrent_releases_cap_at_capacity(
        self, create_site_use_case, reserve_use_case, release_use_case, store
    ):
        """
        Given: capacity 10 with 3 slots taken
        When: 8 releases run concurrently
        Then: 3 release a slot, 5 are no-ops, available ends at capacity
        """
        await _create(create_site_use_case, capacity=10)
        for _ in range(3):
            await reserve_use_case.reserve(location='stirling', site='ONE')

        results = await asyncio.gather(
            *[release_use_case.release(location='stirling', site='ONE') for _ in range(8)]
        )

        assert sum(1 for r in results if r.released) == 3
        assert store.sites[('stirling', 'ONE')].available == 10

    @pytest.mark.asyncio
    async def test_unknown_site(self, release_use_case):
        with pytest.raises(SiteNotFoundError):
            await release_use_case.release(location='nowhere', site='X')
