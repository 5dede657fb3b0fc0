"""
Unit tests for ChargeForSessionUseCase

Focus:
1. Concurrent charges never lose an update: balance == initial - C * price
2. Negative balance policy
3. Missing site / user
"""

import asyncio
from decimal import Decimal

import pytest

from src.platform.exception.exceptions import (
    InsufficientBalanceError,
    LedgerConflictError,
    SiteNotFoundError,
    UserNotFoundError,
)
from src.service.parking.app.command.charge_for_session_use_case import ChargeForSessionUseCase
from src.service.parking.domain.entity.user_entity import User


@pytest.fixture
async def stirling_one(create_site_use_case):
    return await create_site_use_case.create_site(
        location='stirling', site='ONE', capacity=100, price=Decimal('2.50')
    )


@pytest.fixture
def alice(store):
    store.users['alice'] = User(username='alice', salt='s', balance=Decimal('10.00'))
    return store.users['alice']


class TestChargeForSession:
    @pytest.mark.asyncio
    async def test_charge_debits_site_price(self, charge_use_case, stirling_one, alice, store):
        result = await charge_use_case.charge_for_session(
            username='alice', location='stirling', site='ONE'
        )

        assert result.price == Decimal('2.50')
        assert result.balance == Decimal('7.50')
        assert store.users['alice'].balance == Decimal('7.50')

    @pytest.mark.asyncio
    async def test_padded_keys_charge_the_stored_user(
        self, charge_use_case, stirling_one, alice, store
    ):
        result = await charge_use_case.charge_for_session(
            username=' alice ', location='stirling ', site=' ONE'
        )

        assert result.username == 'alice'
        assert store.users['alice'].balance == Decimal('7.50')

    @pytest.mark.asyncio
    async def test_concurrent_charges_lose_no_update(
        self, charge_use_case, stirling_one, alice, store
    ):
        """
        Given: alice with balance 10.00 and a 2.50 site
        When: 20 charges run concurrently
        Then: every charge lands, balance == 10.00 - 20 * 2.50
        """
        results = await asyncio.gather(
            *[
                charge_use_case.charge_for_session(
                    username='alice', location='stirling', site='ONE'
                )
                for _ in range(20)
            ]
        )

        assert len(results) == 20
        assert store.users['alice'].balance == Decimal('-40.00')
        assert len({r.balance for r in results}) == 20

    @pytest.mark.asyncio
    async def test_negative_balance_allowed_by_default(
        self, charge_use_case, stirling_one, store
    ):
        store.users['bob'] = User(username='bob', salt='s')

        result = await charge_use_case.charge_for_session(
            username='bob', location='stirling', site='ONE'
        )

        assert result.balance == Decimal('-2.50')

    @pytest.mark.asyncio
    async def test_negative_balance_rejected_when_disabled(
        self, user_command_repo, user_query_repo, parking_site_query_repo, stirling_one, store
    ):
        store.users['bob'] = User(username='bob', salt='s', balance=Decimal('1.00'))
        use_case = ChargeForSessionUseCase(
            user_command_repo=user_command_repo,
            user_query_repo=user_query_repo,
            parking_site_query_repo=parking_site_query_repo,
            max_retries=16,
            allow_negative_balance=False,
        )

        with pytest.raises(InsufficientBalanceError):
            await use_case.charge_for_session(username='bob', location='stirling', site='ONE')

        assert store.users['bob'].balance == Decimal('1.00')

    @pytest.mark.asyncio
    async def test_unknown_site(self, charge_use_case, alice):
        with pytest.raises(SiteNotFoundError):
            await charge_use_case.charge_for_session(
                username='alice', location='nowhere', site='X'
            )

    @pytest.mark.asyncio
    async def test_unknown_user(self, charge_use_case, stirling_one):
        with pytest.raises(UserNotFoundError):
            await charge_use_case.charge_for_session(
                username='ghost', location='stirling', site='ONE'
            )

    @pytest.mark.asyncio
    async def test_small_retry_budget_surfaces_ledger_conflict(
        self, user_command_repo, user_query_repo, parking_site_query_repo, stirling_one, alice
    ):
        """
        Given: a retry budget of 1
        When: 5 charges race from the same observed balance
        Then: one lands, the others give up with LedgerConflictError
        """
        use_case = ChargeForSessionUseCase(
            user_command_repo=user_command_repo,
            user_query_repo=user_query_repo,
            parking_site_query_repo=parking_site_query_repo,
            max_retries=1,
            allow_negative_balance=True,
        )

        results = await asyncio.gather(
            *[
                use_case.charge_for_session(username='alice', location='stirling', site='ONE')
                for _ in range(5)
            ],
            return_exceptions=True,
        )

        assert sum(1 for r in results if not isinstance(r, Exception)) == 1
        assert sum(1 for r in results if isinstance(r, LedgerConflictError)) == 4
