"""
Unit tests for AuthenticateUserUseCase

Scenario: alice registers with pw1, then tries pw1, pw2 and an unknown username.
"""

import pytest

from src.platform.exception.exceptions import (
    DuplicateUserError,
    InvalidCredentialsError,
    UserNotFoundError,
    ValidationError,
)


class TestAuthenticateUser:
    @pytest.fixture
    async def alice(self, register_use_case):
        return (await register_use_case.register(username='alice', password='pw1')).user

    @pytest.mark.asyncio
    async def test_correct_password_authenticates(self, authenticate_use_case, alice):
        result = await authenticate_use_case.authenticate(username='alice', password='pw1')

        assert result.user.username == 'alice'
        assert result.user.balance == alice.balance

    @pytest.mark.asyncio
    async def test_wrong_password_is_rejected(self, authenticate_use_case, alice):
        with pytest.raises(InvalidCredentialsError):
            await authenticate_use_case.authenticate(username='alice', password='pw2')

    @pytest.mark.asyncio
    async def test_unknown_user_is_rejected(self, authenticate_use_case, alice):
        with pytest.raises(UserNotFoundError):
            await authenticate_use_case.authenticate(username='wrong', password='pw1')

    @pytest.mark.asyncio
    async def test_duplicate_registration_keeps_original_password(
        self, register_use_case, authenticate_use_case, alice
    ):
        """
        Given: alice registered with pw1
        When: someone registers alice again with pw2 (rejected)
        Then: pw1 still authenticates and pw2 does not
        """
        with pytest.raises(DuplicateUserError):
            await register_use_case.register(username='alice', password='pw2')

        await authenticate_use_case.authenticate(username='alice', password='pw1')
        with pytest.raises(InvalidCredentialsError):
            await authenticate_use_case.authenticate(username='alice', password='pw2')

    @pytest.mark.asyncio
    async def test_empty_password_is_a_validation_error(self, authenticate_use_case, alice):
        with pytest.raises(ValidationError):
            await authenticate_use_case.authenticate(username='alice', password='')
