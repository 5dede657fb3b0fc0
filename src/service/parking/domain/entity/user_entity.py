from decimal import Decimal

import attrs

from src.platform.exception.exceptions import InsufficientBalanceError, ValidationError


# Stored for preferences the user has not chosen yet
NO_PREFERENCE = 'none'


@attrs.define
class User:
    username: str
    password_hash: str = attrs.field(default='', repr=False)  # Hide from repr for security
    salt: str = attrs.field(default='', repr=False)
    setting_location: str = NO_PREFERENCE
    setting_site: str = NO_PREFERENCE
    balance: Decimal = attrs.field(default=Decimal('0'), converter=Decimal)

    @classmethod
    def register(cls, *, username: str, password_hash: str, salt: str) -> 'User':
        return cls(username=username, password_hash=password_hash, salt=salt)

    @staticmethod
    def validate_credentials_input(username: str, password: str) -> None:
        if not username or not username.strip() or not password:
            raise ValidationError('Username / Password cannot be empty')

    @staticmethod
    def debit(
        *, username: str, balance: Decimal, amount: Decimal, allow_negative: bool
    ) -> Decimal:
        """Balance after charging ``amount``; rejects going below zero unless debt is allowed"""
        new_balance = balance - amount
        if new_balance < 0 and not allow_negative:
            raise InsufficientBalanceError(username)
        return new_balance
