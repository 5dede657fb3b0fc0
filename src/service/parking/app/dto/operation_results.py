"""
Success values of the service operations.

Failures are raised as the typed errors in src.platform.exception.exceptions, so a
caller branches on the exception class, never on a returned string.
"""

from decimal import Decimal

import attrs

from src.service.parking.domain.entity.user_entity import User


@attrs.frozen
class RegistrationResult:
    user: User


@attrs.frozen
class AuthResult:
    user: User


@attrs.frozen
class ReservationResult:
    location: str
    site: str
    available: int
    attempts: int = 1


@attrs.frozen
class ReleaseResult:
    location: str
    site: str
    available: int
    released: bool  # False when the site was already at capacity


@attrs.frozen
class ChargeResult:
    username: str
    location: str
    site: str
    price: Decimal
    balance: Decimal
    attempts: int = 1
