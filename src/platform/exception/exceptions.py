class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    error_code: str = 'error'

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ValidationError(DomainError):
    error_code = 'validation_error'

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class NotFoundError(CustomBaseError):
    error_code = 'not_found'

    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class UserNotFoundError(NotFoundError):
    error_code = 'user_not_found'

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(f'Unknown user: {username}')


class SiteNotFoundError(NotFoundError):
    error_code = 'site_not_found'

    def __init__(self, location: str, site: str) -> None:
        self.location = location
        self.site = site
        super().__init__(f'Unknown parking site: {location}/{site}')


class ConflictError(CustomBaseError):
    error_code = 'conflict'

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class DuplicateUserError(ConflictError):
    error_code = 'duplicate_user'

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__('Username already taken')


class SiteFullError(ConflictError):
    error_code = 'site_full'

    def __init__(self, location: str, site: str) -> None:
        self.location = location
        self.site = site
        super().__init__(f'Parking site {location}/{site} is full')


class LedgerConflictError(ConflictError):
    """Conditional update kept losing to concurrent writers until the retry budget ran out"""

    error_code = 'ledger_conflict'

    def __init__(self, message: str, *, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(message)


class InsufficientBalanceError(ConflictError):
    error_code = 'insufficient_balance'

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(f'Insufficient balance for user {username}')


class AuthenticationError(CustomBaseError):
    error_code = 'authentication_error'

    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class InvalidCredentialsError(AuthenticationError):
    error_code = 'invalid_credentials'

    def __init__(self) -> None:
        super().__init__('Invalid username or password')


class StorageUnavailableError(CustomBaseError):
    """
    The store could not be reached or did not answer in time.

    When raised from a conditional write, ``outcome_unknown`` is True: the write may or
    may not have committed and must be re-verified by a read, not blindly retried.
    """

    error_code = 'storage_unavailable'

    def __init__(self, message: str, *, outcome_unknown: bool = False) -> None:
        self.outcome_unknown = outcome_unknown
        super().__init__(message, 503)


class CryptoUnavailableError(CustomBaseError):
    error_code = 'crypto_unavailable'

    def __init__(self, message: str) -> None:
        super().__init__(message, 500)
