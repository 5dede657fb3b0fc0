from src.platform.exception.exceptions import (
    LedgerConflictError,
    SiteNotFoundError,
    UserNotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.dto import ChargeResult
from src.service.parking.app.interface import (
    IParkingSiteQueryRepo,
    IUserCommandRepo,
    IUserQueryRepo,
)
from src.service.parking.domain.entity.user_entity import User
from src.service.parking.domain.value_object.storage_key import clean_key, clean_site_key


class ChargeForSessionUseCase:
    """
    Debit a user's balance by the price of a parking site

    Optimistic concurrency on ``balance``:
    1. Read the site price and the user's balance b
    2. UPDATE user SET balance = b - price ... IF balance = b
    3. On a lost swap retry with the balance the store returned

    A plain read-then-write would let two concurrent charges both start from b and
    one of them would vanish.
    """

    def __init__(
        self,
        *,
        user_command_repo: IUserCommandRepo,
        user_query_repo: IUserQueryRepo,
        parking_site_query_repo: IParkingSiteQueryRepo,
        max_retries: int,
        allow_negative_balance: bool,
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo
        self.parking_site_query_repo = parking_site_query_repo
        self.max_retries = max_retries
        self.allow_negative_balance = allow_negative_balance

    @Logger.io
    async def charge_for_session(self, *, username: str, location: str, site: str) -> ChargeResult:
        username = clean_key(username, 'Username')
        location, site = clean_site_key(location, site)

        parking_site = await self.parking_site_query_repo.get(location=location, site=site)
        if parking_site is None:
            raise SiteNotFoundError(location, site)

        user = await self.user_query_repo.get_by_username(username)
        if user is None:
            raise UserNotFoundError(username)

        price = parking_site.price
        observed = user.balance
        for attempt in range(1, self.max_retries + 1):
            new_balance = User.debit(
                username=username,
                balance=observed,
                amount=price,
                allow_negative=self.allow_negative_balance,
            )
            outcome = await self.user_command_repo.compare_and_set_balance(
                username=username, expected=observed, new=new_balance
            )
            if outcome.applied:
                Logger.base.info(
                    f'💳 [CHARGE] {username} charged {price} for {location}/{site}, '
                    f'balance {new_balance}'
                )
                return ChargeResult(
                    username=username,
                    location=location,
                    site=site,
                    price=price,
                    balance=new_balance,
                    attempts=attempt,
                )
            if not outcome.row_exists or outcome.current is None:
                raise UserNotFoundError(username)
            observed = outcome.current

        raise LedgerConflictError(
            f'Could not charge {username} after {self.max_retries} attempts',
            attempts=self.max_retries,
        )
