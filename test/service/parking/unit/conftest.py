"""
Unit test fixtures for the parking service.

Use cases are built against one shared InMemoryStore per test, wired the same way
the DI container wires them against ScyllaDB.
"""

from decimal import Decimal

import pytest

from src.service.parking.app.command.bootstrap_schema_use_case import BootstrapSchemaUseCase
from src.service.parking.app.command.charge_for_session_use_case import ChargeForSessionUseCase
from src.service.parking.app.command.create_parking_site_use_case import (
    CreateParkingSiteUseCase,
)
from src.service.parking.app.command.parking_session_flow_use_case import (
    ParkingSessionFlowUseCase,
)
from src.service.parking.app.command.register_user_use_case import RegisterUserUseCase
from src.service.parking.app.command.release_parking_site_use_case import (
    ReleaseParkingSiteUseCase,
)
from src.service.parking.app.command.reserve_parking_site_use_case import (
    ReserveParkingSiteUseCase,
)
from src.service.parking.app.command.update_user_settings_use_case import (
    UpdateUserSettingsUseCase,
)
from src.service.parking.app.query.authenticate_user_use_case import AuthenticateUserUseCase
from src.service.parking.app.query.get_parking_site_use_case import GetParkingSiteUseCase
from src.service.parking.app.query.get_user_use_case import GetUserUseCase
from test.service.parking.unit.in_memory_repos import (
    FakeCredentialManager,
    InMemoryParkingSiteCommandRepo,
    InMemoryParkingSiteQueryRepo,
    InMemorySchemaCommandRepo,
    InMemoryStore,
    InMemoryUserCommandRepo,
    InMemoryUserQueryRepo,
    SequentialAccessCodeGenerator,
)


DEFAULT_PRICE = Decimal('2.50')


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def user_command_repo(store):
    return InMemoryUserCommandRepo(store)


@pytest.fixture
def user_query_repo(store):
    return InMemoryUserQueryRepo(store)


@pytest.fixture
def parking_site_command_repo(store):
    return InMemoryParkingSiteCommandRepo(store)


@pytest.fixture
def parking_site_query_repo(store):
    return InMemoryParkingSiteQueryRepo(store)


@pytest.fixture
def credential_manager():
    return FakeCredentialManager()


@pytest.fixture
def register_use_case(user_command_repo, user_query_repo, credential_manager):
    return RegisterUserUseCase(
        user_command_repo=user_command_repo,
        user_query_repo=user_query_repo,
        credential_manager=credential_manager,
    )


@pytest.fixture
def authenticate_use_case(user_query_repo, credential_manager):
    return AuthenticateUserUseCase(
        user_query_repo=user_query_repo, credential_manager=credential_manager
    )


@pytest.fixture
def get_user_use_case(user_query_repo):
    return GetUserUseCase(user_query_repo=user_query_repo)


@pytest.fixture
def update_settings_use_case(user_command_repo, user_query_repo):
    return UpdateUserSettingsUseCase(
        user_command_repo=user_command_repo, user_query_repo=user_query_repo
    )


@pytest.fixture
def create_site_use_case(parking_site_command_repo):
    return CreateParkingSiteUseCase(
        parking_site_command_repo=parking_site_command_repo,
        access_code_generator=SequentialAccessCodeGenerator(),
        default_price=DEFAULT_PRICE,
    )


@pytest.fixture
def get_site_use_case(parking_site_query_repo):
    return GetParkingSiteUseCase(parking_site_query_repo=parking_site_query_repo)


@pytest.fixture
def reserve_use_case(parking_site_command_repo, parking_site_query_repo):
    return ReserveParkingSiteUseCase(
        parking_site_command_repo=parking_site_command_repo,
        parking_site_query_repo=parking_site_query_repo,
        max_retries=256,
    )


@pytest.fixture
def release_use_case(parking_site_command_repo, parking_site_query_repo):
    return ReleaseParkingSiteUseCase(
        parking_site_command_repo=parking_site_command_repo,
        parking_site_query_repo=parking_site_query_repo,
        max_retries=256,
    )


@pytest.fixture
def charge_use_case(user_command_repo, user_query_repo, parking_site_query_repo):
    return ChargeForSessionUseCase(
        user_command_repo=user_command_repo,
        user_query_repo=user_query_repo,
        parking_site_query_repo=parking_site_query_repo,
        max_retries=64,
        allow_negative_balance=True,
    )


@pytest.fixture
def session_flow_use_case(reserve_use_case, release_use_case, charge_use_case):
    return ParkingSessionFlowUseCase(
        reserve_use_case=reserve_use_case,
        release_use_case=release_use_case,
        charge_use_case=charge_use_case,
    )


@pytest.fixture
def bootstrap_use_case(store, create_site_use_case):
    return BootstrapSchemaUseCase(
        schema_command_repo=InMemorySchemaCommandRepo(store),
        create_parking_site_use_case=create_site_use_case,
    )
