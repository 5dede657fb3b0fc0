"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.scylla_setting import ScyllaDatabase
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
from src.service.parking.driven_adapter.generator.uuid7_access_code_generator import (
    Uuid7AccessCodeGenerator,
)
from src.service.parking.driven_adapter.repo.parking_site_command_repo_scylla_impl import (
    ParkingSiteCommandRepoScyllaImpl,
)
from src.service.parking.driven_adapter.repo.parking_site_query_repo_scylla_impl import (
    ParkingSiteQueryRepoScyllaImpl,
)
from src.service.parking.driven_adapter.repo.schema_command_repo_scylla_impl import (
    SchemaCommandRepoScyllaImpl,
)
from src.service.parking.driven_adapter.repo.user_command_repo_scylla_impl import (
    UserCommandRepoScyllaImpl,
)
from src.service.parking.driven_adapter.repo.user_query_repo_scylla_impl import (
    UserQueryRepoScyllaImpl,
)
from src.service.parking.driven_adapter.security.bcrypt_credential_manager import (
    BcryptCredentialManager,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (one cluster + pooled session shared by every repository)
    database = providers.Singleton(ScyllaDatabase, settings=config_service)

    # Repositories (stateless, share the database session)
    user_command_repo = providers.Singleton(UserCommandRepoScyllaImpl, database=database)
    user_query_repo = providers.Singleton(UserQueryRepoScyllaImpl, database=database)
    parking_site_command_repo = providers.Singleton(
        ParkingSiteCommandRepoScyllaImpl, database=database
    )
    parking_site_query_repo = providers.Singleton(
        ParkingSiteQueryRepoScyllaImpl, database=database
    )
    schema_command_repo = providers.Singleton(
        SchemaCommandRepoScyllaImpl,
        database=database,
        replication_factor=config_service.provided.SCYLLA_REPLICATION_FACTOR,
    )

    # Pluggable capabilities
    credential_manager = providers.Singleton(
        BcryptCredentialManager, rounds=config_service.provided.BCRYPT_ROUNDS
    )
    access_code_generator = providers.Singleton(Uuid7AccessCodeGenerator)

    # User use cases
    register_user_use_case = providers.Factory(
        RegisterUserUseCase,
        user_command_repo=user_command_repo,
        user_query_repo=user_query_repo,
        credential_manager=credential_manager,
    )
    authenticate_user_use_case = providers.Factory(
        AuthenticateUserUseCase,
        user_query_repo=user_query_repo,
        credential_manager=credential_manager,
    )
    get_user_use_case = providers.Factory(GetUserUseCase, user_query_repo=user_query_repo)
    update_user_settings_use_case = providers.Factory(
        UpdateUserSettingsUseCase,
        user_command_repo=user_command_repo,
        user_query_repo=user_query_repo,
    )

    # Parking site use cases
    create_parking_site_use_case = providers.Factory(
        CreateParkingSiteUseCase,
        parking_site_command_repo=parking_site_command_repo,
        access_code_generator=access_code_generator,
        default_price=config_service.provided.DEFAULT_SITE_PRICE,
    )
    get_parking_site_use_case = providers.Factory(
        GetParkingSiteUseCase, parking_site_query_repo=parking_site_query_repo
    )
    reserve_parking_site_use_case = providers.Factory(
        ReserveParkingSiteUseCase,
        parking_site_command_repo=parking_site_command_repo,
        parking_site_query_repo=parking_site_query_repo,
        max_retries=config_service.provided.RESERVE_MAX_RETRIES,
    )
    release_parking_site_use_case = providers.Factory(
        ReleaseParkingSiteUseCase,
        parking_site_command_repo=parking_site_command_repo,
        parking_site_query_repo=parking_site_query_repo,
        max_retries=config_service.provided.RESERVE_MAX_RETRIES,
    )

    # Balance + session flow
    charge_for_session_use_case = providers.Factory(
        ChargeForSessionUseCase,
        user_command_repo=user_command_repo,
        user_query_repo=user_query_repo,
        parking_site_query_repo=parking_site_query_repo,
        max_retries=config_service.provided.CHARGE_MAX_RETRIES,
        allow_negative_balance=config_service.provided.ALLOW_NEGATIVE_BALANCE,
    )
    parking_session_flow_use_case = providers.Factory(
        ParkingSessionFlowUseCase,
        reserve_use_case=reserve_parking_site_use_case,
        release_use_case=release_parking_site_use_case,
        charge_use_case=charge_for_session_use_case,
    )

    # Schema bootstrap
    bootstrap_schema_use_case = providers.Factory(
        BootstrapSchemaUseCase,
        schema_command_repo=schema_command_repo,
        create_parking_site_use_case=create_parking_site_use_case,
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
