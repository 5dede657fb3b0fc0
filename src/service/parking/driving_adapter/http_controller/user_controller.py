from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.command.parking_session_flow_use_case import (
    ParkingSessionFlowUseCase,
)
from src.service.parking.app.command.register_user_use_case import RegisterUserUseCase
from src.service.parking.app.command.update_user_settings_use_case import (
    UpdateUserSettingsUseCase,
)
from src.service.parking.app.query.authenticate_user_use_case import AuthenticateUserUseCase
from src.service.parking.app.query.get_user_use_case import GetUserUseCase
from src.service.parking.domain.entity.user_entity import User
from src.service.parking.driving_adapter.http_controller.schema.user_schema import (
    ParkingSessionResponse,
    UserResponse,
)


# === API Router ===

router = APIRouter()


def _to_response(user: User) -> UserResponse:
    return UserResponse(
        username=user.username,
        setting_location=user.setting_location,
        setting_site=user.setting_site,
        balance=user.balance,
    )


@router.get('/register', response_class=PlainTextResponse)
@Logger.io
@inject
async def register(
    username: str = Query(''),
    password: str = Query(''),
    register_user_use_case: RegisterUserUseCase = Depends(
        Provide[Container.register_user_use_case]
    ),
) -> str:
    # The mobile client only checks for the literal "true"
    await register_user_use_case.register(username=username, password=password)
    return 'true'


@router.get('/login', response_model=UserResponse)
@Logger.io
@inject
async def login(
    username: str = Query(''),
    password: str = Query(''),
    authenticate_user_use_case: AuthenticateUserUseCase = Depends(
        Provide[Container.authenticate_user_use_case]
    ),
) -> UserResponse:
    result = await authenticate_user_use_case.authenticate(username=username, password=password)
    return _to_response(result.user)


@router.get('', response_model=UserResponse)
@Logger.io
@inject
async def get_user(
    username: str = Query(...),
    get_user_use_case: GetUserUseCase = Depends(Provide[Container.get_user_use_case]),
) -> UserResponse:
    return _to_response(await get_user_use_case.get_user(username=username))


@router.get('/settings', response_model=UserResponse)
@Logger.io
@inject
async def update_settings(
    username: str = Query(...),
    location: str = Query(''),
    site: str = Query(''),
    update_user_settings_use_case: UpdateUserSettingsUseCase = Depends(
        Provide[Container.update_user_settings_use_case]
    ),
) -> UserResponse:
    user = await update_user_settings_use_case.update_settings(
        username=username, location=location, site=site
    )
    return _to_response(user)


@router.get('/charge', response_model=ParkingSessionResponse)
@Logger.io
@inject
async def charge_for_parking(
    username: str = Query(...),
    location: str = Query(...),
    site: str = Query(...),
    parking_session_flow_use_case: ParkingSessionFlowUseCase = Depends(
        Provide[Container.parking_session_flow_use_case]
    ),
) -> ParkingSessionResponse:
    session = await parking_session_flow_use_case.start_session(
        username=username, location=location, site=site
    )
    return ParkingSessionResponse(
        username=session.username,
        location=session.location,
        site=session.site,
        status=session.status.value,
        price=session.price or 0,
        balance=session.balance_after_charge or 0,
        available=session.available_after_reserve or 0,
    )
