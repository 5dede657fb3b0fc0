from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.command.parking_session_flow_use_case import (
    ParkingSessionFlowUseCase,
)
from src.service.parking.app.command.reserve_parking_site_use_case import (
    ReserveParkingSiteUseCase,
)
from src.service.parking.app.query.get_parking_site_use_case import GetParkingSiteUseCase
from src.service.parking.driving_adapter.http_controller.schema.parking_site_schema import (
    AvailabilityResponse,
    ParkingSiteResponse,
)


router = APIRouter()


@router.get('/site', response_model=ParkingSiteResponse)
@Logger.io
@inject
async def get_site(
    location: str = Query(...),
    site: str = Query(...),
    get_parking_site_use_case: GetParkingSiteUseCase = Depends(
        Provide[Container.get_parking_site_use_case]
    ),
) -> ParkingSiteResponse:
    parking_site = await get_parking_site_use_case.get_site(location=location, site=site)
    return ParkingSiteResponse(
        location=parking_site.location,
        site=parking_site.site,
        capacity=parking_site.capacity,
        available=parking_site.available,
        latitude=parking_site.latitude,
        longitude=parking_site.longitude,
        price=parking_site.price,
    )


@router.get('/reserve', response_model=AvailabilityResponse)
@Logger.io
@inject
async def reserve(
    location: str = Query(...),
    site: str = Query(...),
    reserve_parking_site_use_case: ReserveParkingSiteUseCase = Depends(
        Provide[Container.reserve_parking_site_use_case]
    ),
) -> AvailabilityResponse:
    result = await reserve_parking_site_use_case.reserve(location=location, site=site)
    return AvailabilityResponse(
        location=result.location, site=result.site, available=result.available
    )


@router.get('/release', response_model=AvailabilityResponse)
@Logger.io
@inject
async def release(
    location: str = Query(...),
    site: str = Query(...),
    parking_session_flow_use_case: ParkingSessionFlowUseCase = Depends(
        Provide[Container.parking_session_flow_use_case]
    ),
) -> AvailabilityResponse:
    result = await parking_session_flow_use_case.end_session(location=location, site=site)
    return AvailabilityResponse(
        location=result.location,
        site=result.site,
        available=result.available,
        released=result.released,
    )
