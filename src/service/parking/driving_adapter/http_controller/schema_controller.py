from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.command.bootstrap_schema_use_case import BootstrapSchemaUseCase
from src.service.parking.driving_adapter.http_controller.schema.parking_site_schema import (
    SchemaResponse,
)


router = APIRouter()


@router.get('/create', response_model=SchemaResponse)
@Logger.io
@inject
async def create_all_schema(
    bootstrap_schema_use_case: BootstrapSchemaUseCase = Depends(
        Provide[Container.bootstrap_schema_use_case]
    ),
) -> SchemaResponse:
    tables = await bootstrap_schema_use_case.create_all_schema()
    return SchemaResponse(tables=tables)
