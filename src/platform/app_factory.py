"""
FastAPI app assembly shared by the server entrypoint and the HTTP tests.

The caller owns the lifespan: production connects to ScyllaDB there, tests swap in
an in-memory container override instead.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import APIRouter, FastAPI

from src.platform.config.core_setting import settings
from src.platform.exception.exception_handlers import register_exception_handlers
from src.service.parking.driving_adapter.http_controller import (
    parking_site_controller,
    schema_controller,
    user_controller,
)


ROUTERS: tuple[tuple[str, APIRouter], ...] = (
    ('user', user_controller.router),
    ('parking', parking_site_controller.router),
    ('schema', schema_controller.router),
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
) -> FastAPI:
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description='Parking site reservations and per-session charging',
        version=settings.VERSION,
        lifespan=lifespan,
    )
    register_exception_handlers(app)

    for prefix, router in ROUTERS:
        app.include_router(router, prefix=f'/{prefix}', tags=[prefix])

    @app.get('/health')
    async def health_check() -> dict[str, str]:
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}

    return app
