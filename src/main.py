"""
Production FastAPI Application

Connects the ScyllaDB session before serving and closes it on shutdown.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from granian import Granian
from granian.constants import Interfaces

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Parking Service] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Parking Service] Dependency injection wired')

    # Fail fast: no point serving without the store
    database = container.database()
    await database.connect()
    await database.warmup()
    Logger.base.info('🔥 [Parking Service] ScyllaDB session warmed up')

    Logger.base.info('✅ [Parking Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Parking Service] Shutting down...')

    await database.close()
    Logger.base.info('🗄️ [Parking Service] ScyllaDB session closed')

    container.unwire()

    Logger.base.info('👋 [Parking Service] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')


def run() -> None:
    """Serve ``src.main:app`` with granian; same as ``granian src.main:app --interface asgi``"""
    Granian(
        'src.main:app',
        address=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        interface=Interfaces.ASGI,
        workers=settings.SERVER_WORKERS,
    ).serve()


if __name__ == '__main__':
    run()
