"""
Production FastAPI Application
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import cleanup, container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import dispose_engine, get_engine
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Table Booking] Starting up...')

    container.wire(modules=WIRE_MODULES)
    setup()
    Logger.base.info('🔌 [Table Booking] Dependency injection wired')

    get_engine()
    Logger.base.info('🗄️  [Table Booking] Database engine ready')

    Logger.base.info('✅ [Table Booking] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Table Booking] Shutting down...')

    await dispose_engine()
    Logger.base.info('🗄️  [Table Booking] Database engine disposed')

    container.unwire()
    cleanup()

    Logger.base.info('👋 [Table Booking] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
