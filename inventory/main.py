"""Device Inventory API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map InventoryError → {"error": message} responses
    - DeviceRegistration constructed once on startup with its DeviceInventory
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Registration handler on app.state: explicit wiring, no module-level handler
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from inventory.api.error_handlers import register_error_handlers
from inventory.api.middleware import register_middleware
from inventory.api.routes import devices, health
from inventory.config import get_settings
from inventory.infrastructure.database import init_db
from inventory.infrastructure.device_inventory import SqlDeviceInventory
from inventory.infrastructure.observability import setup_logging
from inventory.services.device_registration import DeviceRegistration

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.device_registration = DeviceRegistration(
        SqlDeviceInventory(manager),
    )
    logger.info("Device inventory API started")
    yield
    await manager.close()
    logger.info("Device inventory API shutting down")


app = FastAPI(
    title="Device Inventory API", version="0.1.0", lifespan=lifespan,
)

settings = get_settings()
register_middleware(app, settings.request_id_header)
register_error_handlers(app)

# Routes — explicit registration
app.include_router(health.router, prefix=settings.api_prefix)
app.include_router(devices.router, prefix=settings.api_prefix)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("inventory.main:app", host="0.0.0.0", port=8080)
