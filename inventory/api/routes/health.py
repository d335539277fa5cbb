"""Health Checks — is the process up, and can it reach the device store.

Invariants:
    - GET /health/ returns 200 while the process serves requests
    - GET /health/ready returns 200 only when the device store answers a ping,
      else 503 with the same {"error": ...} envelope as every other failure

Design Decisions:
    - db_manager read through its module at call time: init_db sets it in the lifespan
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import inventory.infrastructure.database as db_module

router = APIRouter(prefix="/health", tags=["health"])

DEVICE_STORE_UNAVAILABLE = "device store unavailable"


@router.get("/")
async def liveness():
    return {"status": "ok"}


@router.get("/ready")
async def readiness():
    manager = db_module.db_manager
    if manager is None or not await manager.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"error": DEVICE_STORE_UNAVAILABLE},
        )
    return {"status": "ready"}
