"""Device Routes — device registration endpoint.

Invariants:
    - POST /devices reads the raw body; decoding and validation happen in core
    - 201 with an empty body on success
    - Every failure is raised as InventoryError and rendered by error_handlers.py

Design Decisions:
    - Raw body over a Pydantic body parameter: FastAPI's own validation would
      replace the exact, contract-level error messages
    - DeviceRegistration built once at startup (app.state) and resolved through
      a dependency so tests can override it with a stand-in inventory
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status

from inventory.services.device_registration import DeviceRegistration

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/devices", tags=["devices"])


def get_device_registration(request: Request) -> DeviceRegistration:
    """FastAPI dependency for the registration handler built at startup."""
    return request.app.state.device_registration


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_class=Response,
)
async def add_device(
    request: Request,
    registration: DeviceRegistration = Depends(get_device_registration),
):
    """Register a device with its attributes."""
    body = await request.body()
    await registration.register(body)
    return Response(status_code=status.HTTP_201_CREATED)
