"""Device Registration — decode, validate and persist one inbound device.

Invariants:
    - Received → Decoded → Validated → Persisted, or an InventoryError is raised
    - Validation errors propagate unchanged (400-level, exact messages)
    - Any exception from the persistence capability becomes PersistenceError
      carrying str(exc) verbatim (500)
    - Persistence failures are logged by the API error handler, not here
    - No retries, no partial success: nothing is persisted unless the whole
      payload validated

Design Decisions:
    - Handler object built once with its DeviceInventory (dependency injection):
      no process-wide registration, testable with a stand-in inventory
    - Holds no per-request state: safe to share across concurrent requests
"""

import logging

from inventory.core.decode_device import decode_device
from inventory.core.device import Device
from inventory.core.errors import ErrorContext, PersistenceError
from inventory.core.repository_protocols import DeviceInventory

logger = logging.getLogger(__name__)


class DeviceRegistration:
    """Registers devices against an injected persistence capability."""

    def __init__(self, inventory: DeviceInventory):
        self._inventory = inventory

    async def register(self, body: bytes) -> Device:
        """Decode body and hand the resulting Device to the inventory."""
        device = decode_device(body)
        try:
            await self._inventory.add_device(device)
        except Exception as e:
            raise PersistenceError(
                str(e), ErrorContext(device_id=device.id),
            ) from e
        logger.info(
            f"Registered device with {len(device.attributes)} attribute(s)",
            extra={"device_id": device.id},
        )
        return device
