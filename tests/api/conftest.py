"""API test fixtures — FastAPI test client with a stand-in DeviceInventory.

Invariants:
    - get_device_registration overridden: no lifespan, no database
    - FakeInventory records every device it accepts, or raises a configured error

Design Decisions:
    - Stand-in class over AsyncMock: route tests read stored devices back
"""

import pytest
from httpx import ASGITransport, AsyncClient

from inventory.api.routes.devices import get_device_registration
from inventory.main import app
from inventory.services.device_registration import DeviceRegistration


class FakeInventory:
    """DeviceInventory stand-in."""

    def __init__(self):
        self.devices = []
        self.error: Exception | None = None

    async def add_device(self, device) -> None:
        if self.error is not None:
            raise self.error
        self.devices.append(device)


@pytest.fixture
def inventory():
    return FakeInventory()


@pytest.fixture
async def client(inventory):
    """Test client whose registration handler uses FakeInventory."""
    registration = DeviceRegistration(inventory)
    app.dependency_overrides[get_device_registration] = lambda: registration

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
