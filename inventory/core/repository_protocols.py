"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Persistence accessed only through DeviceInventory
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test stand-ins need no base class
    - Async in Protocol: implementations do IO; the decoder and projection that
      surround the call stay synchronous and pure
"""

from typing import Protocol

from inventory.core.device import Device


class DeviceInventory(Protocol):
    """Persistence capability for registered devices — implemented by shell.

    add_device returns on success and raises on failure; the exception's
    str() is surfaced to the client verbatim.
    """
    async def add_device(self, device: Device) -> None: ...
