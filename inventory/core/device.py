"""Device Model — wire/domain and storage forms of a device.

Invariants:
    - Device.attributes preserves input order and may hold duplicate names
    - DeviceRecord.attributes is keyed by name (names unique)
    - Device.updated_ts is server-assigned, never read from input
    - Neither form is mutated after construction

Design Decisions:
    - Frozen dataclasses over Pydantic models: core stays free of IO-boundary
      concerns; Pydantic is used only to check the inbound shape (schemas/device.py)
"""

from dataclasses import dataclass, field
from datetime import datetime

from inventory.core.attribute_value import AttributeValue
from inventory.core.domain_types import DeviceId, GroupId


@dataclass(frozen=True)
class DeviceAttribute:
    """A named, typed value of a device."""
    name: str
    value: AttributeValue
    description: str | None = None

    def to_document(self) -> dict:
        """Storage document without the name (the name is the map key)."""
        return {"value": self.value.to_json(), "description": self.description}


@dataclass(frozen=True)
class Device:
    """Device as registered over the API."""
    id: DeviceId
    attributes: tuple[DeviceAttribute, ...] = ()
    updated_ts: datetime | None = None


@dataclass(frozen=True)
class DeviceRecord:
    """Device as stored: attributes folded into a name-keyed map."""
    id: DeviceId
    attributes: dict[str, DeviceAttribute] = field(default_factory=dict)
    group: GroupId | None = None
    created_ts: datetime | None = None
    updated_ts: datetime | None = None
