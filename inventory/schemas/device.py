"""Device Schemas — Pydantic models describing the inbound registration payload.

Invariants:
    - Unknown fields are ignored (group, updated_ts, anything else)
    - id, name and description must be JSON strings when present; no coercion
    - attributes must be a JSON array of objects when present
    - id and name are Optional here: absence is reported as MissingFieldError
      by the decoder, not as a shape mismatch
    - value is untyped here: decode_attribute_value owns its rules

Design Decisions:
    - StrictStr over str: a number in a string field is a shape mismatch,
      never silently stringified
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr


class DeviceAttributeIn(BaseModel):
    """One attribute object as sent by the client."""
    model_config = ConfigDict(extra="ignore")

    name: StrictStr | None = None
    description: StrictStr | None = None
    value: Any = None


class DeviceIn(BaseModel):
    """Registration payload as sent by the client."""
    model_config = ConfigDict(extra="ignore")

    id: StrictStr | None = None
    attributes: list[DeviceAttributeIn] | None = None
