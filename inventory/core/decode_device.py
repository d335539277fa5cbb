"""Request Validator — decodes raw request bytes into a Device or a classified error.

Invariants:
    - Pure function of the input bytes: no IO, no clock, no shared state
    - Check order: empty → JSON syntax → shape → id → every attribute name →
      attribute values (first invalid value in input order)
    - Attribute order preserved from input; duplicate names kept (projection folds them)
    - updated_ts always None on the returned Device

Design Decisions:
    - json.loads with parse_constant: NaN/Infinity are not JSON and are rejected
    - Nesting deep enough to exhaust the parser is a malformed body, not a crash
    - All names checked before any value: a missing name is reported even when
      an earlier attribute also carries an invalid value
"""

import json
from typing import Any

from pydantic import ValidationError

from inventory.core.attribute_value import decode_attribute_value
from inventory.core.device import Device, DeviceAttribute
from inventory.core.domain_types import DeviceId
from inventory.core.errors import (
    ATTRIBUTE_NAME_FIELD,
    ID_FIELD,
    EmptyBodyError,
    ErrorContext,
    MalformedBodyError,
    MissingFieldError,
)
from inventory.schemas.device import DeviceIn


MAX_DEPTH_REASON = "maximum JSON nesting depth exceeded"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name!r}")


def _parse_json(body: bytes) -> Any:
    try:
        return json.loads(body, parse_constant=_reject_constant)
    except ValueError as e:
        raise MalformedBodyError(str(e)) from e
    except RecursionError as e:
        raise MalformedBodyError(MAX_DEPTH_REASON) from e


def _describe_validation_error(exc: ValidationError) -> str:
    """Field-qualified, human-readable description of shape mismatches."""
    parts = []
    for e in exc.errors():
        location = ".".join(str(loc) for loc in e["loc"]) or "device"
        parts.append(f"{location}: {e['msg']}")
    return "; ".join(parts)


def _validate_shape(payload: Any) -> DeviceIn:
    try:
        return DeviceIn.model_validate(payload)
    except ValidationError as e:
        raise MalformedBodyError(_describe_validation_error(e)) from e


def decode_device(body: bytes) -> Device:
    """Decode an inbound registration payload.

    Raises EmptyBodyError, MalformedBodyError, MissingFieldError or
    InvalidAttributeValueError; returns a Device otherwise.
    """
    if not body:
        raise EmptyBodyError()

    payload = _validate_shape(_parse_json(body))
    if not payload.id:
        raise MissingFieldError(ID_FIELD)

    raw_attributes = payload.attributes or []
    for raw in raw_attributes:
        if not raw.name:
            raise MissingFieldError(
                ATTRIBUTE_NAME_FIELD, ErrorContext(device_id=payload.id),
            )

    attributes = []
    for raw in raw_attributes:
        context = ErrorContext(device_id=payload.id, attribute_name=raw.name)
        attributes.append(DeviceAttribute(
            name=raw.name,
            value=decode_attribute_value(raw.value, context),
            description=raw.description,
        ))

    return Device(id=DeviceId(payload.id), attributes=tuple(attributes))
