"""Storage Projection — pure Device → DeviceRecord transformation.

Invariants:
    - Duplicate attribute names: the later attribute in input order wins
    - Timestamps come from the caller; nothing here reads the clock
    - Total over valid Devices: never raises

Design Decisions:
    - Last-write-wins kept deliberately: earlier duplicates are dropped silently
      and callers observe exactly one entry per name
"""

from datetime import datetime

from inventory.core.device import Device, DeviceAttribute, DeviceRecord
from inventory.core.domain_types import GroupId


def fold_attributes(
    attributes: tuple[DeviceAttribute, ...] | list[DeviceAttribute],
) -> dict[str, DeviceAttribute]:
    """Fold attributes into a name-keyed map, later entries overwriting earlier."""
    folded: dict[str, DeviceAttribute] = {}
    for attribute in attributes:
        folded[attribute.name] = attribute
    return folded


def project_device(
    device: Device,
    created_ts: datetime | None,
    updated_ts: datetime | None,
    group: GroupId | None = None,
) -> DeviceRecord:
    """Project a validated Device into its storage form."""
    return DeviceRecord(
        id=device.id,
        attributes=fold_attributes(device.attributes),
        group=group,
        created_ts=created_ts,
        updated_ts=updated_ts,
    )
