"""SQL Device Inventory — DeviceInventory implementation over async SQLAlchemy.

Invariants:
    - add_device is an upsert keyed by device id
    - New device: created_ts = updated_ts = now, group unset
    - Existing device: created_ts and group kept, updated_ts = now, incoming
      attributes merged over stored ones by name (incoming wins)
    - Failures surface as DatabaseError via DatabaseSessionManager.session();
      losing a concurrent first insert names the device in the message

Design Decisions:
    - Projection (core/project_device.py) builds the DeviceRecord; this adapter
      only supplies timestamps and translates the record into a row
    - Read-then-write instead of dialect-specific ON CONFLICT: portable across
      PostgreSQL and SQLite; a concurrent first insert of the same id loses
      with an integrity error (500)
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError

from inventory.core.device import Device, DeviceRecord
from inventory.core.errors import DatabaseError, ErrorContext
from inventory.core.project_device import project_device
from inventory.infrastructure.database import DatabaseSessionManager
from inventory.models.device import Device as DeviceModel

logger = logging.getLogger(__name__)


def _attributes_document(record: DeviceRecord) -> dict:
    return {
        name: attribute.to_document()
        for name, attribute in record.attributes.items()
    }


class SqlDeviceInventory:
    """Stores registered devices in the `devices` table."""

    def __init__(self, manager: DatabaseSessionManager):
        self._manager = manager

    async def add_device(self, device: Device) -> None:
        now = datetime.now(timezone.utc)
        async with self._manager.session("upsert") as db:
            existing = await db.get(DeviceModel, device.id)
            if existing is None:
                record = project_device(device, created_ts=now, updated_ts=now)
                db.add(DeviceModel(
                    id=record.id,
                    attributes=_attributes_document(record),
                    group=record.group,
                    created_ts=record.created_ts,
                    updated_ts=record.updated_ts,
                ))
            else:
                record = project_device(
                    device,
                    created_ts=existing.created_ts,
                    updated_ts=now,
                    group=existing.group,
                )
                existing.attributes = {
                    **existing.attributes, **_attributes_document(record),
                }
                existing.updated_ts = record.updated_ts
            try:
                await db.commit()
            except IntegrityError as e:
                raise DatabaseError(
                    f"device {device.id} was registered concurrently",
                    "insert", ErrorContext(device_id=device.id),
                ) from e
        logger.debug(
            "Device upserted",
            extra={"device_id": device.id},
        )
