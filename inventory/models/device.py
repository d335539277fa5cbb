"""Device ORM — persists the storage form (DeviceRecord) of a registered device.

Invariants:
    - id is the client-supplied device identifier (String primary key)
    - attributes maps attribute name → {"value": ..., "description": ...}
    - group is never written by registration; preserved across re-registration
    - created_ts set once on insert; updated_ts refreshed on every registration

Design Decisions:
    - JSON column for attributes: open-ended attribute set, no per-attribute table
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from inventory.db.base import Base


class Device(Base):
    """Stored device with its name-keyed attribute map."""
    __tablename__ = "devices"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    attributes: Mapped[dict] = mapped_column(
        JSON, nullable=False, default=dict,
    )
    group: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_ts: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_ts: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
